"""Type definitions for bibparse data structures."""

# Type aliases for common data structures
TagMap = dict[str, str]
TagPair = tuple[str, str]
