"""Parser configuration for bibparse operations."""

from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 256


@dataclass(frozen=True)
class ParserConfig:
    """Options controlling how tolerant the parser is."""

    strict: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

    @classmethod
    def resolve(cls, config: "ParserConfig | None") -> "ParserConfig":
        """Return ``config`` or the default configuration when it is ``None``.

        Args:
            config: Caller supplied configuration, possibly ``None``

        Returns:
            ParserConfig to use for a parse call
        """
        return cls() if config is None else config
