"""Codec configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_DEPTH = 32


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for decoding XLPP streams.

    Attributes:
        max_depth: Maximum nesting of Object/Array containers accepted while
            decoding (default 32). A top-level container has depth 1.
            Typical values:
            - Flat sensor payloads: 1 - 4
            - JSON-like documents: 8 - 64

    Examples:
        ```python
        from xlpp import CodecConfig, Reader

        reader = Reader(stream, CodecConfig(max_depth=4))
        ```
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise ValueError(f"max_depth must be an integer >= 1, got {self.max_depth}")
