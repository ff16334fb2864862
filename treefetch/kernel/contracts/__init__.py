from treefetch.kernel.contracts.contracts import (
    HEADER_COLORS,
    ArtAsset,
    ArtSelector,
    DisplayConfig,
    FactsRecord,
    RenderedLine,
)

__all__ = [
    "HEADER_COLORS",
    "ArtAsset",
    "ArtSelector",
    "DisplayConfig",
    "FactsRecord",
    "RenderedLine",
]
