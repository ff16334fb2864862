import random
from typing import Optional

import typer

from treefetch.internal.logging import get_logger
from treefetch.kernel.contracts import ArtAsset, ArtSelector

logger = get_logger(__name__)

DEFAULT_ART = ArtSelector.primary.value


class UnknownArtError(ValueError):
    """Raised when an art name does not match a bundled asset."""


# Each line is a sequence of (text, color) segments.
_TREE = (
    (("        ccc8OE88oo", "green"),),
    (("   dB69QO8PdUOpugoO9bD", "green"),),
    ((" CggbU8OU qOp qOdoUOdcb", "green"),),
    (("      6OuU  /p u gcoUodpP", "green"),),
    (("         \\\\//  /", "white"), ("douUP", "green")),
    (("          ||  ||", "white"),),
    (("          ||  ||", "white"),),
    (("    _____//   \\\\____", "white"),),
)

_SNOOPY_TEXT = (
    "⠀⠀    ⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀",
    "⠀⠀⠠⠄⠀⠁⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀",
    "⠀⠀⠀⠀⠀⠀⠁⠀⠀⢀⡠⠤⢀⡀⠀⠀⠀⠀⠀⠀⠀⠀⣀⣠⠤⠤⠀⠀⠀⠀",
    "⠀⠀⠘⠃⠀⠀⣀⡠⠔⠁⠀⠀⠀⠈⢦⠀⠀⠀⠀⢠⡖⠋⠉⠉⠻⡒⠈⠁⠀⠀",
    "⠀⠀⢠⠔⠉⠁⠀⠀⠄⠀⠀⠀⠠⣴⣦⣧⠀⠀⢠⣿⠃⢀⠀⠀⠀⠸⠈⢂⠀⠀",
    "⠀⢠⠁⠀⠀⠀⠀⠀⠀⠀⠀⢠⢳⣿⣿⣿⣄⠄⠉⠁⡔⠞⠢⡀⠀⠀⠀⠀⢄⡀",
    "⣐⣺⡀⠀⠀⠀⠀⠀⠀⠀⠀⡆⣼⣿⣿⡿⠀⠤⠤⠤⠏⠀⠀⠁⠀⠀⢆⠀⠀⡡",
    "⠈⠋⠈⠒⠦⠤⠤⠒⠒⠒⠒⠧⣻⡿⠟⠳⠤⠤⠤⠤⠤⠤⠔⠑⠒⠊⠀⠁⠂⠁",
)
_SNOOPY = tuple(((text, "white"),) for text in _SNOOPY_TEXT)


def _build(name: str, segments) -> ArtAsset:
    lines = tuple(
        "".join(typer.style(text, fg=color) for text, color in line)
        for line in segments
    )
    return ArtAsset(name=name, lines=lines)


ARTS = {
    ArtSelector.primary.value: _build("primary", _TREE),
    ArtSelector.alternate.value: _build("alternate", _SNOOPY),
}


def art_names() -> list[str]:
    return list(ARTS)


def resolve_selector(selector: ArtSelector, rng: Optional[random.Random] = None) -> str:
    """
    Turn a selector into a concrete art name.
    `random` picks uniformly among the bundled assets; call this once per run.
    """
    try:
        selector = ArtSelector(selector)
    except ValueError:
        raise UnknownArtError(f"Unknown art selector: {selector!r}") from None
    if selector is ArtSelector.random:
        choice = (rng or random).choice(art_names())
        logger.debug("Random art resolved", art=choice)
        return choice
    return selector.value


def get_art(name: str = DEFAULT_ART) -> ArtAsset:
    try:
        return ARTS[name]
    except KeyError:
        raise UnknownArtError(f"Unknown art: {name!r} (expected one of {', '.join(ARTS)})") from None
