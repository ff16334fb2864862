"""
Side-by-side composition of the art block and the info block.

Everything here is pure except print_rows, which is the single place the
banner reaches standard output.
"""
from typing import Callable, Sequence

import typer

from treefetch.kernel.contracts import RenderedLine
from treefetch.render.width import max_visual_width, visual_width

GUTTER = 4


def interleave(art_lines: Sequence[str], info_lines: Sequence[str]) -> list[RenderedLine]:
    """Pair art and info lines row by row; the shorter block contributes ""."""
    row_count = max(len(art_lines), len(info_lines))
    return [
        RenderedLine(
            art=art_lines[i] if i < len(art_lines) else "",
            info=info_lines[i] if i < len(info_lines) else "",
        )
        for i in range(row_count)
    ]


def compose_rows(art_lines: Sequence[str], info_lines: Sequence[str], info_on_left: bool = True) -> list[str]:
    """
    Join both blocks into printable rows.
    The leading block is padded to its widest line plus the gutter so the
    trailing block starts in the same column on every row.
    """
    art_width = max_visual_width(art_lines)
    info_width = max_visual_width(info_lines)

    rows = []
    for line in interleave(art_lines, info_lines):
        if info_on_left:
            pad = " " * (GUTTER + info_width - visual_width(line.info))
            rows.append(f"{line.info}{pad}{line.art}")
        else:
            pad = " " * (GUTTER + art_width - visual_width(line.art))
            rows.append(f"{line.art}{pad}{line.info}")
    return rows


def print_rows(rows: Sequence[str], echo: Callable[[str], None] = typer.echo) -> None:
    for row in rows:
        echo(row)
