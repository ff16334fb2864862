from treefetch.render.art import ARTS, UnknownArtError, get_art, resolve_selector
from treefetch.render.banner import render_banner
from treefetch.render.info import build_info_lines, format_uptime
from treefetch.render.layout import compose_rows, interleave, print_rows
from treefetch.render.width import strip_ansi, visual_width

__all__ = [
    "ARTS",
    "UnknownArtError",
    "build_info_lines",
    "compose_rows",
    "format_uptime",
    "get_art",
    "interleave",
    "print_rows",
    "render_banner",
    "resolve_selector",
    "strip_ansi",
    "visual_width",
]
