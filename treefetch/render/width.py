"""
Visible-width helpers for strings carrying ANSI color codes.

Only complete CSI sequences (ESC [ params letter) are stripped. An unterminated
sequence is left alone and its characters count as visible.
"""
import re

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_ESCAPE_RE.sub("", text)


def visual_width(text: str) -> int:
    """Number of visible characters (codepoints) in text, ignoring ANSI codes."""
    return len(strip_ansi(text))


def max_visual_width(lines) -> int:
    return max((visual_width(line) for line in lines), default=0)


def pad_visible(text: str, width: int) -> str:
    """Right-pad text with spaces to a visible width. Never truncates."""
    padding = width - visual_width(text)
    if padding <= 0:
        return text
    return f"{text}{' ' * padding}"
