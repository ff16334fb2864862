from dataclasses import dataclass
from enum import Enum

# Basic terminal colors understood by typer.style / click.style.
HEADER_COLORS = (
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
    "bright_black", "bright_red", "bright_green", "bright_yellow",
    "bright_blue", "bright_magenta", "bright_cyan", "bright_white",
)


class ArtSelector(str, Enum):
    """
    The art requested on the command line.
    `random` is resolved to one of the named assets once per run.
    """
    primary = "primary"
    alternate = "alternate"
    random = "random"


@dataclass(frozen=True)
class FactsRecord:
    """
    An immutable snapshot of host facts.
    This is a pure data contract with no logic. Memory values are in KiB.
    `memory_used_kib <= memory_total_kib` is expected but not enforced.
    """
    hostname: str
    os_name: str
    kernel_version: str
    cpu_arch: str
    memory_used_kib: int
    memory_total_kib: int
    uptime_seconds: int
    shell_path: str
    package_count: int


@dataclass(frozen=True)
class DisplayConfig:
    """
    Display options chosen once at startup and passed explicitly to the renderer.
    """
    show_hostname: bool = True
    show_os: bool = True
    show_kernel: bool = True
    show_cpu: bool = True
    show_memory: bool = True
    show_uptime: bool = True
    show_shell: bool = True
    show_packages: bool = True
    info_on_left: bool = True
    art: ArtSelector = ArtSelector.primary
    header_color: str = "blue"

    def __post_init__(self):
        if self.header_color not in HEADER_COLORS:
            raise ValueError(f"Unknown header color: {self.header_color!r} (expected one of {', '.join(HEADER_COLORS)})")
        try:
            art = ArtSelector(self.art)
        except ValueError:
            raise ValueError(f"Unknown art selector: {self.art!r}") from None
        object.__setattr__(self, "art", art)


@dataclass(frozen=True)
class ArtAsset:
    """
    A named block of art lines. Lines may carry color escape sequences.
    """
    name: str
    lines: tuple[str, ...]

    def __post_init__(self):
        if not self.name:
            raise ValueError("name cannot be empty")
        if not all(isinstance(line, str) for line in self.lines):
            raise TypeError("All art lines must be strings")


@dataclass(frozen=True)
class RenderedLine:
    """
    One output row before padding. Either side is "" when its block ran out.
    """
    art: str
    info: str
