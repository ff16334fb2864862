import typer

from treefetch.kernel.contracts import DisplayConfig, FactsRecord
from treefetch.render.width import pad_visible

LABEL_WIDTH = 8


def format_uptime(seconds: int) -> str:
    """
    Format an uptime in seconds as "<d>d <h>h <m>m", "<h>h <m>m" or "<m>m".
    Seconds are never shown; minutes always are.
    """
    days = seconds // 86400
    hours = (seconds % 86400) // 3600
    minutes = (seconds % 3600) // 60

    if days > 0:
        return f"{days}d {hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


def format_memory(used_kib: int, total_kib: int) -> str:
    return f"{used_kib // 1024}MB / {total_kib // 1024}MB"


def format_packages(count: int) -> str:
    return f"(brew) {count}"


def label_line(label: str, value: str, header_color: str) -> str:
    """A bold colored label padded to LABEL_WIDTH visible cells, a space, then the value."""
    styled = typer.style(label, fg=header_color, bold=True)
    return f"{pad_visible(styled, LABEL_WIDTH)} {value}"


def hostname_line(user: str, hostname: str) -> str:
    return "{}@{}".format(
        typer.style(user, fg=typer.colors.GREEN, bold=True),
        typer.style(hostname, fg=typer.colors.GREEN, bold=True),
    )


def build_info_lines(facts: FactsRecord, config: DisplayConfig, user: str) -> list[str]:
    """
    Build the info block in its fixed order, skipping disabled lines.
    The result is not padded; shorter blocks are handled by the layout step.
    """
    color = config.header_color
    lines = []

    if config.show_hostname:
        lines.append(hostname_line(user, facts.hostname))
    if config.show_os:
        lines.append(label_line("OS", facts.os_name, color))
    if config.show_kernel:
        lines.append(label_line("Kernel", facts.kernel_version, color))
    if config.show_cpu:
        lines.append(label_line("Arch", facts.cpu_arch, color))
    if config.show_memory:
        lines.append(label_line("Memory", format_memory(facts.memory_used_kib, facts.memory_total_kib), color))
    if config.show_uptime:
        lines.append(label_line("Uptime", format_uptime(facts.uptime_seconds), color))
    if config.show_shell:
        lines.append(label_line("Shell", facts.shell_path, color))
    if config.show_packages:
        lines.append(label_line("Packages", format_packages(facts.package_count), color))

    return lines
