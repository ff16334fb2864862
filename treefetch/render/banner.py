from treefetch.kernel.contracts import ArtAsset, DisplayConfig, FactsRecord
from treefetch.render.info import build_info_lines
from treefetch.render.layout import compose_rows


def render_banner(facts: FactsRecord, config: DisplayConfig, user: str, art: ArtAsset) -> list[str]:
    """Build the full banner as a list of rows, without printing anything."""
    info_lines = build_info_lines(facts, config, user)
    return compose_rows(art.lines, info_lines, info_on_left=config.info_on_left)
