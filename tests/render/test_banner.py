from treefetch.kernel.contracts import ArtAsset, DisplayConfig, FactsRecord
from treefetch.render.art import get_art
from treefetch.render.banner import render_banner
from treefetch.render.width import strip_ansi, visual_width


def test_end_to_end_scenario_info_left(sample_facts):
    config = DisplayConfig(info_on_left=True)
    rows = [strip_ansi(row) for row in render_banner(sample_facts, config, "alice", get_art("primary"))]

    assert len(rows) == 8
    assert any(row.startswith("Memory   2048MB / 8192MB") for row in rows)
    assert any(row.startswith("Uptime   1h 1m") for row in rows)
    assert rows[0].startswith("alice@box")


def test_art_column_is_aligned_when_info_on_left(sample_facts):
    art = get_art("primary")
    rows = render_banner(sample_facts, DisplayConfig(info_on_left=True), "alice", art)
    starts = {visual_width(row[:len(row) - len(art_line)]) for row, art_line in zip(rows, art.lines)}
    assert len(starts) == 1


def test_info_column_is_aligned_when_info_on_right(sample_facts):
    art = get_art("alternate")
    rows = [strip_ansi(row) for row in render_banner(sample_facts, DisplayConfig(info_on_left=False), "alice", art)]
    art_width = max(visual_width(line) for line in art.lines)
    assert rows[0][art_width + 4:] == "alice@box"
    assert rows[5][art_width + 4:] == "Uptime   1h 1m"


def test_shorter_art_than_info(sample_facts):
    tiny_art = ArtAsset(name="tiny", lines=("**",))
    rows = render_banner(sample_facts, DisplayConfig(), "alice", tiny_art)
    assert len(rows) == 8
    assert strip_ansi(rows[-1]).startswith("Packages (brew) 42")


def test_used_memory_above_total_is_printed_as_is():
    facts = FactsRecord(
        hostname="h", os_name="o", kernel_version="k", cpu_arch="a",
        memory_used_kib=8192, memory_total_kib=4096, uptime_seconds=0, shell_path="s", package_count=0,
    )
    rows = [strip_ansi(row) for row in render_banner(facts, DisplayConfig(), "u", get_art())]
    assert any("8MB / 4MB" in row for row in rows)
