import pytest

from treefetch.facts import FactsProvider
from treefetch.internal.logging import reset_logging
from treefetch.kernel.contracts import DisplayConfig, FactsRecord


class StaticFactsProvider(FactsProvider):
    """A provider that returns a fixed record, for driving the CLI without touching the host."""
    def __init__(self, record: FactsRecord):
        self._record = record
        self.collect_calls = 0

    def os_name(self) -> str:
        return self._record.os_name

    def collect(self) -> FactsRecord:
        self.collect_calls += 1
        return self._record


# --- Fixtures ---

@pytest.fixture
def sample_facts():
    """The facts of a small macOS box, used across render and CLI tests."""
    return FactsRecord(
        hostname="box",
        os_name="macOS 14.0",
        kernel_version="23.0.0",
        cpu_arch="arm64",
        memory_used_kib=2_097_152,
        memory_total_kib=8_388_608,
        uptime_seconds=3700,
        shell_path="/bin/zsh",
        package_count=42,
    )


@pytest.fixture
def default_config():
    return DisplayConfig()


@pytest.fixture
def static_provider(sample_facts):
    return StaticFactsProvider(sample_facts)


@pytest.fixture(autouse=True)
def clean_logging():
    """Each test starts and ends with unconfigured logging."""
    reset_logging()
    yield
    reset_logging()
