import platform

from treefetch.facts.base import FactsProvider


class DarwinFactsProvider(FactsProvider):
    """macOS: the marketing version from mac_ver(), not the Darwin kernel release."""

    def os_name(self) -> str:
        version = platform.mac_ver()[0]
        if version:
            return f"macOS {version}"
        return "macOS"
