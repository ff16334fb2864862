import platform

from treefetch.facts.base import FactsProvider


class LinuxFactsProvider(FactsProvider):
    def os_name(self) -> str:
        """
        Returns PRETTY_NAME from os-release, or "Linux <kernel release>" when the
        file is missing.
        """
        try:
            pretty = platform.freedesktop_os_release().get("PRETTY_NAME", "")
        except OSError:
            pretty = ""
        pretty = " ".join(pretty.split())
        if pretty:
            return pretty
        return f"Linux {platform.release()}".strip()
