import os
import platform

from treefetch.facts.base import FactsProvider


class GenericFactsProvider(FactsProvider):
    """Fallback for platforms without a dedicated provider (Windows, BSDs)."""

    def os_name(self) -> str:
        system = platform.system()
        if not system:
            raise RuntimeError("platform.system() returned an empty value")
        return f"{system} {platform.release()}".strip()

    def shell_path(self) -> str:
        shell = os.environ.get("SHELL") or os.environ.get("COMSPEC")
        if not shell:
            raise RuntimeError("neither SHELL nor COMSPEC is set")
        return shell
