import platform
from typing import Optional

from treefetch.facts.base import FactsProvider
from treefetch.facts.darwin import DarwinFactsProvider
from treefetch.facts.generic import GenericFactsProvider
from treefetch.facts.linux import LinuxFactsProvider


class ProviderFactory:
    @staticmethod
    def create(system: Optional[str] = None) -> FactsProvider:
        system = system if system is not None else platform.system()
        if system == "Darwin":
            return DarwinFactsProvider()
        elif system == "Linux":
            return LinuxFactsProvider()
        else:
            return GenericFactsProvider()
