from treefetch.facts.base import FactsProvider
from treefetch.facts.darwin import DarwinFactsProvider
from treefetch.facts.factory import ProviderFactory
from treefetch.facts.generic import GenericFactsProvider
from treefetch.facts.identity import current_user
from treefetch.facts.linux import LinuxFactsProvider

__all__ = [
    "DarwinFactsProvider",
    "FactsProvider",
    "GenericFactsProvider",
    "LinuxFactsProvider",
    "ProviderFactory",
    "current_user",
]
