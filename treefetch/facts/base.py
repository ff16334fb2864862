"""
The facts provider contract and the queries shared by every platform.

Each fact is collected on its own. A failing query falls back to "Unknown"
(text) or 0 (numbers) without affecting the others.
"""
import os
import platform
import time
from abc import ABC, abstractmethod
from typing import Callable, TypeVar

import psutil

from treefetch.facts.packages import count_brew_packages
from treefetch.internal.logging import get_logger
from treefetch.kernel.contracts import FactsRecord

logger = get_logger(__name__)

UNKNOWN = "Unknown"

_ARCH_ALIASES = {
    "aarch64": "arm64",
    "arm64": "arm64",
    "amd64": "x86_64",
    "x86_64": "x86_64",
}

T = TypeVar("T")


def normalize_arch(machine: str) -> str:
    return _ARCH_ALIASES.get(machine.lower(), machine)


class FactsProvider(ABC):
    """
    Base class for platform providers.
    Subclasses supply os_name(); the remaining queries work anywhere psutil does
    and may be overridden.
    """

    @abstractmethod
    def os_name(self) -> str:
        """
        Returns a human-readable operating system name and version.
        """
        pass

    def hostname(self) -> str:
        name = platform.node()
        if not name:
            raise RuntimeError("platform.node() returned an empty name")
        return name

    def kernel_version(self) -> str:
        release = platform.release()
        if not release:
            raise RuntimeError("platform.release() returned an empty value")
        return release

    def cpu_arch(self) -> str:
        machine = platform.machine()
        if not machine:
            raise RuntimeError("platform.machine() returned an empty value")
        return normalize_arch(machine)

    def memory_kib(self) -> tuple[int, int]:
        """
        Returns (used, total) in KiB. Used is total minus available, which counts
        reclaimable cache as used.
        """
        vm = psutil.virtual_memory()
        total = vm.total // 1024
        used = max(vm.total - vm.available, 0) // 1024
        return used, total

    def uptime_seconds(self) -> int:
        return max(int(time.time() - psutil.boot_time()), 0)

    def shell_path(self) -> str:
        shell = os.environ.get("SHELL")
        if not shell:
            raise RuntimeError("SHELL is not set")
        return shell

    def package_count(self) -> int:
        return count_brew_packages()

    def collect(self) -> FactsRecord:
        used_kib, total_kib = self._safe("memory", self.memory_kib, (0, 0))
        record = FactsRecord(
            hostname=self._safe("hostname", self.hostname, UNKNOWN),
            os_name=self._safe("os_name", self.os_name, UNKNOWN),
            kernel_version=self._safe("kernel_version", self.kernel_version, UNKNOWN),
            cpu_arch=self._safe("cpu_arch", self.cpu_arch, UNKNOWN),
            memory_used_kib=used_kib,
            memory_total_kib=total_kib,
            uptime_seconds=self._safe("uptime_seconds", self.uptime_seconds, 0),
            shell_path=self._safe("shell_path", self.shell_path, UNKNOWN),
            package_count=self._safe("package_count", self.package_count, 0),
        )
        logger.debug("Facts collected", provider=type(self).__name__, hostname=record.hostname)
        return record

    @staticmethod
    def _safe(fact: str, query: Callable[[], T], fallback: T) -> T:
        try:
            return query()
        except Exception as e:
            logger.debug("Fact unavailable, using fallback", fact=fact, fallback=fallback, error=str(e))
            return fallback
