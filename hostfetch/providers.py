#!/usr/bin/env python3
"""
Fact providers for hostfetch.

Each provider owns one FactRecord and keeps it current through ensure():

  1. read a cheap volatile signal (compute-once providers use a constant),
  2. stop if a formatted value exists and the signal matches the cached key,
  3. otherwise acquire the raw datum from the host,
  4. format raw (or the fallback, if nothing was ever acquired) with the label.

Host failures never leave a provider. They go through attempt(), which turns
any exception into None, and the provider keeps its previous raw value.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, TypeVar

from . import fallbacks
from .formatting import format_ghz, format_memory, format_uptime, strip_trademarks
from .host import CpuCore, RuntimeInfo

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Signal reported by facts that never change during a process lifetime.
COMPUTE_ONCE = "compute-once"


@dataclass
class FactRecord:
    raw: Any
    formatted: str = ""
    cache_key: Any = None


def attempt(fact: str, func: Callable[..., T], *args: Any) -> Optional[T]:
    """
    Run one host query. Returns its value, or None when it raised.

    Failures are logged at DEBUG only; hostfetch degrades silently to the
    fallback or last-known value and never reports them to the user.
    """
    try:
        return func(*args)
    except Exception as e:  # noqa: BLE001
        logger.debug("%s: %s failed: %s: %s", fact, getattr(func, "__name__", func), type(e).__name__, e)
        return None


class Provider:
    """Base class; subclasses set name/label/fallback and implement acquire/render."""

    name = ""
    label = ""
    fallback: Any = None

    def __init__(self, host, record: Optional[FactRecord] = None) -> None:
        self.host = host
        self.record = record if record is not None else self.new_record()

    @classmethod
    def new_record(cls) -> FactRecord:
        return FactRecord(raw=cls.fallback)

    def signal(self) -> Any:
        return COMPUTE_ONCE

    def acquire(self, signal: Any) -> Any:
        raise NotImplementedError

    def render(self, raw: Any) -> str:
        raise NotImplementedError

    def ensure(self) -> None:
        """
        Post: record.formatted is non-empty and reflects the newest reading
        obtainable for the current signal, or the fallback.
        """
        key = attempt(self.name, self.signal)
        rec = self.record
        if rec.formatted and (key is None or key == rec.cache_key):
            return

        if key is not None:
            raw = attempt(self.name, self.acquire, key)
            # None: host query failed, keep the previous (initially fallback) raw value.
            if raw is not None:
                rec.raw = raw
            rec.cache_key = key
        rec.formatted = self.label + self.render(rec.raw)

    def lines(self) -> List[str]:
        return [self.record.formatted]


class IdentityProvider(Provider):
    name = "identity"
    fallback = (fallbacks.UNKNOWN_USER, fallbacks.UNKNOWN_HOST)

    def acquire(self, signal: Any) -> Tuple[str, str]:
        user = attempt(self.name, self.host.username) or fallbacks.UNKNOWN_USER
        host = attempt(self.name, self.host.hostname) or fallbacks.UNKNOWN_HOST
        return user, host

    def render(self, raw: Tuple[str, str]) -> str:
        return f"{raw[0]}@{raw[1]}"

    @property
    def separator(self) -> str:
        return "-" * len(self.record.formatted)

    def lines(self) -> List[str]:
        return [self.record.formatted, self.separator]


class OperatingSystemProvider(Provider):
    name = "os"
    label = "OS: "
    fallback = (fallbacks.UNKNOWN_OS, fallbacks.UNKNOWN_ARCH)

    _FAMILY_NAMES = {"darwin": "macOS", "android": "Android"}

    def acquire(self, signal: Any) -> Tuple[str, str]:
        distro = attempt(self.name, self._distro) or fallbacks.UNKNOWN_OS
        arch = attempt(self.name, self.host.arch) or fallbacks.UNKNOWN_ARCH
        return distro, arch

    def _distro(self) -> str:
        family = self.host.platform_id()
        if family.startswith("linux"):
            # unreadable or PRETTY_NAME-less os-release keeps the family name
            return attempt(self.name, self.host.os_release_pretty_name) or "Linux"
        if family == "win32":
            return self.host.platform_version()
        return self._FAMILY_NAMES.get(family, family)

    def render(self, raw: Tuple[str, str]) -> str:
        return f"{raw[0]} {raw[1]}"


class KernelProvider(Provider):
    name = "kernel"
    label = "Kernel: "
    fallback = fallbacks.UNKNOWN_KERNEL

    def acquire(self, signal: Any) -> str:
        return self.host.kernel_release()

    def render(self, raw: str) -> str:
        return raw


class RuntimeEngineProvider(Provider):
    name = "engine"
    label = "Engine: "

    def acquire(self, signal: Any) -> RuntimeInfo:
        return self.host.runtime()

    def render(self, raw: Optional[RuntimeInfo]) -> str:
        if raw is None:
            return fallbacks.UNKNOWN_ENGINE
        return f"{raw.name} ({raw.version})"


class UptimeProvider(Provider):
    name = "uptime"
    label = "Uptime: "

    def signal(self) -> int:
        return int(self.host.uptime_seconds())

    def acquire(self, signal: int) -> int:
        return signal

    def render(self, raw: Optional[int]) -> str:
        if raw is None:
            return fallbacks.UNKNOWN_UPTIME
        return format_uptime(raw)


class ProcessorProvider(Provider):
    name = "cpu"
    label = "CPU: "

    def signal(self) -> int:
        return int(self.host.cpu_count())

    def acquire(self, signal: int) -> Tuple[CpuCore, ...]:
        cores = tuple(self.host.cpus())
        if not cores:
            raise ValueError("no CPU descriptors reported")
        return cores

    def render(self, raw: Optional[Tuple[CpuCore, ...]]) -> str:
        if not raw:
            return fallbacks.UNKNOWN_CPU
        first = raw[0]
        return f"{strip_trademarks(first.model)} ({len(raw)}) @ {format_ghz(first.speed_mhz)}GHz"


class MemoryProvider(Provider):
    name = "memory"
    label = "Memory: "

    def signal(self) -> Tuple[int, int]:
        total, available = self.host.memory()
        return int(total), int(available)

    def acquire(self, signal: Tuple[int, int]) -> Tuple[int, int]:
        total, available = signal
        if total <= 0:
            raise ValueError(f"implausible total memory: {total}")
        return total, available

    def render(self, raw: Optional[Tuple[int, int]]) -> str:
        if raw is None:
            return fallbacks.UNKNOWN_MEMORY
        return format_memory(*raw)
