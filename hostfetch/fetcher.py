#!/usr/bin/env python3
"""
Report assembly for hostfetch.

Fetcher owns one FetchState (all seven fact records) and one provider per fact,
and joins their lines in a fixed order:

    user@host
    ---------
    OS: ...
    Kernel: ...
    Engine: ...
    Uptime: ...
    CPU: ...
    Memory: ...
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .host import HostReader
from .providers import (
    FactRecord,
    IdentityProvider,
    KernelProvider,
    MemoryProvider,
    OperatingSystemProvider,
    ProcessorProvider,
    Provider,
    RuntimeEngineProvider,
    UptimeProvider,
)

logger = logging.getLogger(__name__)


@dataclass
class FetchState:
    """Process-lifetime cache; every record starts at its fact's fallback."""
    identity: FactRecord = field(default_factory=IdentityProvider.new_record)
    os: FactRecord = field(default_factory=OperatingSystemProvider.new_record)
    kernel: FactRecord = field(default_factory=KernelProvider.new_record)
    engine: FactRecord = field(default_factory=RuntimeEngineProvider.new_record)
    uptime: FactRecord = field(default_factory=UptimeProvider.new_record)
    cpu: FactRecord = field(default_factory=ProcessorProvider.new_record)
    memory: FactRecord = field(default_factory=MemoryProvider.new_record)


class Fetcher:
    def __init__(self, host=None, state: Optional[FetchState] = None) -> None:
        self.host = host if host is not None else HostReader()
        self.state = state if state is not None else FetchState()
        self.identity = IdentityProvider(self.host, self.state.identity)
        self.os = OperatingSystemProvider(self.host, self.state.os)
        self.kernel = KernelProvider(self.host, self.state.kernel)
        self.engine = RuntimeEngineProvider(self.host, self.state.engine)
        self.uptime = UptimeProvider(self.host, self.state.uptime)
        self.cpu = ProcessorProvider(self.host, self.state.cpu)
        self.memory = MemoryProvider(self.host, self.state.memory)

    @property
    def providers(self) -> List[Provider]:
        return [self.identity, self.os, self.kernel, self.engine, self.uptime, self.cpu, self.memory]

    def ensure_all(self) -> None:
        for provider in self.providers:
            provider.ensure()

    def lines(self) -> List[str]:
        self.ensure_all()
        out: List[str] = []
        for provider in self.providers:
            out.extend(provider.lines())
        return out

    def fetch(self) -> str:
        """The whole report, newline-joined, without a trailing newline."""
        report = "\n".join(self.lines())
        logger.debug("fetched %d lines", report.count("\n") + 1)
        return report


def fetch(host=None) -> str:
    """One-shot report with a fresh cache."""
    return Fetcher(host).fetch()
