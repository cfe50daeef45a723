"""
hostfetch: a small terminal system-information summarizer.

Provides:
  - Fetcher / fetch: assemble the report (identity, OS, kernel, engine, uptime, CPU, memory).
  - HostReader: the host queries behind each fact.
  - Per-fact providers with their own caching rules.
"""

__version__ = "0.1.0"

from .fetcher import FetchState, Fetcher, fetch
from .host import CpuCore, HostReader, RuntimeInfo

__all__ = [
    "__version__",
    "CpuCore",
    "FetchState",
    "Fetcher",
    "HostReader",
    "RuntimeInfo",
    "fetch",
]
