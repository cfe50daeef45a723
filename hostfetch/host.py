#!/usr/bin/env python3
"""
Host environment queries for hostfetch.

Every public method on HostReader performs one blocking read of the running
system and either returns a plain value or raises. Callers decide what a failure
means. Only optional sub-readings (cpuinfo, sysctl, cpu_freq) are tolerated here.

Uses psutil for uptime, CPU frequency/count and memory, and the standard
library (getpass, socket, platform, /proc, sysctl) for the rest.
"""
from __future__ import annotations

import getpass
import logging
import platform
import re
import socket
import subprocess
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

import psutil

logger = logging.getLogger(__name__)

OS_RELEASE_PATH = "/etc/os-release"
CPUINFO_PATH = "/proc/cpuinfo"

_PRETTY_NAME_RE = re.compile(r"^PRETTY_NAME=(.*)$", re.MULTILINE)
_MODEL_NAME_RE = re.compile(r"^model name\s*:\s*(.*)$", re.MULTILINE)

_WINDOWS_VERSION_KEY = r"SOFTWARE\Microsoft\Windows NT\CurrentVersion"
_WINDOWS_11_BUILD = 22000

_ARCH_TAGS = {
    "x86_64": "x64",
    "amd64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
}


@dataclass(frozen=True)
class CpuCore:
    model: str
    speed_mhz: float


@dataclass(frozen=True)
class RuntimeInfo:
    name: str
    version: str


def parse_pretty_name(text: str) -> str:
    """
    Extract PRETTY_NAME from os-release content, trimming whitespace and quotes.
    Raises ValueError when the key is absent.
    """
    match = _PRETTY_NAME_RE.search(text)
    if not match:
        raise ValueError("os-release has no PRETTY_NAME entry")
    return match.group(1).strip().strip("\"'").strip()


def parse_cpuinfo_models(text: str) -> List[str]:
    """One 'model name' per logical processor, in /proc/cpuinfo order."""
    return [m.strip() for m in _MODEL_NAME_RE.findall(text)]


def arch_tag(machine: str) -> str:
    return _ARCH_TAGS.get(machine.lower(), machine.lower())


def is_cpu_model(name: str, machine: str = "") -> bool:
    """
    False for placeholders that platform.processor() returns when it has no
    real model name: empty, "unknown", or just the architecture.
    """
    value = name.strip().lower()
    if not value or value == "unknown":
        return False
    return value not in _ARCH_TAGS and value not in _ARCH_TAGS.values() and value != machine.strip().lower()


def windows_product_name(product: str, build: int) -> str:
    """
    Registry ProductName still says "Windows 10" on Windows 11; builds from
    22000 on are Windows 11.
    """
    if build >= _WINDOWS_11_BUILD:
        return product.replace("Windows 10", "Windows 11", 1)
    return product


class HostReader:
    """
    Thin, stateless facade over the host. Tests replace it with a double that
    exposes the same methods.
    """

    def __init__(self, os_release_path: str = OS_RELEASE_PATH, cpuinfo_path: str = CPUINFO_PATH) -> None:
        self.os_release_path = os_release_path
        self.cpuinfo_path = cpuinfo_path

    # ---- identity ----

    def username(self) -> str:
        return getpass.getuser()

    def hostname(self) -> str:
        name = socket.gethostname()
        if not name:
            raise OSError("empty hostname")
        return name

    # ---- operating system ----

    def platform_id(self) -> str:
        """Platform family as sys.platform spells it ('linux', 'win32', 'darwin', ...)."""
        return sys.platform

    def platform_version(self) -> str:
        if sys.platform == "win32":
            try:
                product, build = self._windows_product()
            except (OSError, ValueError) as e:
                logger.debug("registry product name unavailable: %s", e)
                parts = ["Windows", platform.release(), platform.win32_edition() or ""]
                return " ".join(p for p in parts if p)
            return windows_product_name(product, build)
        return platform.version()

    def os_release_pretty_name(self) -> str:
        text = Path(self.os_release_path).read_text(encoding="utf-8", errors="replace")
        return parse_pretty_name(text)

    def arch(self) -> str:
        machine = platform.machine()
        if not machine:
            raise OSError("platform.machine() returned nothing")
        return arch_tag(machine)

    def kernel_release(self) -> str:
        release = platform.release()
        if not release:
            raise OSError("platform.release() returned nothing")
        return release

    # ---- runtime ----

    def runtime(self) -> RuntimeInfo:
        return RuntimeInfo(platform.python_implementation(), platform.python_version())

    # ---- volatile readings ----

    def uptime_seconds(self) -> int:
        return int(time.time() - psutil.boot_time())

    def cpu_count(self) -> int:
        """Logical core count; 0 when psutil cannot tell."""
        return psutil.cpu_count(logical=True) or 0

    def cpus(self) -> Tuple[CpuCore, ...]:
        """Descriptor per logical core. Empty when the platform reports no CPUs."""
        count = self.cpu_count()
        if count == 0:
            return ()
        models = self._cpu_models(count)
        speeds = self._cpu_speeds(count)
        return tuple(CpuCore(models[i], speeds[i]) for i in range(count))

    def memory(self) -> Tuple[int, int]:
        """(total, available) physical memory in bytes."""
        vm = psutil.virtual_memory()
        return int(vm.total), int(vm.available)

    # ---- internals ----

    def _cpu_models(self, count: int) -> List[str]:
        models: List[str] = []
        if sys.platform.startswith("linux"):
            try:
                text = Path(self.cpuinfo_path).read_text(encoding="utf-8", errors="replace")
                models = parse_cpuinfo_models(text)
            except OSError as e:
                logger.debug("cpuinfo unreadable: %s", e)
        elif sys.platform == "darwin":
            brand = self._sysctl("machdep.cpu.brand_string")
            if brand:
                models = [brand]
        if not models:
            fallback = platform.processor() or ""
            models = [fallback] if is_cpu_model(fallback, platform.machine()) else []
        if not models:
            raise OSError("no CPU model name available")
        # pad to one entry per core; some kernels list fewer model names than cores
        return (models + [models[-1]] * count)[:count]

    def _cpu_speeds(self, count: int) -> List[float]:
        try:
            freqs = psutil.cpu_freq(percpu=True) or []
            speeds = [float(f.current or f.max or 0.0) for f in freqs]
            if not speeds:
                total = psutil.cpu_freq()
                speeds = [float(total.current or total.max or 0.0)] if total else []
        except (AttributeError, NotImplementedError, OSError) as e:
            # psutil lacks cpu_freq on some platforms and VMs
            logger.debug("cpu_freq unavailable: %s", e)
            speeds = []
        if not speeds:
            speeds = [0.0]
        return (speeds + [speeds[-1]] * count)[:count]

    def _windows_product(self) -> Tuple[str, int]:
        import winreg

        with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, _WINDOWS_VERSION_KEY) as key:
            product = str(winreg.QueryValueEx(key, "ProductName")[0])
            build = int(winreg.QueryValueEx(key, "CurrentBuildNumber")[0])
        return product, build

    def _sysctl(self, key: str) -> Optional[str]:
        try:
            res = subprocess.run(["sysctl", "-n", key], text=True, capture_output=True, timeout=2)
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("sysctl %s failed: %s", key, e)
            return None
        out = res.stdout.strip()
        return out if res.returncode == 0 and out else None
