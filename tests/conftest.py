import sys
from collections import Counter
from pathlib import Path

import pytest

# Ensure the hostfetch package is importable when running tests
_ROOT_DIR = Path(__file__).resolve().parents[1]
if str(_ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(_ROOT_DIR))

from hostfetch.host import CpuCore, RuntimeInfo  # noqa: E402


class FakeHost:
    """
    HostReader double. Set attributes to change readings; put a query name in
    `failing` to make it raise. `calls` counts every query.
    """

    def __init__(self):
        self.user = "max"
        self.host = "devbox"
        self.platform = "linux"
        self.version = "#1 SMP PREEMPT_DYNAMIC"
        self.pretty_name = "Ubuntu 22.04.3 LTS"
        self.machine = "x64"
        self.kernel = "6.5.0-14-generic"
        self.engine = RuntimeInfo("CPython", "3.12.1")
        self.uptime = 93780  # 1 day, 2 hours, 3 mins
        self.cores = tuple(CpuCore("Intel(R) Core(TM) i7-9700K", 3600.0) for _ in range(8))
        self.mem = (16 * 1024 ** 3, 8 * 1024 ** 3)
        self.failing = set()
        self.calls = Counter()

    def _read(self, name, value):
        self.calls[name] += 1
        if name in self.failing:
            raise OSError(f"{name} unavailable")
        return value

    def username(self):
        return self._read("username", self.user)

    def hostname(self):
        return self._read("hostname", self.host)

    def platform_id(self):
        return self._read("platform_id", self.platform)

    def platform_version(self):
        return self._read("platform_version", self.version)

    def os_release_pretty_name(self):
        return self._read("os_release_pretty_name", self.pretty_name)

    def arch(self):
        return self._read("arch", self.machine)

    def kernel_release(self):
        return self._read("kernel_release", self.kernel)

    def runtime(self):
        return self._read("runtime", self.engine)

    def uptime_seconds(self):
        return self._read("uptime_seconds", self.uptime)

    def cpu_count(self):
        return self._read("cpu_count", len(self.cores))

    def cpus(self):
        return self._read("cpus", self.cores)

    def memory(self):
        return self._read("memory", self.mem)


ALL_QUERIES = (
    "username", "hostname", "platform_id", "platform_version", "os_release_pretty_name",
    "arch", "kernel_release", "runtime", "uptime_seconds", "cpu_count", "cpus", "memory",
)


@pytest.fixture
def fake_host():
    return FakeHost()


@pytest.fixture
def broken_host():
    h = FakeHost()
    h.failing.update(ALL_QUERIES)
    return h
