from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from hostfetch import host as host_mod
from hostfetch.host import (
    CpuCore,
    HostReader,
    arch_tag,
    is_cpu_model,
    parse_cpuinfo_models,
    parse_pretty_name,
    windows_product_name,
)


def test_parse_pretty_name_strips_quotes():
    text = 'NAME="Ubuntu"\nVERSION_ID="22.04"\nPRETTY_NAME="Ubuntu 22.04.3 LTS"\nID=ubuntu\n'
    assert parse_pretty_name(text) == "Ubuntu 22.04.3 LTS"


def test_parse_pretty_name_unquoted_and_single_quoted():
    assert parse_pretty_name("PRETTY_NAME=Arch Linux  \n") == "Arch Linux"
    assert parse_pretty_name("PRETTY_NAME='Fedora Linux 39'\n") == "Fedora Linux 39"


def test_parse_pretty_name_missing():
    with pytest.raises(ValueError):
        parse_pretty_name('NAME="Alpine"\nID=alpine\n')


def test_os_release_read_from_path(tmp_path: Path):
    p = tmp_path / "os-release"
    p.write_text('PRETTY_NAME="Debian GNU/Linux 12 (bookworm)"\n', encoding="utf-8")
    assert HostReader(os_release_path=str(p)).os_release_pretty_name() == "Debian GNU/Linux 12 (bookworm)"


def test_os_release_missing_file_raises(tmp_path: Path):
    with pytest.raises(OSError):
        HostReader(os_release_path=str(tmp_path / "nope")).os_release_pretty_name()


def test_parse_cpuinfo_models():
    text = (
        "processor\t: 0\nmodel name\t: Intel(R) Xeon(R) CPU\ncpu MHz\t\t: 2200.000\n\n"
        "processor\t: 1\nmodel name\t: Intel(R) Xeon(R) CPU\ncpu MHz\t\t: 2200.000\n"
    )
    assert parse_cpuinfo_models(text) == ["Intel(R) Xeon(R) CPU", "Intel(R) Xeon(R) CPU"]


def test_arch_tag():
    assert arch_tag("x86_64") == "x64"
    assert arch_tag("AMD64") == "x64"
    assert arch_tag("aarch64") == "arm64"
    assert arch_tag("i686") == "ia32"
    assert arch_tag("riscv64") == "riscv64"


def test_cpus_linux(tmp_path: Path, monkeypatch):
    info = tmp_path / "cpuinfo"
    info.write_text("model name\t: Fake CPU 9000\n\nmodel name\t: Fake CPU 9000\n", encoding="utf-8")
    monkeypatch.setattr(host_mod.sys, "platform", "linux")
    monkeypatch.setattr(host_mod.psutil, "cpu_count", lambda logical=True: 4)
    freqs = [SimpleNamespace(current=3000.0, max=4000.0), SimpleNamespace(current=0.0, max=4000.0)]
    monkeypatch.setattr(host_mod.psutil, "cpu_freq", lambda percpu=False: freqs if percpu else freqs[0])
    cores = HostReader(cpuinfo_path=str(info)).cpus()
    assert len(cores) == 4
    assert cores[0] == CpuCore("Fake CPU 9000", 3000.0)
    assert cores[1].speed_mhz == 4000.0
    assert all(c.model == "Fake CPU 9000" for c in cores)


def test_cpus_empty_when_no_count(monkeypatch):
    monkeypatch.setattr(host_mod.psutil, "cpu_count", lambda logical=True: None)
    assert HostReader().cpus() == ()


def test_memory_uses_available(monkeypatch):
    vm = SimpleNamespace(total=16 * 1024 ** 3, available=6 * 1024 ** 3, free=1024 ** 3)
    monkeypatch.setattr(host_mod.psutil, "virtual_memory", lambda: vm)
    assert HostReader().memory() == (16 * 1024 ** 3, 6 * 1024 ** 3)


def test_uptime_seconds(monkeypatch):
    monkeypatch.setattr(host_mod.psutil, "boot_time", lambda: 1000.0)
    monkeypatch.setattr(host_mod, "time", SimpleNamespace(time=lambda: 4661.9))
    assert HostReader().uptime_seconds() == 3661


def test_runtime_reports_interpreter():
    rt = HostReader().runtime()
    assert rt.name
    assert rt.version.count(".") >= 1


def test_is_cpu_model_rejects_placeholders():
    assert is_cpu_model("Intel64 Family 6 Model 158 Stepping 13, GenuineIntel", "AMD64")
    assert not is_cpu_model("", "x86_64")
    assert not is_cpu_model("unknown", "aarch64")
    assert not is_cpu_model("aarch64", "aarch64")
    assert not is_cpu_model("x86_64", "x86_64")
    assert not is_cpu_model("arm64", "")


def test_cpu_models_placeholder_processor_is_a_failed_read(tmp_path: Path, monkeypatch):
    info = tmp_path / "cpuinfo"
    info.write_text("processor\t: 0\nBogoMIPS\t: 48.00\nCPU part\t: 0xd08\n", encoding="utf-8")
    monkeypatch.setattr(host_mod.sys, "platform", "linux")
    monkeypatch.setattr(host_mod.platform, "processor", lambda: "unknown")
    with pytest.raises(OSError):
        HostReader(cpuinfo_path=str(info))._cpu_models(4)


def test_windows_product_name():
    assert windows_product_name("Windows 10 Pro", 22631) == "Windows 11 Pro"
    assert windows_product_name("Windows 10 Pro", 19045) == "Windows 10 Pro"
    assert windows_product_name("Windows Server 2022 Datacenter", 20348) == "Windows Server 2022 Datacenter"


def test_platform_version_reads_registry_on_windows(monkeypatch):
    monkeypatch.setattr(host_mod.sys, "platform", "win32")
    monkeypatch.setattr(HostReader, "_windows_product", lambda self: ("Windows 10 Pro", 22631))
    assert HostReader().platform_version() == "Windows 11 Pro"


def test_cpu_count(monkeypatch):
    monkeypatch.setattr(host_mod.psutil, "cpu_count", lambda logical=True: 12)
    assert HostReader().cpu_count() == 12
    monkeypatch.setattr(host_mod.psutil, "cpu_count", lambda logical=True: None)
    assert HostReader().cpu_count() == 0
