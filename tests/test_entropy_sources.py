import pytest

from adapters.entropy_sources import DeviceEntropySource, SystemEntropySource, build_entropy_source
from core.config import GeneratorSettings
from core.errors import DependencyError, ReadError
from core.interfaces.entropy import EntropySource


def test_default_settings_use_os_urandom():
    source = build_entropy_source(GeneratorSettings())
    assert isinstance(source, SystemEntropySource)
    assert isinstance(source, EntropySource)


def test_device_setting_selects_device_source(tmp_path):
    source = build_entropy_source(GeneratorSettings(entropy_device=tmp_path / "rand"))
    assert isinstance(source, DeviceEntropySource)
    assert source.path == tmp_path / "rand"


def test_system_source_reads_requested_size():
    source = SystemEntropySource()
    source.check()
    assert len(source.read(64)) == 64


def test_system_source_without_platform_support(monkeypatch):
    def unsupported(size):
        raise NotImplementedError

    monkeypatch.setattr("adapters.entropy_sources.os.urandom", unsupported)
    with pytest.raises(DependencyError):
        SystemEntropySource().check()


def test_system_source_check_maps_os_error_to_dependency_error(monkeypatch):
    def failing(size):
        raise OSError("no entropy")

    monkeypatch.setattr("adapters.entropy_sources.os.urandom", failing)
    with pytest.raises(DependencyError, match="no entropy"):
        SystemEntropySource().check()


def test_system_source_read_failure(monkeypatch):
    def failing(size):
        raise OSError("boom")

    monkeypatch.setattr("adapters.entropy_sources.os.urandom", failing)
    with pytest.raises(ReadError, match="boom"):
        SystemEntropySource().read(4)


def test_device_source_reopens_per_read(tmp_path):
    device = tmp_path / "rand"
    device.write_bytes(b"ABCDEFGH")
    source = DeviceEntropySource(device)
    source.check()
    assert source.read(3) == b"ABC"
    assert source.read(3) == b"ABC"


def test_missing_device_is_a_dependency_error(tmp_path):
    with pytest.raises(DependencyError, match="does not exist"):
        DeviceEntropySource(tmp_path / "missing").check()


def test_directory_device_fails_the_readability_check(tmp_path):
    with pytest.raises(DependencyError, match="is not readable"):
        DeviceEntropySource(tmp_path).check()


def test_device_read_failure_is_a_read_error(tmp_path):
    with pytest.raises(ReadError):
        DeviceEntropySource(tmp_path).read(4)
