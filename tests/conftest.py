import pytest

from nes_conformance import suite

from stub_cpus import FAKE_ROM, RecordingCpu


@pytest.fixture
def fake_rom(monkeypatch):
    """Serve FAKE_ROM in place of the bundled images. Yields requested names."""
    requested = []

    def load(name):
        requested.append(name)
        return FAKE_ROM

    monkeypatch.setattr(suite, "load_rom", load)
    return requested


@pytest.fixture
def recording_cpu():
    RecordingCpu.calls = []
    yield RecordingCpu
    RecordingCpu.calls = []
