# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests:
#   - quiet_config (autouse): diagnostics are not echoed to the
#     console and the config singleton is rebuilt for every test
#   - collector: capturing diagnostic sink
#   - memory_backend / prefs: Preferences over an in-memory document
#   - savegame_text: a small well-formed document
# ==============================================

import pytest

from prefstore.config import reset_config
from prefstore.diagnostics import DiagnosticCollector
from prefstore.persistence import MemoryBackend, Preferences


@pytest.fixture(autouse=True)
def quiet_config(monkeypatch):
    monkeypatch.setenv("PREFSTORE_ECHO_DIAGNOSTICS", "0")
    reset_config()
    yield
    reset_config()


@pytest.fixture
def collector():
    return DiagnosticCollector()


@pytest.fixture
def savegame_text():
    return (
        "# Save game\n"
        ":PlayerData\n"
        "name Bob\n"
        "level 12\n"
        "experience 340\n"
        "\n"
        ":World\n"
        "time 31.5\n"
        "is_raining true\n"
    )


@pytest.fixture
def memory_backend(savegame_text):
    return MemoryBackend(savegame_text)


@pytest.fixture
def prefs(memory_backend, collector):
    return Preferences(backend=memory_backend, sink=collector)
