import pytest

from nlu_features.log.logger_singleton import resetLogger


@pytest.fixture(autouse=True)
def isolated_logger(monkeypatch, tmp_path):
    """Point the shared logger at a per-test directory and rebuild it."""
    monkeypatch.setenv("NLU_FEATURES_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("NLU_FEATURES_LOG_PREFIX", "test")
    monkeypatch.setenv("NLU_FEATURES_LOG_CONSOLE", "false")
    resetLogger()
    yield tmp_path / "logs"
    resetLogger()
