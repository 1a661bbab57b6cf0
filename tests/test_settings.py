import importlib

import config.settings


def test_history_is_unbounded_by_default(monkeypatch):
    monkeypatch.delenv("HISTORY_LIMIT", raising=False)
    monkeypatch.setattr("dotenv.load_dotenv", lambda *args, **kwargs: False)
    settings_module = importlib.reload(config.settings)
    try:
        assert settings_module.Settings().history_limit == 0
    finally:
        monkeypatch.undo()
        importlib.reload(config.settings)


def test_history_limit_from_environment(monkeypatch):
    monkeypatch.setenv("HISTORY_LIMIT", "40")
    settings_module = importlib.reload(config.settings)
    try:
        assert settings_module.Settings().history_limit == 40
    finally:
        monkeypatch.undo()
        importlib.reload(config.settings)
