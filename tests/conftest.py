import sys
from pathlib import Path

import pytest


# Ensure project root is importable for tests
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate config loading from any .env file and inherited variables."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("utils.config.find_dotenv", lambda *args, **kwargs: "")
    for key in ("DATA_DIR", "MENU_RESTAURANTS", "WEEK_HISTORY"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
