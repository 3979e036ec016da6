import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'envpick' and tests/ importable for helpers
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from envpick.core.stdlib_logging import reset_stdlib_logging_for_tests
from envpick.core.utils.paths import CONFIG_DIR_ENV_VAR
from helpers.env import EnvpickTestEnv


@pytest.fixture(autouse=True)
def _isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point envpick at a throwaway config dir so no test touches ~/.envpick."""
    config_dir = tmp_path / "home" / ".envpick"
    monkeypatch.setenv(CONFIG_DIR_ENV_VAR, str(config_dir))
    monkeypatch.delenv("EDITOR", raising=False)
    return config_dir


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    reset_stdlib_logging_for_tests()


@pytest.fixture
def envpick_env(_isolated_config_dir: Path) -> EnvpickTestEnv:
    """Isolated envpick config directory with helpers to write config/state."""
    return EnvpickTestEnv(_isolated_config_dir)
