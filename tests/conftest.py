"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from nxdt_paths.core import PathLimits
from nxdt_paths.infrastructure.logging import LoggerSetup

MANAGED_ENV_VARS = (
    "NXDT_MAX_COMPONENT_BYTES",
    "NXDT_MAX_PATH_BYTES",
    "NXDT_PATH_SEPARATOR",
    "OUTPUT_PREFIX",
    "OUTPUT_EXTENSION",
    "ASCII_ONLY",
    "VERBOSE",
    "LOG_DIR",
)


@pytest.fixture(autouse=True)
def isolated_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[Path, None, None]:
    """
    Run every test from an empty temporary directory with a clean environment.

    Variables are set then removed so monkeypatch also reverts anything a
    loaded .env file writes into os.environ.
    """
    for name in MANAGED_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)

    yield tmp_path

    LoggerSetup.shutdown()


@pytest.fixture
def default_limits() -> PathLimits:
    """Default element/path limits (255 / 0x301, '/')."""
    return PathLimits()


@pytest.fixture(scope="session")
def multibyte_names() -> list[str]:
    """Names mixing 1, 2, 3 and 4 byte UTF-8 sequences."""
    return [
        "The Legend of Zelda: Breath of the Wild",
        "Pokémon™ Sword",
        "ゼルダの伝説 ティアーズ オブ ザ キングダム",
        "星之卡比 探索發現",
        "Emoji 🎮🕹️ Party",
        "Ünïcödé \"Quotes\" <and> |pipes| ?*",
    ]
