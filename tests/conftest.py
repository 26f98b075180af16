from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from plumbkit.aliasing import HomePathAliaser  # noqa: E402
from plumbkit.config import ScaffoldSettings  # noqa: E402

TEMPLATE_TEXT = "#* @get /echo\nfunction(msg = \"\") list(msg = msg)\n"


@pytest.fixture()
def resources(tmp_path: Path) -> Path:
    """A fake resource root holding an executable ``plumber.R`` template."""

    root = tmp_path / "resources"
    template_dir = root / "templates" / "plumber"
    template_dir.mkdir(parents=True)
    template = template_dir / "plumber.R"
    template.write_text(TEMPLATE_TEXT, encoding="utf-8")
    template.chmod(0o750)
    return root


@pytest.fixture()
def settings(resources: Path) -> ScaffoldSettings:
    return ScaffoldSettings(resources_path=resources)


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    path = tmp_path / "home" / "apis"
    path.mkdir(parents=True)
    return path


@pytest.fixture()
def aliaser(tmp_path: Path) -> HomePathAliaser:
    return HomePathAliaser(home=tmp_path / "home")


@pytest.fixture()
def template_text() -> str:
    return TEMPLATE_TEXT
