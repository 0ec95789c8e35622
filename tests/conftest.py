"""
Shared test fixtures.
"""

import logging
from pathlib import Path

import pytest

from bao.commands.common import default_registry
from bao.manifest import Registry
from bao.utils.logger import setup_logger


def write(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


@pytest.fixture(autouse=True)
def _reset_bao_logger():
    """Undo setup_logger() from CLI tests so caplog sees bao.* records."""
    logger = logging.getLogger("bao")
    yield
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    setup_logger._configured = False


@pytest.fixture
def registry() -> Registry:
    return default_registry()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A project root with assets/images, assets/fonts and a favicon."""
    root = tmp_path / "site"
    assets = root / "assets"
    write(assets / "images" / "logo.png", b"\x89PNG logo")
    write(assets / "images" / "icons" / "star.svg", b"<svg>star</svg>")
    write(assets / "fonts" / "a.ttf", b"font-a")
    write(assets / "fonts" / "sub" / "b.ttf", b"font-b")
    write(assets / "fonts" / "LICENSE.txt", b"OFL")
    write(assets / "favicon.ico", b"ico")
    return root
