from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture()
def write_file(tmp_path: Path) -> Callable[..., Path]:
    def _write(name: str, content: bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _write


@pytest.fixture()
def client():
    from app import app

    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c
