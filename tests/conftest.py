from __future__ import annotations
from pathlib import Path

import pytest


@pytest.fixture
def proc_net_dev(tmp_path: Path):
    """Return a writer that stores net/dev content in a temp file and gives back its path."""
    path = tmp_path / "dev"

    def write(content: str) -> str:
        path.write_text(content, encoding="utf-8")
        return str(path)

    return write
