import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def text_stamp_file(tmp_path: Path) -> Callable[[list[str]], Path]:
    def _create(lines: list[str]) -> Path:
        file_path = tmp_path / "stamps.txt"
        file_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return file_path

    return _create


@pytest.fixture
def json_stamp_file(tmp_path: Path) -> Callable[[list[dict[str, Any] | str]], Path]:
    def _create(entries: list[dict[str, Any] | str]) -> Path:
        file_path = tmp_path / "stamps.jsonl"
        with file_path.open("w", encoding="utf-8") as f:
            for entry in entries:
                f.write((entry if isinstance(entry, str) else json.dumps(entry)) + "\n")
        return file_path

    return _create
