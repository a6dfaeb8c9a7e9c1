from __future__ import annotations

from pathlib import Path

import pytest

from config.logging_config import setup_logging

SCENARIO_ARTICLES = {
    "a/article1.txt": "Cancer cancer CANCER cancer. cancer, breast breast Breast breast. xyz xyz",
    "a/article2.txt": "A short note on cancer screening.",
    "b/article3.txt": "Nothing to see here.",
}


@pytest.fixture(autouse=True)
def _detach_console_logging():
    yield
    setup_logging(log_level="INFO", console=False)


@pytest.fixture()
def make_corpus(tmp_path: Path):
    def _make(files: dict[str, str | bytes]) -> Path:
        root = tmp_path / "corpus"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture()
def scenario_corpus(make_corpus) -> Path:
    return make_corpus(SCENARIO_ARTICLES)


@pytest.fixture()
def scenario_dictionary(tmp_path: Path) -> Path:
    path = tmp_path / "dictionary.txt"
    path.write_text("cancer\nbreast\n", encoding="utf-8")
    return path
