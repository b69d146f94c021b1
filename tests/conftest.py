"""Test setup for docindex."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def raw_index() -> dict[str, Any]:
    """A small index in the shape of a framework manual's index.json."""
    return {
        "languages": ["en", "jp"],
        "category": "manual",
        "en": {
            "title": "Manual",
            "description": "Framework manual",
            "contents": {
                "00_quickstart": {
                    "title": "Quickstart",
                    "contents": {
                        "00_quickstart/blog.wiki": {"title": "The Blog Tutorial"},
                    },
                },
                "10_models": {
                    "title": "Models",
                    "contents": {
                        "10_models/zend.wiki": {"title": "Using Zend Framework"},
                        "10_models/sources": {
                            "title": "Data Sources",
                            "contents": {
                                "10_models/sources/mysql.wiki": {"title": "MySQL"},
                            },
                        },
                    },
                },
                "99_about.wiki": {"title": "About"},
            },
        },
        "jp": {"title": "", "description": "", "contents": {}},
    }


@pytest.fixture
def index_file(tmp_path: Path, raw_index: dict[str, Any]) -> Path:
    """The sample index written to disk as JSON."""
    path = tmp_path / "index.json"
    path.write_text(json.dumps(raw_index), encoding="utf-8")
    return path
