"""
Pytest configuration and shared fixtures
"""

import json
import sys
from pathlib import Path

import pytest

# Add src to Python path so tests run without installing the package
REPO_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))


@pytest.fixture
def cooleys():
    """A full tune record as exported from the site"""
    return {
        "tune_id": "1",
        "setting_id": "1",
        "name": "Cooley's",
        "type": "reel",
        "meter": "4/4",
        "mode": "Edorian",
        "abc": "|:D2|EBBA B2EB|B2AB dBAG|FDAD BDAD|FDAD dAFD|\r\n"
               "EBBA B2EB|B2AB defg|afec dBAF|DEFD E2:|",
        "date": "2001-05-14 04:27:58",
        "username": "Jeremy",
    }


@pytest.fixture
def two_tunes():
    """Minimal records without the optional fields"""
    return [
        {"tune_id": "10", "setting_id": "1", "name": "A", "type": "jig",
         "meter": "6/8", "mode": "Gmajor", "abc": "GAB cde|"},
        {"tune_id": "20", "setting_id": "2", "name": "B", "type": "reel",
         "meter": "4/4", "mode": "Aminor", "abc": "ABcd efga|"},
    ]


@pytest.fixture
def write_json(tmp_path):
    """Write data as JSON to tmp_path and return the file path"""
    def _write(data, name="tunes.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
