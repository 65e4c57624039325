import json
from pathlib import Path

import pytest

from fancyzonegen.config import Settings, get_settings


def canvas_layout(name: str, width: int = 1920, height: int = 1080) -> dict:
    return {
        "uuid": "{" + name + "}",
        "name": name,
        "type": "canvas",
        "info": {
            "ref-width": width,
            "ref-height": height,
            "zones": [{"X": 0, "Y": 0, "width": width, "height": height}],
            "sensitivity-radius": 20,
        },
    }


def grid_layout(name: str) -> dict:
    return {
        "uuid": "{" + name + "}",
        "name": name,
        "type": "grid",
        "info": {"rows": 1, "columns": 2, "rows-percentage": [10000]},
    }


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_layouts(tmp_path):
    """Write a custom-layouts.json with the given entries and return its path."""

    def _write(layouts, path: Path | None = None) -> Path:
        path = path or tmp_path / "custom-layouts.json"
        path.write_text(json.dumps({"custom-layouts": layouts}, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings_for():
    def _settings(path: Path) -> Settings:
        return Settings(config_file=path)

    return _settings
