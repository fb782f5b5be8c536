import json
import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import cropvariants
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def full_area() -> dict:
    """Return a complete area mapping."""
    return {"x": 0.0, "y": 0.0, "width": 1.0, "height": 1.0}


@pytest.fixture
def ratios() -> dict:
    """Return two aspect ratios."""
    return {
        "16:9": {"title": "16:9", "value": 16 / 9},
        "4:3": {"title": "4:3", "value": 4 / 3},
    }


@pytest.fixture
def catalog_root(tmp_path: Path) -> Path:
    """Create label catalogs for the library and a provider namespace."""
    (tmp_path / "cropvariants").mkdir()
    (tmp_path / "site").mkdir()
    (tmp_path / "cropvariants" / "locallang.json").write_text(
        json.dumps({
            "crop_variants.desktop.label": "Desktop",
            "crop_variants.mobile.label": "Mobile",
        }),
        encoding="utf-8",
    )
    (tmp_path / "cropvariants" / "de.locallang.json").write_text(
        json.dumps({"crop_variants.desktop.label": "Desktop (DE)"}),
        encoding="utf-8",
    )
    (tmp_path / "site" / "labels.json").write_text(
        json.dumps({"crop_variants.mobile.label": "Phone"}),
        encoding="utf-8",
    )
    return tmp_path
