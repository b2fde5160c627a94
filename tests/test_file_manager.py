"""Tests for saving snapshots and exported tables."""
import json

import pandas as pd
import pytest

from submission_analytics.data.models import PendingRisk
from submission_analytics.utils.file_manager import FileManager


@pytest.fixture
def file_manager(tmp_path):
    return FileManager(tmp_path)


def test_directory_structure_is_created(file_manager, tmp_path):
    assert (tmp_path / "analysis").is_dir()
    assert (tmp_path / "data" / "exported").is_dir()
    assert not (tmp_path / "temp").exists()


def test_model_is_saved_as_json_with_aliases(file_manager, tmp_path):
    path = file_manager.save_file(
        PendingRisk(total=2, risk_score=0.5), "risk", category="analysis"
    )

    assert path.parent == tmp_path / "analysis"
    assert path.suffix == ".json"
    content = json.loads(path.read_text(encoding="utf-8"))
    assert content == {"total": 2, "riskScore": 0.5, "items": []}


def test_frame_is_saved_as_csv(file_manager, tmp_path):
    frame = pd.DataFrame({"value": [1, 2]}, index=pd.Index(["a", "b"], name="label"))
    path = file_manager.save_file(
        frame, "table", category="data", subcategory="exported"
    )

    assert path.parent == tmp_path / "data" / "exported"
    assert path.suffix == ".csv"
    loaded = pd.read_csv(path, index_col="label")
    assert loaded["value"].tolist() == [1, 2]


def test_existing_file_gets_version_suffix(file_manager):
    model = PendingRisk()
    first = file_manager.save_file(model, "risk", category="analysis")
    second = file_manager.save_file(model, "risk", category="analysis")

    assert first != second
    assert second.stem == f"{first.stem}_v1"
    assert first.exists() and second.exists()


def test_filename_is_sanitized(file_manager):
    path = file_manager.save_file(PendingRisk(), "Fall 2024/risk", category="analysis")
    assert path.name.startswith("Fall_2024_risk_")


def test_unsupported_data_is_rejected(file_manager):
    with pytest.raises(TypeError):
        file_manager.save_file({"total": 1}, "raw", category="analysis")


def test_unknown_category_is_rejected(file_manager):
    with pytest.raises(ValueError):
        file_manager.get_path("temp")
    with pytest.raises(ValueError):
        file_manager.get_path("data", "raw")
