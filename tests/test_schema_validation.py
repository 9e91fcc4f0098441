from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from memorytiles.paths import get_paths
from memorytiles.services.content import ContentError, ContentService


def test_content_schemas_validate() -> None:
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    content.validate_all()


def test_shipped_rules_and_pool() -> None:
    paths = get_paths()
    content = ContentService(paths.data_dir, paths.schema_dir)
    rules = content.load_rules()
    pool = content.load_symbols()

    assert rules.allowed_counts == (16, 20, 24, 28, 32)
    assert rules.default_count == 16
    assert rules.mismatch_delay == pytest.approx(0.7)
    assert rules.tick_interval == pytest.approx(1.0)
    assert len(pool.symbols) == 50
    assert pool.max_cards == 100
    assert pool.name_for("🍎") == "apple"


def _content_copy(tmp_path: Path) -> tuple[ContentService, Path]:
    paths = get_paths()
    data_dir = tmp_path / "data"
    shutil.copytree(paths.data_dir, data_dir)
    return ContentService(data_dir, data_dir / "schemas"), data_dir


def test_schema_violation_is_reported(tmp_path: Path) -> None:
    content, data_dir = _content_copy(tmp_path)
    (data_dir / "rules.json").write_text(
        json.dumps({"allowed_counts": [16, 17], "default_count": 16, "mismatch_delay_ms": 700}),
        encoding="utf-8",
    )
    with pytest.raises(ContentError) as exc:
        content.load_rules()
    assert "Schema validation failed" in str(exc.value)


def test_default_count_must_be_allowed(tmp_path: Path) -> None:
    content, data_dir = _content_copy(tmp_path)
    (data_dir / "rules.json").write_text(
        json.dumps(
            {"allowed_counts": [16, 20], "default_count": 24, "mismatch_delay_ms": 700, "tick_interval_ms": 1000}
        ),
        encoding="utf-8",
    )
    with pytest.raises(ContentError):
        content.load_rules()


def test_duplicate_glyphs_rejected(tmp_path: Path) -> None:
    content, data_dir = _content_copy(tmp_path)
    (data_dir / "symbols.json").write_text(
        json.dumps({"symbols": [{"glyph": "A", "name": "a"}, {"glyph": "A", "name": "again"}]}),
        encoding="utf-8",
    )
    with pytest.raises(ContentError):
        content.load_symbols()


def test_pool_too_small_for_rules(tmp_path: Path) -> None:
    content, data_dir = _content_copy(tmp_path)
    symbols = [{"glyph": str(i), "name": f"n{i}"} for i in range(10)]
    (data_dir / "symbols.json").write_text(json.dumps({"symbols": symbols}), encoding="utf-8")
    with pytest.raises(ContentError) as exc:
        content.validate_all()
    assert "capacity" in str(exc.value)


def test_missing_and_broken_files(tmp_path: Path) -> None:
    content, data_dir = _content_copy(tmp_path)
    (data_dir / "symbols.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ContentError):
        content.load_symbols()
    (data_dir / "rules.json").unlink()
    with pytest.raises(ContentError):
        content.load_rules()
