from pathlib import Path

import pytest
from fastapi import HTTPException

from quizcms.config import Settings
from quizcms.utils import file_utils, pagination


def test_safe_asset_path_allows_nested(tmp_path: Path) -> None:
    base_dir = tmp_path / "assets"
    base_dir.mkdir()
    resolved = file_utils.safe_asset_path(base_dir, "images/logo.png")
    assert resolved == (base_dir / "images" / "logo.png").resolve()


def test_safe_asset_path_blocks_traversal(tmp_path: Path) -> None:
    base_dir = tmp_path / "assets"
    base_dir.mkdir()
    with pytest.raises(HTTPException):
        file_utils.safe_asset_path(base_dir, "../secret.txt")


def test_unique_filename_keeps_stem_and_suffix() -> None:
    first = file_utils.unique_filename("my diagram (1).PNG", ".png")
    second = file_utils.unique_filename("my diagram (1).PNG", ".png")
    assert first.startswith("my_diagram__1__")
    assert first.endswith(".png")
    assert first != second
    assert file_utils.unique_filename(None, ".jpg").startswith("image_")


def test_clamp_page() -> None:
    assert pagination.clamp_page(None, None, 10, 100) == (1, 10)
    assert pagination.clamp_page(0, 0, 10, 100) == (1, 10)
    assert pagination.clamp_page(3, 500, 10, 100) == (3, 100)


def test_contains_pattern_escapes_wildcards() -> None:
    assert pagination.contains_pattern("frac") == "%frac%"
    assert pagination.contains_pattern("100%_sure") == "%100\\%\\_sure%"


def test_settings_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("UPLOAD_DIR", raising=False)
    monkeypatch.setenv("MAX_PAGE_SIZE", "not-a-number")
    monkeypatch.setenv("DEFAULT_PAGE_SIZE", "25")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()
    assert settings.data_dir == tmp_path
    assert settings.upload_dir == tmp_path / "uploads"
    assert settings.database_url == f"sqlite:///{tmp_path / 'quizcms.db'}"
    assert settings.max_page_size == 100
    assert settings.default_page_size == 25
    assert settings.log_level == "DEBUG"
