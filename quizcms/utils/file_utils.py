"""File handling utilities."""
import uuid
from pathlib import Path

from fastapi import HTTPException


def safe_asset_path(base_dir: Path, asset_path: str) -> Path:
    """Resolve asset path safely (prevent path traversal)."""
    resolved = (base_dir / asset_path).resolve()
    if base_dir.resolve() not in resolved.parents and resolved != base_dir.resolve():
        raise HTTPException(status_code=400, detail="Invalid asset path")
    return resolved


def unique_filename(original: str | None, suffix: str) -> str:
    """Build a collision-free file name keeping a readable stem."""
    stem = Path(original or "image").stem
    safe_stem = "".join(ch if ch.isalnum() or ch in "-_" else "_" for ch in stem)[:40] or "image"
    return f"{safe_stem}_{uuid.uuid4().hex[:12]}{suffix}"
