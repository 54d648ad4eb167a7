"""Application configuration and constants."""
import os
from dataclasses import dataclass
from pathlib import Path


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# Question images
IMAGE_ALLOWED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".webp"}
IMAGE_ALLOWED_CONTENT_TYPES = {"image/png", "image/jpeg", "image/gif", "image/webp"}

# Default password assigned to schools migrated without a readable one
DEFAULT_SCHOOL_PASSWORD = "defaultPassword123"


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read once at startup and passed to collaborators."""

    database_url: str
    data_dir: Path
    upload_dir: Path
    secret_key: str = "CHANGE_ME_IN_PRODUCTION_USE_openssl_rand_hex_32"
    image_max_size_bytes: int = 5 * 1024 * 1024  # 5 MB
    image_max_dimension: int = 1600  # pixels
    image_max_pixels: int = 40_000_000  # width * height
    default_page_size: int = 10
    max_page_size: int = 100
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        data_dir = Path(os.environ.get("DATA_DIR", Path.cwd() / "data"))
        upload_dir = Path(os.environ.get("UPLOAD_DIR", data_dir / "uploads"))
        database_url = os.environ.get(
            "DATABASE_URL", f"sqlite:///{data_dir / 'quizcms.db'}"
        )
        return cls(
            database_url=database_url,
            data_dir=data_dir,
            upload_dir=upload_dir,
            secret_key=os.environ.get("SECRET_KEY", cls.secret_key),
            image_max_size_bytes=_parse_int_env(
                "IMAGE_MAX_SIZE_BYTES", cls.image_max_size_bytes
            ),
            image_max_dimension=_parse_int_env(
                "IMAGE_MAX_DIMENSION", cls.image_max_dimension
            ),
            image_max_pixels=_parse_int_env("IMAGE_MAX_PIXELS", cls.image_max_pixels),
            default_page_size=_parse_int_env("DEFAULT_PAGE_SIZE", cls.default_page_size),
            max_page_size=_parse_int_env("MAX_PAGE_SIZE", cls.max_page_size),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level).upper(),
        )

    def prepare_dirs(self) -> None:
        """Create data and upload directories if missing."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.upload_dir.mkdir(parents=True, exist_ok=True)
