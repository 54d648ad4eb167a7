"""Storage for question images."""
import io
import logging
import warnings
from pathlib import Path

from fastapi import HTTPException, UploadFile, status
from PIL import Image, UnidentifiedImageError

from quizcms.config import IMAGE_ALLOWED_CONTENT_TYPES, IMAGE_ALLOWED_EXTENSIONS, Settings
from quizcms.utils.file_utils import safe_asset_path, unique_filename

logger = logging.getLogger(__name__)

IMAGE_URL_PREFIX = "/api/quizzes/images"


class ImageStorage:
    """Saves uploaded question images under one directory."""

    def __init__(
        self,
        root: Path,
        max_size_bytes: int,
        max_dimension: int,
        max_pixels: int = Settings.image_max_pixels,
    ) -> None:
        self.root = root
        self.max_size_bytes = max_size_bytes
        self.max_dimension = max_dimension
        self.max_pixels = max_pixels

    @classmethod
    def from_settings(cls, settings: Settings) -> "ImageStorage":
        return cls(
            settings.upload_dir / "questions",
            settings.image_max_size_bytes,
            settings.image_max_dimension,
            settings.image_max_pixels,
        )

    def validate_upload(self, file: UploadFile) -> str:
        """
        Check name and content type of an upload.

        Returns:
            Lower-case file extension

        Raises:
            HTTPException: If file is invalid
        """
        if not file.filename:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No filename provided",
            )

        ext = Path(file.filename).suffix.lower()
        if ext not in IMAGE_ALLOWED_EXTENSIONS:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid file type. Allowed: {', '.join(sorted(IMAGE_ALLOWED_EXTENSIONS))}",
            )

        if file.content_type and file.content_type not in IMAGE_ALLOWED_CONTENT_TYPES:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid content type: {file.content_type}",
            )
        return ext

    def _check_image(self, content: bytes) -> None:
        try:
            with warnings.catch_warnings():
                # Oversized images are rejected below by pixel count
                warnings.simplefilter("ignore", Image.DecompressionBombWarning)
                with Image.open(io.BytesIO(content)) as img:
                    width, height = img.size
                    img.verify()
        except Image.DecompressionBombError as e:
            logger.info(f"Rejected question image: {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Image has too many pixels",
            ) from e
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            logger.info(f"Rejected question image: {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="File is not a valid image",
            ) from e

        if width * height > self.max_pixels:
            logger.info(f"Rejected question image of {width}x{height} pixels")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Image has too many pixels",
            )

    def _downsize(self, image_path: Path) -> None:
        """Shrink image in place to fit within max dimensions."""
        with Image.open(image_path) as img:
            width, height = img.size
            if width <= self.max_dimension and height <= self.max_dimension:
                return

            ratio = min(self.max_dimension / width, self.max_dimension / height)
            new_size = (max(1, int(width * ratio)), max(1, int(height * ratio)))
            resized = img.resize(new_size, Image.Resampling.LANCZOS)
            if image_path.suffix.lower() in (".jpg", ".jpeg") and resized.mode in ("RGBA", "P"):
                resized = resized.convert("RGB")
            resized.save(image_path, format=img.format, optimize=True)
        logger.info(f"Resized question image from {width}x{height} to {new_size}")

    async def save(self, file: UploadFile) -> tuple[str, int]:
        """
        Validate and store an uploaded image.

        Returns:
            Tuple of (stored file name, final size in bytes)

        Raises:
            HTTPException: If the upload is rejected
        """
        ext = self.validate_upload(file)
        content = await file.read()

        if not content:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Empty file",
            )
        if len(content) > self.max_size_bytes:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"File too large. Maximum size: {self.max_size_bytes // (1024 * 1024)}MB",
            )
        self._check_image(content)

        self.root.mkdir(parents=True, exist_ok=True)
        name = unique_filename(file.filename, ext)
        image_path = self.root / name
        image_path.write_bytes(content)
        try:
            self._downsize(image_path)
        except OSError as e:
            # Keep the original if it cannot be re-encoded
            logger.error(f"Error resizing image {name}: {e}")

        size = image_path.stat().st_size
        logger.info(f"Saved question image {name} ({size} bytes)")
        return name, size

    def url_for(self, name: str) -> str:
        return f"{IMAGE_URL_PREFIX}/{name}"

    def path_for(self, name: str) -> Path | None:
        """Full path of a stored image, None if missing."""
        path = safe_asset_path(self.root, name)
        if path.is_file():
            return path
        return None

    def delete(self, name: str) -> bool:
        path = self.path_for(name)
        if path is None:
            return False
        path.unlink()
        logger.info(f"Deleted question image: {name}")
        return True
