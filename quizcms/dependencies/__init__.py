"""FastAPI dependencies."""
from quizcms.dependencies.services import get_cipher, get_image_storage, get_settings

__all__ = ["get_cipher", "get_image_storage", "get_settings"]
