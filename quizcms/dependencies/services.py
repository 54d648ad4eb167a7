"""Dependencies exposing the collaborators built in ``create_app``."""
from fastapi import Request

from quizcms.config import Settings
from quizcms.services.image_service import ImageStorage
from quizcms.services.password_cipher import PasswordCipher


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_image_storage(request: Request) -> ImageStorage:
    return request.app.state.image_storage


def get_cipher(request: Request) -> PasswordCipher:
    return request.app.state.cipher
