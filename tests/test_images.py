import io
from dataclasses import replace

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient
from PIL import Image

from quizcms.app import create_app
from quizcms.services.image_service import ImageStorage


def _png(width: int, height: int) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (width, height), color="blue").save(buffer, format="PNG")
    return buffer.getvalue()


def test_upload_and_serve_question_image(client) -> None:
    response = client.post(
        "/api/quizzes/images",
        files={"file": ("pie chart.png", _png(200, 100), "image/png")},
    )
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["imageUrl"] == f"/api/quizzes/images/{body['name']}"
    assert body["name"].endswith(".png")

    served = client.get(body["imageUrl"])
    assert served.status_code == 200
    assert len(served.content) == body["size"]
    with Image.open(io.BytesIO(served.content)) as img:
        # Downsized to the configured 64px bound, aspect ratio kept
        assert img.size == (64, 32)


def test_small_image_is_stored_unchanged(client) -> None:
    content = _png(20, 20)
    body = client.post(
        "/api/quizzes/images", files={"file": ("dot.png", content, "image/png")}
    ).json()
    assert client.get(body["imageUrl"]).content == content


def test_upload_rejects_bad_files(client) -> None:
    response = client.post(
        "/api/quizzes/images", files={"file": ("notes.txt", b"hello", "text/plain")}
    )
    assert response.status_code == 400

    response = client.post(
        "/api/quizzes/images", files={"file": ("fake.png", b"not really a png", "image/png")}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "File is not a valid image"

    response = client.post(
        "/api/quizzes/images", files={"file": ("empty.png", b"", "image/png")}
    )
    assert response.status_code == 400


def test_upload_rejects_large_files(client, settings) -> None:
    content = _png(10, 10) + b"\0" * settings.image_max_size_bytes
    response = client.post(
        "/api/quizzes/images", files={"file": ("big.png", content, "image/png")}
    )
    assert response.status_code == 400
    assert response.json()["detail"].startswith("File too large")


def test_delete_question_image(client) -> None:
    body = client.post(
        "/api/quizzes/images", files={"file": ("dot.png", _png(5, 5), "image/png")}
    ).json()
    assert client.delete(body["imageUrl"]).status_code == 200
    assert client.get(body["imageUrl"]).status_code == 404
    assert client.delete(body["imageUrl"]).status_code == 404


def test_storage_blocks_traversal(tmp_path) -> None:
    storage = ImageStorage(tmp_path / "questions", 1024, 64)
    (tmp_path / "secret.txt").write_text("x", encoding="utf-8")
    with pytest.raises(HTTPException):
        storage.path_for("../secret.txt")
    assert storage.path_for("missing.png") is None


def test_upload_rejects_decompression_bomb(client, monkeypatch) -> None:
    # Pillow refuses to open anything above twice this many pixels
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
    response = client.post(
        "/api/quizzes/images", files={"file": ("bomb.png", _png(64, 64), "image/png")}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Image has too many pixels"


def test_upload_rejects_images_above_pixel_ceiling(settings) -> None:
    app = create_app(replace(settings, image_max_pixels=50 * 50))
    with TestClient(app) as limited:
        response = limited.post(
            "/api/quizzes/images", files={"file": ("wide.png", _png(60, 50), "image/png")}
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Image has too many pixels"

        response = limited.post(
            "/api/quizzes/images", files={"file": ("fits.png", _png(50, 50), "image/png")}
        )
        assert response.status_code == 201
