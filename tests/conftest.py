from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from quizcms.app import create_app
from quizcms.config import Settings
from quizcms.database import Database


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        data_dir=tmp_path / "data",
        upload_dir=tmp_path / "uploads",
        secret_key="test-secret",
        image_max_size_bytes=512 * 1024,
        image_max_dimension=64,
        default_page_size=10,
        max_page_size=50,
        log_level="DEBUG",
    )


@pytest.fixture
def client(settings: Settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(settings: Settings):
    database = Database(settings.database_url)
    database.init_db()
    session = database.session()
    try:
        yield session
    finally:
        session.close()
        database.dispose()


@pytest.fixture
def quiz_payload() -> dict[str, object]:
    return {
        "className": "3",
        "subject": "Math",
        "book": "NCERT",
        "chapter": "Fractions",
        "questions": [
            {
                "questionType": "mcq",
                "question": "1/2+1/2=?",
                "marks": 1,
                "options": [{"text": "1"}, {"text": "2"}],
            }
        ],
    }
