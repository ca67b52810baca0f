from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from fxcalc.core.config import Settings
from fxcalc.db.dal import Database
from fxcalc.db.migrate import apply_migrations
from fxcalc.main import create_app


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    s = Settings(data_dir=tmp_path, db_filename="test.sqlite3", debug=False)
    s.init_post_load()
    return s


@pytest.fixture
def db(settings: Settings) -> Database:
    apply_migrations(settings.db_path)
    return Database(settings.db_path)


@pytest.fixture
def client(settings: Settings) -> TestClient:
    app = create_app(settings_override=settings)
    with TestClient(app) as c:
        yield c
