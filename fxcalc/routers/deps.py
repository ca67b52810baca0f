from fastapi import Request

from fxcalc.core.config import Settings, get_settings
from fxcalc.db.dal import Database


def get_app_settings(request: Request) -> Settings:
    # create_app() pins its settings on app.state; fall back to the cached env settings
    return getattr(request.app.state, "settings", None) or get_settings()


def get_db(request: Request) -> Database:
    settings = get_app_settings(request)
    return Database(settings.db_path)
