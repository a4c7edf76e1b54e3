from collections.abc import Generator
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from dailydiet.core.config import Settings
from dailydiet.services.meal_store import MealStore
from dailydiet.services.sessions import SessionIdentity, resolve_session
from dailydiet.services.user_registry import UserRegistry


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_session_token(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> Optional[str]:
    return request.cookies.get(settings.session_cookie_name)


def get_current_session(
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db),
) -> SessionIdentity:
    """
    Dependency for endpoints that need a session.
    Raises Unauthorized (401) if the sessionId cookie is missing or unknown.
    """
    return resolve_session(db, token)


def get_meal_store(db: Session = Depends(get_db)) -> MealStore:
    return MealStore(db)


def get_user_registry(db: Session = Depends(get_db)) -> UserRegistry:
    return UserRegistry(db)
