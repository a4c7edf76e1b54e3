from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from dailydiet.core.config import Settings
from dailydiet.deps import get_app_settings, get_current_session, get_session_token, get_user_registry
from dailydiet.schemas.user import UserCreate, UsersListResponse
from dailydiet.services.sessions import SessionIdentity
from dailydiet.services.user_registry import UserRegistry

router = APIRouter(prefix="/users", tags=["users"])


def _set_session_cookie(resp: Response, token: str, settings: Settings) -> None:
    resp.set_cookie(
        settings.session_cookie_name,
        token,
        max_age=settings.session_max_age_seconds,
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_user(
    user_in: UserCreate,
    token: Optional[str] = Depends(get_session_token),
    registry: UserRegistry = Depends(get_user_registry),
    settings: Settings = Depends(get_app_settings),
):
    """
    Зарегистрировать пользователя.
    Без действующей cookie выдаём новый sessionId на 7 дней.
    """
    _, session_token, minted = registry.register(
        name=user_in.name,
        email=user_in.email,
        presented_token=token,
    )

    resp = Response(status_code=status.HTTP_201_CREATED)
    if minted:
        _set_session_cookie(resp, session_token, settings)
    return resp


@router.get("", response_model=UsersListResponse)
def list_users(
    identity: SessionIdentity = Depends(get_current_session),
    registry: UserRegistry = Depends(get_user_registry),
):
    """Все пользователи текущей сессии."""
    return UsersListResponse(users=registry.list_by_session(identity))
