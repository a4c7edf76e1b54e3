"""
Session identity resolver.
Maps the opaque sessionId token from the cookie to the users that hold it.
Validity is only "the token exists on some user row"; there is no server-side expiry.
"""
import logging
from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from dailydiet.core.errors import Unauthorized
from dailydiet.models.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionIdentity:
    session_id: str
    # earliest user registered under this session; new meals are owned by it
    user_id: str


def mint_session_token() -> str:
    return str(uuid4())


def find_session_user(db: Session, token: Optional[str]) -> Optional[User]:
    if not token or not token.strip():
        return None

    return db.execute(
        select(User)
        .where(User.session_id == token)
        .order_by(User.created_at.asc(), User.id.asc())
        .limit(1)
    ).scalar_one_or_none()


def resolve_session(db: Session, token: Optional[str]) -> SessionIdentity:
    """
    Returns the identity for `token` or raises Unauthorized.
    Absent and unknown tokens are rejected the same way.
    """
    if not token or not token.strip():
        logger.debug("[SESSION] Request without session token")
        raise Unauthorized()

    user = find_session_user(db, token)
    if user is None:
        logger.info("[SESSION] Unknown session token rejected")
        raise Unauthorized()

    return SessionIdentity(session_id=user.session_id, user_id=user.id)
