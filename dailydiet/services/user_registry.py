import logging
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dailydiet.models.user import User
from dailydiet.services.sessions import SessionIdentity, find_session_user, mint_session_token

logger = logging.getLogger(__name__)


class UserRegistry:
    def __init__(self, db: Session) -> None:
        self.db = db

    def register(
        self,
        name: str,
        email: str,
        presented_token: Optional[str] = None,
    ) -> Tuple[User, str, bool]:
        """
        Создать пользователя.
        Если клиент прислал действующий sessionId, переиспользуем его,
        иначе выдаём новый токен. Строка users создаётся всегда, поэтому
        несколько пользователей могут делить одну сессию.

        Возвращает (user, token, minted): minted=True значит, что токен новый
        и транспорт должен поставить cookie.
        """
        minted = False
        token = presented_token
        try:
            if find_session_user(self.db, presented_token) is None:
                token = mint_session_token()
                minted = True

            user = User(name=name, email=email, session_id=token)
            self.db.add(user)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"[USERS] Error registering user: {e}", exc_info=True)
            raise
        self.db.refresh(user)

        logger.info(f"[USERS] Registered user_id={user.id}, new_session={minted}")
        return user, token, minted

    def list_by_session(self, identity: SessionIdentity) -> List[User]:
        return list(
            self.db.execute(
                select(User)
                .where(User.session_id == identity.session_id)
                .order_by(User.created_at.asc(), User.id.asc())
            ).scalars()
        )
