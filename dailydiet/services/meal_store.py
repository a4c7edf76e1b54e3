"""
Meal record store.
Every operation is scoped to the caller's session: a meal is visible to
the session of the user who created it and to nobody else.
Existence and ownership are checked by the same statement, so a foreign
meal and a missing meal are both NotFound.
"""
import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dailydiet.core.errors import NotFound
from dailydiet.models.meal import Meal
from dailydiet.models.user import User
from dailydiet.services.sessions import SessionIdentity
from dailydiet.services.streaks import MealSummary, summarize

logger = logging.getLogger(__name__)


def normalize_meal_date(value: datetime) -> datetime:
    """
    Приводим дату к naive UTC с точностью до секунды.
    Aware-значения переводим в UTC, naive считаем уже UTC.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.replace(microsecond=0)


def _owned_by(identity: SessionIdentity):
    session_users = select(User.id).where(User.session_id == identity.session_id)
    return Meal.user_id.in_(session_users)


class MealStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def _execute(self, action: str, statement):
        try:
            return self.db.execute(statement)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"[MEALS] Error on {action}: {e}", exc_info=True)
            raise

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"[MEALS] Error on {action}: {e}", exc_info=True)
            raise

    def create(
        self,
        identity: SessionIdentity,
        name: str,
        description: str,
        is_on_diet: bool,
        date: datetime,
    ) -> Meal:
        meal = Meal(
            user_id=identity.user_id,
            name=name,
            description=description,
            is_on_diet=is_on_diet,
            date=normalize_meal_date(date),
        )
        self.db.add(meal)
        self._commit("create")
        self.db.refresh(meal)

        logger.info(f"[MEALS] Created meal_id={meal.id}, user_id={identity.user_id}")
        return meal

    def list_all(self, identity: SessionIdentity) -> List[Meal]:
        # seq is assigned by the database on insert: insertion order for equal dates
        return list(
            self._execute(
                "list",
                select(Meal)
                .where(_owned_by(identity))
                .order_by(Meal.date.asc(), Meal.seq.asc()),
            ).scalars()
        )

    def get(self, identity: SessionIdentity, meal_id: str) -> Meal:
        meal = self._execute(
            "get",
            select(Meal).where(Meal.id == meal_id, _owned_by(identity)),
        ).scalar_one_or_none()
        if meal is None:
            raise NotFound()
        return meal

    def update(
        self,
        identity: SessionIdentity,
        meal_id: str,
        name: str,
        description: str,
        is_on_diet: bool,
        date: datetime,
    ) -> None:
        """Полная замена полей. Один условный UPDATE: 0 строк -> NotFound."""
        result = self._execute(
            "update",
            update(Meal)
            .where(Meal.id == meal_id, _owned_by(identity))
            .values(
                name=name,
                description=description,
                is_on_diet=is_on_diet,
                date=normalize_meal_date(date),
            )
            .execution_options(synchronize_session=False),
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise NotFound()

        self._commit("update")
        logger.info(f"[MEALS] Updated meal_id={meal_id}")

    def delete(self, identity: SessionIdentity, meal_id: str) -> None:
        result = self._execute(
            "delete",
            delete(Meal)
            .where(Meal.id == meal_id, _owned_by(identity))
            .execution_options(synchronize_session=False),
        )
        if result.rowcount == 0:
            self.db.rollback()
            raise NotFound()

        self._commit("delete")
        logger.info(f"[MEALS] Deleted meal_id={meal_id}")

    def summary(self, identity: SessionIdentity) -> MealSummary:
        return summarize(self.list_all(identity))
