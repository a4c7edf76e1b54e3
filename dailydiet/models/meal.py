from uuid import uuid4

from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, Index, UniqueConstraint

from dailydiet.db.base import Base, utcnow


class Meal(Base):
    __tablename__ = "meals"
    __table_args__ = (
        UniqueConstraint("id", name="uq_meals_id"),
        Index("ix_meals_user_id_date", "user_id", "date"),
        {"sqlite_autoincrement": True},
    )

    # номер вставки, выдаёт БД; порядок для приёмов пищи с одинаковой date
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, default=lambda: str(uuid4()))
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)

    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    is_on_diet = Column(Boolean, nullable=False)

    # naive UTC, секунды без долей
    date = Column(DateTime, nullable=False)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
