from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    """naive UTC; так хранятся created_at/updated_at"""
    return datetime.now(timezone.utc).replace(tzinfo=None)
