"""
Доменные ошибки.
Сервисы бросают их, а обработчики в main.py превращают в JSON-ответ
вида {"detail": ...} с нужным статусом.
"""
from typing import Optional

from fastapi import status


class DailyDietError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail: str = "Internal server error"

    def __init__(self, detail: Optional[str] = None) -> None:
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class Unauthorized(DailyDietError):
    """Нет cookie с сессией или она не совпадает ни с одним пользователем."""

    status_code = status.HTTP_401_UNAUTHORIZED
    detail = "Unauthorized."


class NotFound(DailyDietError):
    """
    Приём пищи не существует или принадлежит другой сессии.
    Оба случая отдаём одинаково, чтобы не раскрывать чужие id.
    """

    status_code = status.HTTP_404_NOT_FOUND
    detail = "Meal ID not found"
