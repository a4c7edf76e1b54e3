"""
Async HTTP client for the Daily Diet API.
Keeps the sessionId cookie between calls, so register() once and reuse the client.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

import httpx


class DailyDietClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "DailyDietClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def session_id(self) -> Optional[str]:
        return self._client.cookies.get("sessionId")

    async def health(self) -> Dict[str, Any]:
        resp = await self._client.get("/health")
        resp.raise_for_status()
        return resp.json()

    async def register(self, name: str, email: str) -> Optional[str]:
        """
        POST /users.
        Возвращает sessionId, который теперь лежит в cookie клиента.
        """
        resp = await self._client.post("/users", json={"name": name, "email": email})
        resp.raise_for_status()
        return self.session_id

    async def list_users(self) -> List[Dict[str, Any]]:
        resp = await self._client.get("/users")
        resp.raise_for_status()
        return resp.json()["users"]

    async def create_meal(
        self,
        name: str,
        description: str,
        is_on_diet: bool,
        date: datetime,
    ) -> None:
        resp = await self._client.post("/meals", json=_meal_payload(name, description, is_on_diet, date))
        resp.raise_for_status()

    async def list_meals(self) -> List[Dict[str, Any]]:
        resp = await self._client.get("/meals")
        resp.raise_for_status()
        return resp.json()["meals"]

    async def get_meal(self, meal_id: str) -> Optional[Dict[str, Any]]:
        """GET /meals/{id}; None, если приём пищи не найден в этой сессии."""
        resp = await self._client.get(f"/meals/{meal_id}")
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return resp.json()["meal"]

    async def update_meal(
        self,
        meal_id: str,
        name: str,
        description: str,
        is_on_diet: bool,
        date: datetime,
    ) -> bool:
        resp = await self._client.put(
            f"/meals/{meal_id}",
            json=_meal_payload(name, description, is_on_diet, date),
        )
        if resp.status_code == 404:
            return False
        resp.raise_for_status()
        return True

    async def delete_meal(self, meal_id: str) -> bool:
        resp = await self._client.delete(f"/meals/{meal_id}")
        if resp.status_code == 404:
            return False
        resp.raise_for_status()
        return True

    async def get_summary(self) -> Dict[str, int]:
        resp = await self._client.get("/meals/summary")
        resp.raise_for_status()
        return resp.json()["summary"]


def _meal_payload(name: str, description: str, is_on_diet: bool, date: datetime) -> Dict[str, Any]:
    return {
        "name": name,
        "description": description,
        "isOnDiet": is_on_diet,
        "date": date.isoformat(),
    }
