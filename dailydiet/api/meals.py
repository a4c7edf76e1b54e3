"""
Meal endpoints.
All routes require a session; the resolved identity is passed into the store explicitly.
"""
from dataclasses import asdict
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from dailydiet.deps import get_current_session, get_meal_store
from dailydiet.schemas.meal import (
    MealCreate,
    MealResponse,
    MealsListResponse,
    MealSummaryRead,
    MealSummaryResponse,
    MealUpdate,
)
from dailydiet.services.meal_store import MealStore
from dailydiet.services.sessions import SessionIdentity

router = APIRouter(prefix="/meals", tags=["meals"])


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_meal(
    meal_in: MealCreate,
    identity: SessionIdentity = Depends(get_current_session),
    store: MealStore = Depends(get_meal_store),
):
    store.create(
        identity,
        name=meal_in.name,
        description=meal_in.description,
        is_on_diet=meal_in.is_on_diet,
        date=meal_in.date,
    )
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("", response_model=MealsListResponse)
def list_meals(
    identity: SessionIdentity = Depends(get_current_session),
    store: MealStore = Depends(get_meal_store),
):
    """Приёмы пищи сессии по возрастанию date."""
    return MealsListResponse(meals=store.list_all(identity))


# /summary объявлен раньше /{meal_id}, иначе его перехватит параметр
@router.get("/summary", response_model=MealSummaryResponse)
def get_summary(
    identity: SessionIdentity = Depends(get_current_session),
    store: MealStore = Depends(get_meal_store),
):
    summary = store.summary(identity)
    return MealSummaryResponse(summary=MealSummaryRead(**asdict(summary)))


@router.get("/{meal_id}", response_model=MealResponse)
def get_meal(
    meal_id: UUID,
    identity: SessionIdentity = Depends(get_current_session),
    store: MealStore = Depends(get_meal_store),
):
    return MealResponse(meal=store.get(identity, str(meal_id)))


@router.put("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def update_meal(
    meal_id: UUID,
    meal_in: MealUpdate,
    identity: SessionIdentity = Depends(get_current_session),
    store: MealStore = Depends(get_meal_store),
):
    store.update(
        identity,
        str(meal_id),
        name=meal_in.name,
        description=meal_in.description,
        is_on_diet=meal_in.is_on_diet,
        date=meal_in.date,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_meal(
    meal_id: UUID,
    identity: SessionIdentity = Depends(get_current_session),
    store: MealStore = Depends(get_meal_store),
):
    store.delete(identity, str(meal_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
