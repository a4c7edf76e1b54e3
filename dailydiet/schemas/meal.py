from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

MEAL_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class MealBase(BaseModel):
    name: str
    description: str
    is_on_diet: bool = Field(..., strict=True)
    date: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MealCreate(MealBase):
    pass


class MealUpdate(MealBase):
    """Полная замена изменяемых полей (PUT)."""


class MealRead(MealBase):
    id: str
    user_id: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @field_serializer("date")
    def _serialize_date(self, value: datetime) -> str:
        return value.strftime(MEAL_DATE_FORMAT)


class MealResponse(BaseModel):
    meal: MealRead


class MealsListResponse(BaseModel):
    meals: List[MealRead]


class MealSummaryRead(BaseModel):
    total_meals: int
    total_meals_on_diet: int
    total_meals_off_diet: int
    best_on_diet_streak: int

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MealSummaryResponse(BaseModel):
    summary: MealSummaryRead
