"""
Streak analytics over a session's meals.

Pure computation: no database access, the caller passes the meals in.
Input only needs `date` and `is_on_diet` attributes, so ORM rows and
plain test doubles both work.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Protocol


class DietMeal(Protocol):
    date: datetime
    is_on_diet: bool


@dataclass(frozen=True)
class MealSummary:
    total_meals: int = 0
    total_meals_on_diet: int = 0
    total_meals_off_diet: int = 0
    best_on_diet_streak: int = 0


def summarize(meals: Iterable[DietMeal]) -> MealSummary:
    """
    Counts meals and finds the longest run of consecutive on-diet meals.

    Meals are stable-sorted by date, so meals sharing a date keep the order
    they came in (the store hands them over in insertion order). An off-diet
    meal resets the current run.
    """
    total = 0
    on_diet = 0
    current_streak = 0
    best_streak = 0

    for meal in sorted(meals, key=lambda m: m.date):
        total += 1
        if meal.is_on_diet:
            on_diet += 1
            current_streak += 1
            if current_streak > best_streak:
                best_streak = current_streak
        else:
            current_streak = 0

    return MealSummary(
        total_meals=total,
        total_meals_on_diet=on_diet,
        total_meals_off_diet=total - on_diet,
        best_on_diet_streak=best_streak,
    )
