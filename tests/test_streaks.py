from dataclasses import dataclass
from datetime import datetime, timedelta

import pytest

from dailydiet.services.streaks import MealSummary, summarize

BASE = datetime(2024, 1, 1, 8, 0, 0)


@dataclass
class FakeMeal:
    date: datetime
    is_on_diet: bool


def meals_from_flags(flags):
    return [FakeMeal(date=BASE + timedelta(hours=i), is_on_diet=flag) for i, flag in enumerate(flags)]


def test_empty_meal_set():
    assert summarize([]) == MealSummary(0, 0, 0, 0)


def test_on_on_off_on():
    summary = summarize(meals_from_flags([True, True, False, True]))

    assert summary.total_meals == 4
    assert summary.total_meals_on_diet == 3
    assert summary.total_meals_off_diet == 1
    assert summary.best_on_diet_streak == 2


def test_all_off_diet():
    summary = summarize(meals_from_flags([False, False, False]))
    assert summary == MealSummary(3, 0, 3, 0)


def test_longest_run_at_the_end():
    summary = summarize(meals_from_flags([True, False, True, True, True]))
    assert summary.best_on_diet_streak == 3


def test_input_is_ordered_by_date_first():
    meals = meals_from_flags([True, True, False, True])
    # reversed input: date order still gives on, on, off, on
    summary = summarize(list(reversed(meals)))
    assert summary.best_on_diet_streak == 2


def test_equal_dates_keep_given_order():
    same = BASE
    meals = [
        FakeMeal(same, True),
        FakeMeal(same, False),
        FakeMeal(same, True),
    ]
    assert summarize(meals).best_on_diet_streak == 1

    meals = [
        FakeMeal(same, True),
        FakeMeal(same, True),
        FakeMeal(same, False),
    ]
    assert summarize(meals).best_on_diet_streak == 2


SEQUENCES = [
    [],
    [True],
    [False],
    [True, True, False, True],
    [False, True, True, True, False, True, True],
    [True, False] * 5,
    [True] * 7,
]


@pytest.mark.parametrize("flags", SEQUENCES)
def test_counts_add_up(flags):
    summary = summarize(meals_from_flags(flags))
    assert summary.total_meals == summary.total_meals_on_diet + summary.total_meals_off_diet
    assert summary.best_on_diet_streak <= summary.total_meals_on_diet


@pytest.mark.parametrize("flags", SEQUENCES)
def test_appending_on_diet_never_decreases_streak(flags):
    before = summarize(meals_from_flags(flags)).best_on_diet_streak
    after = summarize(meals_from_flags(flags + [True])).best_on_diet_streak
    assert after >= before


@pytest.mark.parametrize("flags", SEQUENCES)
def test_appending_off_diet_never_increases_streak(flags):
    before = summarize(meals_from_flags(flags)).best_on_diet_streak
    after = summarize(meals_from_flags(flags + [False])).best_on_diet_streak
    assert after == before
