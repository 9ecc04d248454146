"""Arithmetic flashcard sets whose answers are checked by voice."""

from __future__ import annotations

import random
from typing import Literal

from pydantic import BaseModel, Field, model_validator

Operator = Literal["+", "-", "*", "/"]


class MathCard(BaseModel):
    """A single problem and its answer."""

    num1: int
    num2: int
    operator: Operator
    answer: int

    @property
    def question(self) -> str:
        return f"{self.num1} {self.operator} {self.num2}"


class CardSetDefinition(BaseModel):
    """Operand and answer ranges (inclusive) that a card set is generated from."""

    id: int | None = None
    name: str
    grade: int = Field(ge=1)
    operator: Operator
    answer_min: int
    answer_max: int
    num1_min: int
    num1_max: int
    num2_min: int
    num2_max: int
    total_cards: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_ranges(self) -> "CardSetDefinition":
        for low, high in (
            ("answer_min", "answer_max"),
            ("num1_min", "num1_max"),
            ("num2_min", "num2_max"),
        ):
            if getattr(self, low) > getattr(self, high):
                raise ValueError(f"{low} must not exceed {high}")
        return self


class CardSetValidation(BaseModel):
    is_valid: bool
    expected_cards: int
    actual_cards: int
    message: str


GRADE1_CARD_SETS = [
    CardSetDefinition(
        name="小学1年生のたしざん(1)",
        grade=1,
        operator="+",
        answer_min=1,
        answer_max=10,
        num1_min=1,
        num1_max=9,
        num2_min=1,
        num2_max=9,
        total_cards=45,
    ),
    CardSetDefinition(
        name="小学1年生のたしざん(2)",
        grade=1,
        operator="+",
        answer_min=11,
        answer_max=18,
        num1_min=2,
        num1_max=9,
        num2_min=2,
        num2_max=9,
        total_cards=36,
    ),
    CardSetDefinition(
        name="小学1年生のひきざん(1)",
        grade=1,
        operator="-",
        answer_min=0,
        answer_max=9,
        num1_min=1,
        num1_max=10,
        num2_min=1,
        num2_max=10,
        total_cards=55,
    ),
    CardSetDefinition(
        name="小学1年生のひきざん(2)",
        grade=1,
        operator="-",
        answer_min=2,
        answer_max=9,
        num1_min=11,
        num1_max=18,
        num2_min=2,
        num2_max=9,
        total_cards=36,
    ),
]

# Multiplication tables (九九)
GRADE2_CARD_SETS = [
    CardSetDefinition(
        name="小学2年生のかけ算（九九）",
        grade=2,
        operator="*",
        answer_min=1,
        answer_max=81,
        num1_min=1,
        num1_max=9,
        num2_min=1,
        num2_max=9,
        total_cards=81,
    ),
    CardSetDefinition(
        name="小学2年生のかけ算（1〜3の段）",
        grade=2,
        operator="*",
        answer_min=1,
        answer_max=27,
        num1_min=1,
        num1_max=3,
        num2_min=1,
        num2_max=9,
        total_cards=27,
    ),
    CardSetDefinition(
        name="小学2年生のかけ算（4〜6の段）",
        grade=2,
        operator="*",
        answer_min=4,
        answer_max=54,
        num1_min=4,
        num1_max=6,
        num2_min=1,
        num2_max=9,
        total_cards=27,
    ),
    CardSetDefinition(
        name="小学2年生のかけ算（7〜9の段）",
        grade=2,
        operator="*",
        answer_min=7,
        answer_max=81,
        num1_min=7,
        num1_max=9,
        num2_min=1,
        num2_max=9,
        total_cards=27,
    ),
]

ALL_CARD_SETS = [*GRADE1_CARD_SETS, *GRADE2_CARD_SETS]


def _apply(operator: Operator, num1: int, num2: int) -> int | None:
    if operator == "+":
        return num1 + num2
    if operator == "-":
        return num1 - num2
    if operator == "*":
        return num1 * num2
    # Division cards only use exact quotients.
    if num2 == 0 or num1 % num2:
        return None
    return num1 // num2


def generate_cards(definition: CardSetDefinition) -> list[MathCard]:
    """Enumerate every operand pair whose answer falls inside the set's answer range."""

    cards: list[MathCard] = []
    for num1 in range(definition.num1_min, definition.num1_max + 1):
        for num2 in range(definition.num2_min, definition.num2_max + 1):
            answer = _apply(definition.operator, num1, num2)
            if answer is None or not definition.answer_min <= answer <= definition.answer_max:
                continue
            cards.append(
                MathCard(num1=num1, num2=num2, operator=definition.operator, answer=answer)
            )
    return cards


def shuffle_cards(cards: list[MathCard], rng: random.Random | None = None) -> list[MathCard]:
    shuffled = list(cards)
    (rng or random).shuffle(shuffled)
    return shuffled


def validate_card_set(definition: CardSetDefinition) -> CardSetValidation:
    """Compare the declared card count with what the ranges actually generate."""

    actual = len(generate_cards(definition))
    expected = definition.total_cards
    is_valid = actual == expected
    message = f"{definition.name}: {actual} cards (expected {expected})"
    if not is_valid:
        message += " - count mismatch"
    return CardSetValidation(
        is_valid=is_valid,
        expected_cards=expected,
        actual_cards=actual,
        message=message,
    )


def calculate_accuracy(correct: int, total: int) -> float:
    """Percentage of correct answers rounded to one decimal; 0.0 when nothing was answered."""

    if total <= 0:
        return 0.0
    return round(correct / total * 100, 1)
