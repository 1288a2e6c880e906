"""Solved drills on optional values, error types and error conversion."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

_INTEGER = re.compile(r"[+-]?[0-9]+")

CreationKind = Literal["negative", "zero"]

_CREATION_MESSAGES: dict[str, str] = {
    "negative": "number is negative",
    "zero": "number is zero",
}


class ParseIntError(ValueError):
    """Text could not be read as a signed integer of a fixed width."""


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of ``bits`` bits with strict syntax."""
    if text == "":
        raise ParseIntError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ParseIntError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ParseIntError("number too large to fit in target type")
    if value < -limit:
        raise ParseIntError("number too small to fit in target type")
    return value


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour of the day, or None for no such hour.

    There are 5 pieces before 22:00 and none from then until midnight.
    """
    if time_of_day > 23:
        return None
    if time_of_day < 22:
        return 5
    return 0


def generate_nametag_text(name: str) -> str:
    """Return the nametag text, refusing an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost of buying items at 5 tokens each plus a fee of 1 token."""
    processing_fee = 1
    cost_per_item = 5
    quantity = _parse_int(item_quantity, 32)
    return quantity * cost_per_item + processing_fee


class CreationError(ValueError):
    """A value is not a positive, non-zero integer."""

    def __init__(self, kind: CreationKind) -> None:
        if kind not in _CREATION_MESSAGES:
            raise ValueError(f"unknown creation error: {kind}")
        super().__init__(_CREATION_MESSAGES[kind])
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer that is strictly greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError("negative")
        if self.value == 0:
            raise CreationError("zero")


class ParsePosNonzeroError(ValueError):
    """Text could not be turned into a PositiveNonzeroInteger."""

    def __init__(self, cause: CreationError | ParseIntError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text as a positive, non-zero 64-bit integer."""
    try:
        value = _parse_int(text, 64)
    except ParseIntError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc