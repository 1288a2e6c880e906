"""Solved drills on iterators: capitalising, dividing, factorials and counting."""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, Mapping

NUMBERS = (27, 297, 38502, 81)
DIVISOR = 27


def capitalize_first(word: str) -> str:
    """Upper-case the first character: "hello" -> "Hello"."""
    return word[:1].upper() + word[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise every word: ["hello", "world"] -> ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise every word and join them: ["hello", " ", "world"] -> "Hello World"."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """A division could not give a whole result; raised as such for a zero divisor."""


class NotDivisibleError(DivisionError):
    """The dividend is not a whole multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor


def divide(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` when ``a`` is an exact multiple of ``b``."""
    if b == 0:
        raise DivisionError("cannot divide by zero")
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list() -> list[int]:
    """Every quotient, raising at the first division that fails."""
    return [divide(n, DIVISOR) for n in NUMBERS]


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as exc:
        return exc


def list_of_results() -> list[int | DivisionError]:
    """Each division's quotient, or the error it raised."""
    return [_try_divide(n, DIVISOR) for n in NUMBERS]


def factorial(num: int) -> int:
    """Return ``num!``."""
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(1, num + 1))


class Progress(Enum):
    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries with the given progress using a plain loop."""
    count = 0
    for progress in progress_map.values():
        if progress is value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection_for(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count matching entries across several maps using plain loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count matching entries across several maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)