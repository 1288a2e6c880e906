"""Solved drills on functions, conditionals, strings and lists."""

from __future__ import annotations

from typing import Iterable


def calculate_price_of_apples(quantity: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return quantity if quantity > 40 else quantity * 2


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off even prices and 3 off odd ones."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def animal_habitat(animal: str) -> str:
    return _HABITATS.get(animal, "Unknown")


def trim_me(text: str) -> str:
    return text.strip()


def compose_me(text: str) -> str:
    return text + " world!"


def replace_me(text: str) -> str:
    return text.replace("cars", "balloons")


def vec_loop(values: Iterable[int]) -> list[int]:
    """Return the values, each multiplied by two."""
    doubled = list(values)
    for index, element in enumerate(doubled):
        doubled[index] = element * 2
    return doubled


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list of the values multiplied by two."""
    return [element * 2 for element in values]