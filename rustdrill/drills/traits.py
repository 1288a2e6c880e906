"""Solved drills on shared behaviour: appending "Bar" and licensing info."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value: object) -> object:
    """Return the value with "Bar" appended."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Software that reports the same licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass(frozen=True)
class SomeSoftware(Licensed):
    version_number: int | None = None


@dataclass(frozen=True)
class OtherSoftware(Licensed):
    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two pieces of software report the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()