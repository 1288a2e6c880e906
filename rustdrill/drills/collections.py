"""Solved drills on string commands, fruit baskets and score tables."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

_ACTIONS = ("uppercase", "trim", "append")


@dataclass(frozen=True)
class Command:
    """A string transformation: "uppercase", "trim" or "append" ``times`` bars."""

    action: str
    times: int = 0

    def __post_init__(self) -> None:
        if self.action not in _ACTIONS:
            raise ValueError(f"unknown command: {self.action}")
        if self.times < 0:
            raise ValueError("times must not be negative")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    output = []
    for text, command in items:
        match command.action:
            case "uppercase":
                output.append(text.upper())
            case "trim":
                output.append(text.strip())
            case "append":
                output.append(text + "bar" * command.times)
    return output


class Fruit(Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def make_fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and five fruits in all."""
    basket = {"banana": 2}
    basket["apple"] = 2
    basket["mango"] = 1
    return basket


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of each fruit kind not yet in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    goals_scored: int = 0
    goals_conceded: int = 0


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals per team from lines "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score, team_2_score = int(fields[2]), int(fields[3])

        team_1 = scores.setdefault(team_1_name, Team())
        team_1.goals_scored += team_1_score
        team_1.goals_conceded += team_2_score

        team_2 = scores.setdefault(team_2_name, Team())
        team_2.goals_scored += team_2_score
        team_2.goals_conceded += team_1_score
    return scores