"""Commands a bot can send to the game referee."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable


class Action(ABC):
    """A single command in a turn's output line."""

    @abstractmethod
    def command(self) -> str:
        """Return the command text, terminated by a semicolon."""

    def __str__(self) -> str:
        return self.command()


@dataclass(frozen=True)
class Build(Action):
    """Build a recycler on a cell."""

    x: int
    y: int

    def command(self) -> str:
        return f"BUILD {self.x} {self.y};"


@dataclass(frozen=True)
class Message(Action):
    """Display a message next to the bot."""

    content: str

    def command(self) -> str:
        return f"MESSAGE {self.content};"


@dataclass(frozen=True)
class Move(Action):
    """Move units from one cell towards another."""

    unit_count: int
    from_x: int
    from_y: int
    to_x: int
    to_y: int

    def command(self) -> str:
        return (
            f"MOVE {self.unit_count} {self.from_x} {self.from_y} "
            f"{self.to_x} {self.to_y};"
        )


@dataclass(frozen=True)
class Spawn(Action):
    """Spawn units on a cell.

    The unit count is kept on the action but is not part of the command text.
    """

    unit_count: int
    x: int
    y: int

    def command(self) -> str:
        return f"SPAWN {self.x} {self.y};"


@dataclass(frozen=True)
class Wait(Action):
    """Do nothing this turn."""

    def command(self) -> str:
        return "WAIT;"


def format_actions(actions: Iterable[Action]) -> str:
    """Join the commands of ``actions`` into one output line, without newline."""
    return "".join(action.command() for action in actions)