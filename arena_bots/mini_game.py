"""Mini game with a GPU text and a fixed set of integer registers."""

from __future__ import annotations


class MiniGame:
    """A mini game starting in its game-over state with cleared registers."""

    register_count = 7

    def __init__(self) -> None:
        self.gpu = "GAME OVER"
        self._registers = [0] * self.register_count

    def register(self, index: int) -> int:
        """Return register ``index``; raise IndexError if it does not exist."""
        if not 0 <= index < self.register_count:
            raise IndexError(f"register {index} does not exist")
        return self._registers[index]