"""Grid, game state, referee actions and a mini game for turn-based arena games."""

__version__ = "0.1.0"
__all__ = ["grid", "state", "actions", "mini_game"]