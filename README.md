# arena_bots

Building blocks for a bot in a turn-based, grid-based territory game whose
referee talks over text streams:

- `arena_bots.grid` provides `Direction`, `Player`, `Cell` and `Map`.
  A `Map(width, height)` is a rectangular grid of `Cell`s stored row by row.
  Each cell is linked to its east, north, south and west neighbours, and you
  can reach them with `cell.neighbor(direction)` or `cell.neighbors`.
  `map.cell(x, y)` raises `IndexError` outside the map. `Player` uses the
  game's codes: `NO_ONE = -1`, `OPPONENT = 0`, `ME = 1`.
- `arena_bots.state` provides `State(width, height)`. It owns a `Map`, and
  `state.update(stream)` reads one turn from a text stream: first my matter
  and the opponent's matter, then seven integers per cell in row order
  (scrap, owner, units, recycler, can build, can spawn, in range of a
  recycler). After an update, `player_cells(player)`,
  `player_units(player)` and `matter_count(player)` report the turn's
  ownership, unit stacks and matter. If the stream ends mid-turn,
  `EOFError` is raised.
- `arena_bots.actions` provides `Build`, `Message`, `Move`, `Spawn` and
  `Wait`. Each one's `command()` returns its `;`-terminated text, for example
  `MOVE 3 4 5 5 5;`. `format_actions` joins a turn's actions into one line.
- `arena_bots.mini_game` provides `MiniGame`. It starts with the GPU text
  `"GAME OVER"` and `register_count` (7) registers, all set to 0.
  `register(index)` raises `IndexError` for an index that does not exist.

## Installing

```
pip install .
```

## Example

```python
import io

from arena_bots.actions import Move, format_actions
from arena_bots.grid import Player
from arena_bots.state import State

state = State(2, 1)
state.update(io.StringIO("10 10\n5 1 2 0 0 0 0\n5 -1 0 0 0 0 0\n"))

actions = [
    Move(cell.unit_count, cell.x, cell.y, 1, 0)
    for cell in state.player_units(Player.ME)
]
print(format_actions(actions))  # MOVE 2 0 0 1 0;
```

## What this package does not do

The package has no decision-making bot and no cell-scoring map. It also has
no command-line program that runs the turn loop against a referee. To play a
game, read each turn with `State.update`, choose the actions yourself, and
write `format_actions(...)` followed by a newline to the referee.

## Tests

```
pip install .[test]
pytest
```