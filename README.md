# mobagen

A small 2D game toolkit. It provides integer points, float vectors,
transforms, polygons, colours and a grid. It also includes two board games
with simple AI players that you play or watch in the terminal.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Chess

```
mobagen-chess
mobagen-chess --ai black
```

The board prints as text. White pieces are upper case and black pieces are
lower case. Rank 8 is at the top.

Enter a move as two squares, for example `e2 e4`. The other commands are
`undo`, `reset` and `quit` (`exit` also works). With `--ai black` or
`--ai white`, the computer plays that side. The game stops if the computer
finds no move to search.

From code:

```python
from mobagen.chess_game import ChessGame
from mobagen.chess_state import WorldState
from mobagen.chess_search import next_move
from mobagen.chess_heuristics import material_score
from mobagen.point2d import Point2D

state = WorldState()
state.reset()
print(state)
print(material_score(state))   # positive means white is ahead
move = next_move(state)        # three plies deep
state.move(move.origin, move.target)

game = ChessGame()
game.click(Point2D(4, 1))      # select the pawn on e2
game.click(Point2D(4, 3))      # move it to e4; returns True
game.undo()
```

`WorldState.move` raises `IllegalMoveError` when a move cannot be played,
for example when it is off the board, out of turn, or onto a friendly piece.

The movement rules are in `mobagen.chess_pieces`. It has functions such as
`rook_attack_moves(world, origin)`, `pawn_possible_moves(world, origin)`,
`is_in_check(world, color)` and `list_moves(world, turn)`.

The chess module does not implement:

- castling, en passant or promotion;
- checkmate or stalemate detection;
- checks that a move leaves your own king safe.

## Catch the cat

```
mobagen-catchthecat
mobagen-catchthecat --size 11 --max-turns 200 --quiet
```

The game runs on a hexagonal board with odd-numbered rows shifted. The cat
starts in the centre and tries to reach the border. The catcher blocks one
cell per turn to trap it.

Both players use a breadth-first path search (`Agent.generate_path`). If the
cat has no path to the border, it moves in a random direction. If the catcher
has no path to block, it blocks a random free cell.

The command plays one whole game and prints the board after each turn. With
`--quiet` it prints only the result. `--size` must be a positive odd number
and defaults to 21.

```python
from mobagen.catchthecat import World

world = World(11)
world.step()
print(world.render())   # C cat, # blocked, . free
print(world.cat_won, world.catcher_won)
```

## Building blocks

- `mobagen.point2d.Point2D`: a hashable integer grid point.
- `mobagen.vector2.Vector2`: an immutable float vector with rotation, angles, distances and normalisation. Its equality is approximate.
- `mobagen.transform.Transform`: position, scale and rotation.
- `mobagen.polygon`: `Polygon` with `drawable_points(transform)` and `edges(transform)`, plus `circle(sample)`, `square()` and `hexagon()`.
- `mobagen.grid2d.Grid2D`: a fixed-size grid addressed by `(x, y)` or `Point2D`. It raises `IndexError` outside its bounds.
- `mobagen.color`:
  - `Color32`, with byte channels packed as `0xAABBGGRR`;
  - `Colorf`, with float channels and HSV-to-RGB conversion;
  - the named colours in `Color`.
- `mobagen.rng`: `range_int` and `range_float`. Both ranges include both ends.

## Limitations

The package has no graphical window and no rendering back end. Polygons
produce point lists and line segments, and the games render as text. Nothing
here draws pixels, loads images or handles mouse input.