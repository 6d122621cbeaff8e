"""Catch the cat: a hexagonal board where a catcher walls in a fleeing cat."""

from __future__ import annotations

import argparse
import math
import time
from abc import ABC, abstractmethod
from collections import deque
from typing import Optional, Sequence

from mobagen import rng
from mobagen.point2d import Point2D

_BLOCK_RATIO = 0.05
_DEFAULT_SIDE = 11


class Agent(ABC):
    """A player that picks a cell to act on each turn."""

    def generate_path(self, world: World) -> list[Point2D]:
        """Shortest open path from the cat to the border.

        The first element is the border cell (the catcher's move), the last
        is the cell next to the cat (the cat's move). Empty when the cat
        cannot reach the border.
        """
        cat = world.cat_position
        came_from: dict[Point2D, Point2D] = {}
        frontier: deque[Point2D] = deque([cat])
        frontier_set: set[Point2D] = {cat}

        while frontier_set:
            current = frontier.popleft()
            frontier_set.discard(current)
            neighbors = self.visitable_neighbors(world, current, frontier_set)

            if world.cat_wins_on_space(current):
                if current == cat:
                    return []
                path = [current]
                while came_from[path[-1]] != cat:
                    path.append(came_from[path[-1]])
                return path

            for candidate in neighbors:
                if candidate not in came_from:
                    frontier.append(candidate)
                    frontier_set.add(candidate)
                    came_from[candidate] = current
        return []

    def visitable_neighbors(
        self, world: World, point: Point2D, frontier: set[Point2D]
    ) -> list[Point2D]:
        """Open, in-board neighbours of ``point`` not already waiting in ``frontier``."""
        return [
            p
            for p in world.neighbors(point)
            if world.catcher_can_move_to(p) and not world.content(p) and p not in frontier
        ]

    @abstractmethod
    def move(self, world: World) -> Point2D:
        """The cell this agent chooses on its turn."""


class Cat(Agent):
    """Runs along the shortest path to the border, or wanders when trapped."""

    def move(self, world: World) -> Point2D:
        path = self.generate_path(world)
        if path:
            return path[-1]
        directions = (World.ne, World.nw, World.e, World.w, World.sw, World.se)
        return directions[rng.range_int(0, len(directions) - 1)](world.cat_position)


class Catcher(Agent):
    """Blocks the cat's exit, or a random free cell when the cat is enclosed."""

    def move(self, world: World) -> Point2D:
        path = self.generate_path(world)
        if path:
            return path[0]
        side = world.side_size // 2
        cat = world.cat_position
        candidates = [
            Point2D(x, y)
            for y in range(-side, side + 1)
            for x in range(-side, side + 1)
            if x != cat.x and y != cat.y and not world.content(Point2D(x, y))
        ]
        if not candidates:
            raise RuntimeError("no free cell left for the catcher")
        return candidates[rng.range_int(0, len(candidates) - 1)]


class World:
    """The board; ``(0, 0)`` is the centre and odd rows are shifted right."""

    def __init__(
        self,
        size: int = _DEFAULT_SIDE,
        *,
        cat_turn: bool = True,
        cat_position: Optional[Point2D] = None,
        state: Optional[Sequence[bool]] = None,
    ) -> None:
        self.side_size = size
        self.time_between_ai_ticks = 1.0
        self.time_for_next_tick = 1.0
        self.is_simulating = False
        self.move_duration = 0
        self.cat_won = False
        self.catcher_won = False
        self.cat = Cat()
        self.catcher = Catcher()
        if state is None:
            if size % 2 == 0 or size <= 0:
                raise ValueError(f"side size must be a positive odd number, got {size}")
            self.cat_turn = True
            self.cat_position = Point2D(0, 0)
            self.state: list[bool] = []
            self.clear_world()
        else:
            if len(state) != size * size:
                raise ValueError(f"state must hold {size * size} cells, got {len(state)}")
            self.cat_turn = cat_turn
            self.cat_position = cat_position if cat_position is not None else Point2D(0, 0)
            self.state = list(state)

    def clear_world(self) -> None:
        """Random board with about 5% blocked cells and the cat in the centre."""
        cells = self.side_size * self.side_size
        self.state = [False] * cells
        for _ in range(math.ceil(cells * _BLOCK_RATIO)):
            self.state[rng.range_int(0, cells - 1)] = True
        self.cat_position = Point2D(0, 0)
        self.state[cells // 2] = False
        self.is_simulating = False
        self.cat_turn = True
        self.time_for_next_tick = self.time_between_ai_ticks
        self.cat_won = False
        self.catcher_won = False

    @staticmethod
    def e(p: Point2D) -> Point2D:
        return Point2D(p.x + 1, p.y)

    @staticmethod
    def w(p: Point2D) -> Point2D:
        return Point2D(p.x - 1, p.y)

    @staticmethod
    def ne(p: Point2D) -> Point2D:
        if p.y % 2:
            return Point2D(p.x + 1, p.y - 1)
        return Point2D(p.x, p.y - 1)

    @staticmethod
    def nw(p: Point2D) -> Point2D:
        if p.y % 2:
            return Point2D(p.x, p.y - 1)
        return Point2D(p.x - 1, p.y - 1)

    @staticmethod
    def se(p: Point2D) -> Point2D:
        if p.y % 2:
            return Point2D(p.x, p.y + 1)
        return Point2D(p.x - 1, p.y + 1)

    @staticmethod
    def sw(p: Point2D) -> Point2D:
        if p.y % 2:
            return Point2D(p.x + 1, p.y + 1)
        return Point2D(p.x, p.y + 1)

    @staticmethod
    def neighbors(point: Point2D) -> list[Point2D]:
        """The six neighbours in the order NE, NW, E, W, SW, SE."""
        return [
            World.ne(point),
            World.nw(point),
            World.e(point),
            World.w(point),
            World.sw(point),
            World.se(point),
        ]

    @staticmethod
    def is_neighbor(p1: Point2D, p2: Point2D) -> bool:
        return p2 in World.neighbors(p1)

    def _index(self, p: Point2D) -> int:
        if not self.is_valid_position(p):
            raise IndexError(f"position {p} is outside the world")
        half = self.side_size // 2
        return (p.y + half) * self.side_size + p.x + half

    def content(self, p: Point2D) -> bool:
        """True when the cell at ``p`` is blocked."""
        return self.state[self._index(p)]

    def is_valid_position(self, p: Point2D) -> bool:
        half = self.side_size // 2
        return -half <= p.x <= half and -half <= p.y <= half

    def cat_can_move_to(self, p: Point2D) -> bool:
        return (
            self.is_neighbor(self.cat_position, p)
            and self.is_valid_position(p)
            and not self.content(p)
        )

    def catcher_can_move_to(self, p: Point2D) -> bool:
        half = self.side_size // 2
        return p != self.cat_position and abs(p.x) <= half and abs(p.y) <= half

    def cat_wins_on_space(self, p: Point2D) -> bool:
        half = self.side_size // 2
        return abs(p.x) == half or abs(p.y) == half

    def _cat_win_verification(self) -> bool:
        return self.cat_wins_on_space(self.cat_position)

    def _catcher_win_verification(self) -> bool:
        return all(
            self.is_valid_position(p) and self.content(p)
            for p in self.neighbors(self.cat_position)
        )

    def step(self) -> None:
        """Play one turn; after a win the next step starts a new board."""
        if self.cat_won or self.catcher_won:
            self.clear_world()
            return

        start = time.perf_counter_ns()
        if self.cat_turn:
            move = self.cat.move(self)
            if self.cat_can_move_to(move):
                self.cat_position = move
                self.cat_won = self._cat_win_verification()
            else:
                self.is_simulating = False
                self.catcher_won = True
        else:
            move = self.catcher.move(self)
            if self.catcher_can_move_to(move):
                self.state[self._index(move)] = True
                self.catcher_won = self._catcher_win_verification()
            else:
                self.is_simulating = False
                self.cat_won = True
        self.move_duration = (time.perf_counter_ns() - start) // 1000
        self.cat_turn = not self.cat_turn

    def update(self, delta_time: float) -> None:
        """Advance the simulation clock, stepping when a turn is due."""
        if not self.is_simulating:
            return
        self.time_for_next_tick -= delta_time
        if self.time_for_next_tick < 0:
            self.step()
            self.time_for_next_tick = self.time_between_ai_ticks

    def render(self) -> str:
        """Text board: ``C`` cat, ``#`` blocked, ``.`` free; odd rows indented."""
        cat_index = self._index(self.cat_position)
        size = self.side_size
        lines = []
        for row in range(size):
            cells = []
            for column in range(size):
                index = row * size + column
                if index == cat_index:
                    cells.append("C")
                else:
                    cells.append("#" if self.state[index] else ".")
            lines.append((" " if row % 2 else "") + " ".join(cells))
        return "\n".join(lines) + "\n"


def main(argv: Optional[list[str]] = None) -> int:
    """Let the cat and the catcher play a game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="mobagen-catchthecat",
        description="Simulate a game of catch the cat on a hexagonal board.",
    )
    parser.add_argument("--size", type=int, default=21, help="odd side length of the board")
    parser.add_argument("--max-turns", type=int, default=10000, help="stop after this many turns")
    parser.add_argument("--quiet", action="store_true", help="only print the result")
    args = parser.parse_args(argv)

    try:
        world = World(args.size)
    except ValueError as error:
        parser.error(str(error))

    if not args.quiet:
        print(world.render())
    for _ in range(args.max_turns):
        try:
            world.step()
        except RuntimeError as error:
            print(f"Stalemate: {error}")
            return 0
        if not args.quiet:
            print(world.render())
        if world.cat_won:
            print("Cat wins")
            return 0
        if world.catcher_won:
            print("Catcher wins")
            return 0
    print("Turn limit reached")
    return 0