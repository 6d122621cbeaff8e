import math

import pytest

from mobagen.catchthecat import Cat, Catcher, World, main
from mobagen.point2d import Point2D


def _empty_world(size, cat_turn=True, blocked=()):
    world = World(size, cat_turn=cat_turn, state=[False] * (size * size))
    for p in blocked:
        world.state[world._index(p)] = True
    return world


def _all_points(size):
    half = size // 2
    return [Point2D(x, y) for y in range(-half, half + 1) for x in range(-half, half + 1)]


def test_east_and_west_are_horizontal():
    p = Point2D(2, 3)
    assert World.e(p) == Point2D(3, 3)
    assert World.w(p) == Point2D(1, 3)


@pytest.mark.parametrize("y", [-3, -2, -1, 0, 1, 2, 3])
def test_neighbors_are_six_distinct_and_symmetric(y):
    p = Point2D(1, y)
    ns = World.neighbors(p)
    assert len(set(ns)) == 6
    assert p not in ns
    for n in ns:
        assert World.is_neighbor(n, p)
        assert World.is_neighbor(p, n)


def test_far_points_are_not_neighbors():
    assert not World.is_neighbor(Point2D(0, 0), Point2D(3, 0))


def test_even_size_rejected():
    with pytest.raises(ValueError):
        World(10)


def test_state_length_checked():
    with pytest.raises(ValueError):
        World(5, state=[False] * 24)


def test_clear_world_invariants():
    world = World(11)
    assert world.cat_position == Point2D(0, 0)
    assert world.content(Point2D(0, 0)) is False
    assert world.cat_turn is True
    assert not world.cat_won and not world.catcher_won
    assert len(world.state) == 121
    assert sum(world.state) <= math.ceil(121 * 0.05)


def test_content_and_out_of_range():
    world = _empty_world(5, blocked=[Point2D(2, -2)])
    assert world.content(Point2D(2, -2)) is True
    assert world.content(Point2D(-2, 2)) is False
    with pytest.raises(IndexError):
        world.content(Point2D(3, 0))


def test_valid_positions_and_border():
    world = _empty_world(5)
    assert world.is_valid_position(Point2D(-2, 2))
    assert not world.is_valid_position(Point2D(0, -3))
    assert world.cat_wins_on_space(Point2D(2, 0))
    assert world.cat_wins_on_space(Point2D(0, -2))
    assert not world.cat_wins_on_space(Point2D(1, 1))


def test_move_permissions():
    world = _empty_world(5, blocked=[Point2D(1, 0)])
    assert not world.cat_can_move_to(Point2D(1, 0))
    assert world.cat_can_move_to(Point2D(-1, 0))
    assert not world.cat_can_move_to(Point2D(2, 2))
    assert not world.catcher_can_move_to(Point2D(0, 0))
    assert world.catcher_can_move_to(Point2D(2, 2))
    assert not world.catcher_can_move_to(Point2D(3, 0))


def test_generate_path_reaches_border_through_open_cells():
    world = _empty_world(7, blocked=[Point2D(1, 0), Point2D(-1, 0)])
    path = Cat().generate_path(world)
    assert path
    assert world.cat_wins_on_space(path[0])
    assert World.is_neighbor(world.cat_position, path[-1])
    for a, b in zip(path, path[1:]):
        assert World.is_neighbor(a, b)
    assert not any(world.content(p) for p in path)


def test_generate_path_empty_when_enclosed():
    cat = Point2D(0, 0)
    world = _empty_world(7, blocked=World.neighbors(cat))
    assert Cat().generate_path(world) == []


def test_cat_wanders_to_a_neighbor_when_trapped():
    world = _empty_world(7, blocked=World.neighbors(Point2D(0, 0)))
    move = Cat().move(world)
    assert World.is_neighbor(Point2D(0, 0), move)


def test_catcher_random_move_avoids_cat_row_and_column():
    world = _empty_world(7, blocked=World.neighbors(Point2D(0, 0)))
    for _ in range(20):
        p = Catcher().move(world)
        assert p.x != 0 and p.y != 0
        assert not world.content(p)


def test_cat_escapes_on_small_board():
    world = _empty_world(3)
    world.step()
    assert world.cat_won is True
    assert world.cat_wins_on_space(world.cat_position)
    assert world.cat_turn is False


def test_cat_bad_move_gives_catcher_the_win():
    world = _empty_world(5, blocked=World.neighbors(Point2D(0, 0)))
    world.is_simulating = True
    world.step()
    assert world.catcher_won is True
    assert world.is_simulating is False
    assert world.cat_position == Point2D(0, 0)


def test_catcher_blocks_the_exit_and_wins():
    open_cells = {Point2D(0, 0), Point2D(1, 0)}
    blocked = [p for p in _all_points(3) if p not in open_cells]
    world = _empty_world(3, cat_turn=False, blocked=blocked)
    world.step()
    assert world.content(Point2D(1, 0)) is True
    assert world.catcher_won is True
    assert world.cat_turn is True


def test_catcher_blocks_path_start():
    world = _empty_world(7, cat_turn=False)
    expected = Catcher().generate_path(world)[0]
    world.step()
    assert world.content(expected) is True
    assert sum(world.state) == 1


def test_step_after_win_resets():
    world = _empty_world(3)
    world.step()
    assert world.cat_won
    world.step()
    assert not world.cat_won
    assert world.cat_position == Point2D(0, 0)
    assert world.cat_turn is True


def test_update_steps_only_when_timer_expires():
    world = _empty_world(7)
    world.is_simulating = True
    world.update(0.5)
    assert world.cat_turn is True
    world.update(0.6)
    assert world.cat_turn is False
    assert world.time_for_next_tick == world.time_between_ai_ticks


def test_update_does_nothing_when_paused():
    world = _empty_world(7)
    world.update(5.0)
    assert world.cat_turn is True
    assert world.cat_position == Point2D(0, 0)


def test_render_marks_cat_and_blocks():
    world = _empty_world(3, blocked=[Point2D(1, 0)])
    assert world.render().splitlines() == [". . .", " . C #", ". . ."]


def test_main_runs_a_game(capsys):
    assert main(["--size", "7", "--quiet"]) == 0
    last = capsys.readouterr().out.strip().splitlines()[-1]
    assert last in {"Cat wins", "Catcher wins", "Turn limit reached"} or last.startswith("Stalemate")


def test_main_rejects_even_size():
    with pytest.raises(SystemExit):
        main(["--size", "4"])