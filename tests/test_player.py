import pytest

from entities.player import Player
from utils.constants import Command


@pytest.fixture
def corridor(make_grid):
    return make_grid([
        "|||||",
        "|  X|",
        "|||||",
    ])


def test_move_into_open_cell(corridor):
    player = Player(1, 1)
    assert player.move(corridor, Command.RIGHT)
    assert player.pos == (2, 1)


def test_move_into_wall_is_noop(corridor):
    player = Player(1, 1)
    assert not player.move(corridor, Command.DOWN)
    assert not player.move(corridor, Command.UP)
    assert not player.move(corridor, Command.LEFT)
    assert player.pos == (1, 1)


def test_move_onto_exit(corridor):
    player = Player(2, 1)
    assert player.move(corridor, Command.RIGHT)
    assert player.pos == (3, 1)


@pytest.mark.parametrize("command", [Command.ATTACK, Command.QUIT, Command.UNKNOWN])
def test_non_movement_commands_are_noops(corridor, command):
    player = Player(1, 1)
    assert not player.move(corridor, command)
    assert player.pos == (1, 1)


def test_each_direction_moves_one_step(make_grid):
    grid = make_grid([
        "|||||",
        "|| ||",
        "|   |",
        "|| ||",
        "|||||",
    ])
    for command, expected in [
        (Command.UP, (2, 1)),
        (Command.DOWN, (2, 3)),
        (Command.LEFT, (1, 2)),
        (Command.RIGHT, (3, 2)),
    ]:
        player = Player(2, 2)
        player.move(grid, command)
        assert player.pos == expected


def test_default_position_is_start():
    assert Player().pos == (1, 1)
