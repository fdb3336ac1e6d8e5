import pytest

from entities.enemy import Enemy, EnemyManager
from entities.player import Player
from maze.generator import generate_maze
from maze.maze_core import create_grid
from utils.constants import Cell
from utils.helpers import RandomSource


@pytest.fixture
def cross(make_grid):
    return make_grid([
        "|||||",
        "|| ||",
        "|   |",
        "|| ||",
        "|||||",
    ])


def manager_with(*positions):
    manager = EnemyManager()
    for x, y in positions:
        manager.add_enemy(x, y)
    return manager


def test_attack_removes_first_adjacent_in_scan_order():
    # right and up neighbours both occupied; up is scanned first
    manager = manager_with((3, 2), (2, 1))
    defeated = manager.attack_from(2, 2)

    assert defeated.pos == (2, 1)
    assert [e.pos for e in manager] == [(3, 2)]


def test_attack_scan_order_down_before_left():
    manager = manager_with((1, 2), (2, 3))
    assert manager.attack_from(2, 2).pos == (2, 3)


def test_attack_removes_at_most_one():
    manager = manager_with((2, 1), (2, 3), (1, 2), (3, 2))
    manager.attack_from(2, 2)
    assert len(manager) == 3


def test_attack_ignores_enemies_out_of_reach():
    manager = manager_with((3, 3), (2, 4), (2, 2))
    assert manager.attack_from(2, 2) is None
    assert len(manager) == 3


def test_enemy_never_steps_onto_player(cross, scripted):
    player = Player(2, 2)
    enemy = Enemy(2, 1)
    # (2,1)'s only open neighbour is the player's cell
    assert not enemy.update(cross, player, scripted())
    assert enemy.pos == (2, 1)


def test_enemy_picks_among_legal_moves(cross, scripted):
    player = Player(2, 1)
    enemy = Enemy(2, 2)
    # legal: down (2,3), left (1,2), right (3,2); index 2 -> right
    enemy.update(cross, player, scripted(indices=[2]))
    assert enemy.pos == (3, 2)


def test_boxed_in_enemy_on_player_cell_collides(scripted):
    grid = create_grid(3, 3)
    player = Player(1, 1)
    manager = manager_with((1, 1))
    assert manager.update(grid, player, scripted())
    assert manager.enemies[0].pos == (1, 1)


def test_every_enemy_moves_each_tick(scripted):
    grid = create_grid(5, 5)
    grid.set_cell(3, 2, Cell.OPEN)
    player = Player(1, 1)
    # first enemy is boxed in on the player, second can still move
    manager = manager_with((1, 1), (3, 1))

    assert manager.update(grid, player, scripted())
    assert manager.enemies[1].pos == (3, 2)


def test_enemy_moves_are_legal_over_many_ticks():
    rng = RandomSource(5)
    grid = generate_maze(21, 11, rng)
    player = Player(1, 1)
    manager = manager_with((9, 5), (19, 9), (5, 7))

    for _ in range(200):
        before = [e.pos for e in manager]
        manager.update(grid, player, rng)
        for old, enemy in zip(before, manager):
            step = abs(enemy.x - old[0]) + abs(enemy.y - old[1])
            assert step in (0, 1)
            assert not grid.is_wall(*enemy.pos)
            assert enemy.pos != player.pos


def test_enemy_at():
    manager = manager_with((1, 1), (3, 1))
    assert manager.enemy_at(3, 1) is manager.enemies[1]
    assert manager.enemy_at(2, 1) is None
