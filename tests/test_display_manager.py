import io

from entities.enemy import EnemyManager
from entities.player import Player
from game.display_manager import CLEAR_SCREEN, TerminalRenderer, header_line

HEADER = ("Level: 2 - Use WASD to move. Press 'f' to attack. Avoid enemies 'E'! "
          "Reach 'X' to win. Press 'q' to quit.")


def enemies_at(*positions):
    manager = EnemyManager()
    for x, y in positions:
        manager.add_enemy(x, y)
    return manager


def test_header_line():
    assert header_line(2) == HEADER


def test_render_frame_glyphs(make_grid):
    grid = make_grid([
        "|||||||",
        "|    X|",
        "|||||||",
    ])
    renderer = TerminalRenderer(stream=io.StringIO())
    frame = renderer.render_frame(grid, Player(1, 1), enemies_at((3, 1)), 2)

    assert frame == "\n".join([
        HEADER,
        "|||||||",
        "|P E X|",
        "|||||||",
    ]) + "\n"


def test_player_drawn_over_enemy_and_enemy_over_exit(make_grid):
    grid = make_grid([
        "|||||",
        "|  X|",
        "|||||",
    ])
    renderer = TerminalRenderer(stream=io.StringIO(), use_color=False)
    frame = renderer.render_frame(grid, Player(1, 1), enemies_at((1, 1), (3, 1)), 1)
    assert frame.splitlines()[2] == "|P E|"


def test_message_line(make_grid):
    grid = make_grid(["|||", "| |", "|||"])
    renderer = TerminalRenderer(stream=io.StringIO())
    frame = renderer.render_frame(grid, Player(1, 1), [], 1, message="Enemy defeated!")
    assert frame.splitlines()[-1] == "Enemy defeated!"


def test_render_clears_then_draws(make_grid):
    grid = make_grid(["|||", "| |", "|||"])
    stream = io.StringIO()
    renderer = TerminalRenderer(stream=stream)
    renderer.render(grid, Player(1, 1), [], 1)

    out = stream.getvalue()
    assert out.startswith(CLEAR_SCREEN)
    assert out.endswith("|P|\n|||\n")


def test_color_defaults_off_for_non_tty():
    assert TerminalRenderer(stream=io.StringIO()).use_color is False


def test_color_output(make_grid):
    grid = make_grid(["|||", "| |", "|||"])
    renderer = TerminalRenderer(stream=io.StringIO(), use_color=True)
    frame = renderer.render_frame(grid, Player(1, 1), [], 1)
    assert "\033[" in frame
    assert "P" in frame


def test_show_message():
    stream = io.StringIO()
    TerminalRenderer(stream=stream).show_message("Level 1 completed!")
    assert stream.getvalue() == "Level 1 completed!\n"
