import pytest

from solong.game import Game, Key
from solong.mapfile import TILE_SIZE, MapError

SIMPLE = "11111\n1PCE1\n11111"
EXIT_FIRST = "1111111\n1PEC001\n1111111"


def make(text):
    return Game.from_text(text)


def test_from_text_finds_player():
    game = make(SIMPLE)
    assert (game.player_x, game.player_y) == (1, 1)
    assert game.grid[1][1] == "P"


def test_window_size():
    game = make(SIMPLE)
    assert game.window_size() == (5 * TILE_SIZE, 3 * TILE_SIZE)


def test_collect_item(capsys):
    game = make(SIMPLE)
    assert game.handle_key(Key.D) is True
    assert game.collected == 1
    assert game.moves == 1
    assert game.grid[1][1] == "0"
    assert game.grid[1][2] == "P"
    assert "Total moves : 1" in capsys.readouterr().out


def test_wall_blocks():
    game = make(SIMPLE)
    assert game.handle_key(Key.W) is False
    assert game.moves == 0
    assert (game.player_x, game.player_y) == (1, 1)


def test_win_after_collecting(capsys):
    game = make(SIMPLE)
    game.handle_key(Key.D)
    game.handle_key(Key.D)
    assert game.won is True
    assert game.running is False
    output = capsys.readouterr().out
    assert "GAGNÉ" in output
    assert "Fin du jeu..." in output


def test_exit_restored_when_left():
    game = make(EXIT_FIRST)
    game.handle_key(Key.D)
    assert game.won is False
    assert (game.exit_x, game.exit_y) == (1, 2)
    game.handle_key(Key.D)
    assert game.grid[1][2] == "E"
    assert game.collected == 1
    game.handle_key(Key.A)
    assert game.won is True


def test_escape_closes(capsys):
    game = make(SIMPLE)
    game.handle_key(Key.ESC)
    assert game.running is False
    assert "Fin du jeu..." in capsys.readouterr().out


def test_unknown_key_ignored():
    game = make(SIMPLE)
    assert game.handle_key(99) is False
    assert game.moves == 0


def test_not_surrounded():
    with pytest.raises(MapError, match="entourée de murs"):
        make("11111\n1PCE0\n11111")


def test_no_valid_path():
    with pytest.raises(MapError, match="Pas de chemin valide"):
        make("111111\n1P1CE1\n111111")


def test_from_file(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text(SIMPLE, encoding="utf-8")
    game = Game.from_file(path)
    assert game.total_coll == 1
    assert "".join(game.grid[1]) == "1PCE1"


def test_move_directions():
    game = make("11111\n10001\n10P01\n1C0E1\n11111")
    start = (game.player_x, game.player_y)
    game.handle_key(Key.W)
    assert (game.player_x, game.player_y) == (start[0] - 1, start[1])
    game.handle_key(Key.S)
    game.handle_key(Key.A)
    assert (game.player_x, game.player_y) == (start[0], start[1] - 1)