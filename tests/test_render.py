import pygame

from solong.game import Game, Key
from solong.mapfile import TILE_SIZE
from solong.render import Renderer, load_textures, main, tiles_to_draw
from solong.xpm import XpmImage

MAP = "111111\n1P0CE1\n111111"

COLORS = {
    "back": 0x102030,
    "collectible": 0x00FF00,
    "exit": 0x0000FF,
    "player": 0xFF0000,
    "wall": 0x808080,
}


def make_game():
    return Game.from_text(MAP)


def solid(color):
    return XpmImage(TILE_SIZE, TILE_SIZE, [color] * (TILE_SIZE * TILE_SIZE))


def rgb(color):
    return ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)


def test_tiles_background_everywhere():
    game = make_game()
    tiles = list(tiles_to_draw(game))
    backs = [t for t in tiles if t[2] == "back"]
    assert len(backs) == 6 * 3
    walls = [t for t in tiles if t[2] == "wall"]
    assert len(walls) == MAP.count("1")


def test_tiles_player_position():
    game = make_game()
    players = [t for t in tiles_to_draw(game) if t[2] == "player"]
    assert players == [(game.player_y * TILE_SIZE, game.player_x * TILE_SIZE, "player")]


def test_tile_follows_background():
    tiles = list(tiles_to_draw(make_game()))
    for index, (px, py, name) in enumerate(tiles):
        if name != "back":
            assert tiles[index - 1] == (px, py, "back")


def test_draw_colors():
    game = make_game()
    renderer = Renderer(game, {name: solid(c) for name, c in COLORS.items()})
    renderer.draw()
    assert renderer.screen.get_at((0, 0))[:3] == rgb(COLORS["wall"])
    assert renderer.screen.get_at((2 * TILE_SIZE, TILE_SIZE))[:3] == rgb(COLORS["back"])
    assert renderer.screen.get_at((TILE_SIZE, TILE_SIZE))[:3] == rgb(COLORS["player"])


def test_transparent_player_shows_background():
    game = make_game()
    textures = {name: solid(c) for name, c in COLORS.items()}
    textures["player"] = solid(0xFF000000)
    renderer = Renderer(game, textures)
    renderer.draw()
    assert renderer.screen.get_at((TILE_SIZE, TILE_SIZE))[:3] == rgb(COLORS["back"])


def test_redraw_after_move():
    game = make_game()
    renderer = Renderer(game, {name: solid(c) for name, c in COLORS.items()})
    game.handle_key(Key.D)
    renderer.draw()
    assert renderer.screen.get_at((2 * TILE_SIZE, TILE_SIZE))[:3] == rgb(COLORS["player"])
    assert renderer.screen.get_at((TILE_SIZE, TILE_SIZE))[:3] == rgb(COLORS["back"])


def test_screen_size():
    game = make_game()
    renderer = Renderer(game, {name: solid(c) for name, c in COLORS.items()})
    assert renderer.screen.get_size() == game.window_size()
    assert isinstance(renderer.screen, pygame.Surface)


def test_load_textures(tmp_path):
    names = ["empty", "item", "exit", "player", "wall"]
    for name in names:
        (tmp_path / f"{name}.xpm").write_text(
            'static char *x[] = {\n"2 1 2 1",\n"a c #FF0000",\n"b c None",\n"ab"\n};\n'
        )
    textures = load_textures(tmp_path)
    assert sorted(textures) == ["back", "collectible", "exit", "player", "wall"]
    assert textures["wall"].pixel(0, 0) == 0xFF0000
    assert textures["back"].pixel(1, 0) == 0xFF000000


def test_main_needs_one_argument(capsys):
    assert main([]) == 1
    assert "Il faut un fichier en parametre." in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nothing.ber")]) == 1
    assert "Error" in capsys.readouterr().out


def test_main_wrong_extension(tmp_path, capsys):
    path = tmp_path / "map.txt"
    path.write_text(MAP, encoding="utf-8")
    assert main([str(path)]) == 1
    assert "extension .ber" in capsys.readouterr().out


def test_main_invalid_path(tmp_path, capsys):
    path = tmp_path / "map.ber"
    path.write_text("111111\n1P1CE1\n111111", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Pas de chemin valide." in capsys.readouterr().out