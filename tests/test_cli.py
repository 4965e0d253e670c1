import pygame
import pytest

from raycube.cli import main, run
from raycube.parsing import ParseError

VALID_SCENE = """NO ./north.xpm
SO ./south.xpm
WE ./west.xpm
EA ./east.xpm

F 220,100,0
C 225,30,0

111111
100001
1000N1
111111
"""


@pytest.fixture
def scene(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text(VALID_SCENE)
    return path


def test_no_arguments_is_rejected(capsys):
    assert main([]) == 1
    assert "Don't be silly" in capsys.readouterr().err


def test_too_many_arguments_is_rejected(capsys):
    assert main(["a.cub", "b.cub"]) == 1
    assert "Don't be silly" in capsys.readouterr().err


def test_wrong_extension_is_reported(tmp_path, capsys):
    path = tmp_path / "scene.txt"
    path.write_text(VALID_SCENE)
    assert main([str(path)]) == 1
    assert "Wrong map extension (.cub)" in capsys.readouterr().err


def test_missing_file_is_reported(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cub")]) == 1
    assert capsys.readouterr().err.startswith("Error")


def test_run_raises_on_open_map(tmp_path):
    path = tmp_path / "open.cub"
    path.write_text(VALID_SCENE.replace("1000N1", "1000N "))
    with pytest.raises(ParseError):
        run(str(path))


def test_main_plays_valid_scene(scene, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_ESCAPE))
    try:
        assert main([str(scene)]) == 0
    finally:
        pygame.display.quit()


def test_run_returns_config(scene, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    try:
        config = run(str(scene))
    finally:
        pygame.display.quit()
    assert config.north == "./north.xpm"
    assert config.floor == (220, 100, 0)
    assert config.ceiling == (225, 30, 0)