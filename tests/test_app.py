import pytest

from xjtuer.app import TITLE, Game, main
from xjtuer.state import BGM, AudioPlayer, GameState, Music, NeedReload
from xjtuer.world import CollisionStarted, Kid, Sprite


def _images(world):
    return [world.get(e, Sprite).image for e in world.query(Sprite)]


@pytest.fixture
def game():
    g = Game()
    g.startup()
    return g


def _start(game):
    game.step(reload_pressed=True)
    return game.step(reload_released=True)


def test_game_begins_in_reload_without_music(game):
    assert game.machine.state is GameState.RELOAD
    assert list(game.world.query(BGM)) == []
    assert "q1" not in _images(game.world)


def test_releasing_reload_enters_game(game):
    transition = _start(game)
    assert transition == (GameState.RELOAD, GameState.IN_GAME)
    assert game.machine.in_game
    (bgm,) = list(game.world.query(BGM))
    assert game.world.get(bgm, AudioPlayer).sound is Music.BUILDING
    assert {"q1", "q2", "q3", "q4", "q5"} <= set(_images(game.world))


def test_reload_rebuilds_same_number_of_reloadable_entities(game):
    _start(game)
    before = len(list(game.world.query(NeedReload)))
    assert game.step(reload_pressed=True) == (GameState.IN_GAME, GameState.RELOAD)
    game.step(reload_released=True)
    after = len(list(game.world.query(NeedReload)))
    assert after == before
    assert len(list(game.world.query(BGM))) == 1


def test_rooms_do_not_react_while_reloading(game):
    kid = game.world.spawn(Kid())
    wrong = game.quiz_warps[1][0]
    game.step([CollisionStarted(kid, wrong)])
    assert "h1" not in _images(game.world)


def test_rooms_react_in_game(game):
    _start(game)
    kid = game.world.spawn(Kid())
    wrong = game.quiz_warps[1][0]
    game.step([CollisionStarted(kid, wrong)])
    images = _images(game.world)
    assert "h1" in images
    assert "q1" not in images


def test_kid_survives_reload(game):
    _start(game)
    kid = game.world.spawn(Kid())
    game.step(reload_pressed=True)
    game.step(reload_released=True)
    assert kid in game.world


def test_start_warp_switches_music(game):
    _start(game)
    kid = game.world.spawn(Kid())
    game.step([CollisionStarted(game.start_warp, kid)])
    (bgm,) = list(game.world.query(BGM))
    assert game.world.get(bgm, AudioPlayer).sound is Music.FESTIVAL


def test_main_reports_running_game(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert TITLE in out
    assert "in_game" in out


def test_main_rejects_negative_frames():
    with pytest.raises(SystemExit):
        main(["--frames", "-1"])