import pytest

from arena_bots.mini_game import MiniGame


@pytest.fixture
def mini_game():
    return MiniGame()


def test_has_seven_registers(mini_game):
    assert mini_game.register_count == 7


def test_gpu_displays_game_over(mini_game):
    assert mini_game.gpu == "GAME OVER"


def test_all_registers_are_zero(mini_game):
    values = [mini_game.register(i) for i in range(mini_game.register_count)]
    assert values == [0] * 7


@pytest.mark.parametrize("index", [7, -1])
def test_unknown_register_raises(mini_game, index):
    with pytest.raises(IndexError):
        mini_game.register(index)