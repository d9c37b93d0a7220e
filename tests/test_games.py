import io
from unittest import mock

import pytest

from geebocasino.games import (
    Symbol,
    blackjack,
    main,
    ride_the_bus,
    russian_roulette,
    slot_outcome,
    slots,
)


class ScriptedRng:
    def __init__(self, values):
        self.values = list(values)

    def randint(self, low, high):
        value = self.values.pop(0)
        assert low <= value <= high
        return value

    def randrange(self, stop):
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


def answers(*replies):
    replies = iter(replies)
    return lambda prompt: next(replies)


@pytest.mark.parametrize(
    "reels, message",
    [
        ((Symbol.BELL, Symbol.BELL, Symbol.BELL), "Three of a kind!"),
        ((Symbol.BELL, Symbol.CHERRY, Symbol.BELL), "Two of a kind!"),
        ((Symbol.SEVEN, Symbol.SEVEN, Symbol.CHERRY), "Two of a kind!"),
        ((Symbol.CHERRY, Symbol.SEVEN, Symbol.BELL), "No win."),
    ],
)
def test_slot_outcome(reels, message):
    assert slot_outcome(reels) == message


def test_slot_outcome_needs_three_reels():
    with pytest.raises(ValueError):
        slot_outcome((Symbol.BELL, Symbol.BELL))


def test_blackjack_player_wins_on_stand():
    out = io.StringIO()
    result = blackjack(ScriptedRng([10, 10, 10, 7]), answers("s"), out)
    assert result == "win"
    assert "You win!" in out.getvalue()


def test_blackjack_bust():
    out = io.StringIO()
    result = blackjack(ScriptedRng([10, 5, 10, 7, 10]), answers("h"), out)
    assert result == "lose"
    assert "Bust! Dealer wins." in out.getvalue()
    assert "Dealer's turn" not in out.getvalue()


def test_blackjack_tie():
    out = io.StringIO()
    assert blackjack(ScriptedRng([10, 7, 10, 7]), answers("s"), out) == "tie"
    assert "It's a tie." in out.getvalue()


def test_blackjack_end_of_input_stands():
    def closed(prompt):
        raise EOFError

    out = io.StringIO()
    assert blackjack(ScriptedRng([10, 7, 10, 8]), closed, out) == "lose"


def test_ride_the_bus_counts_correct_guesses():
    out = io.StringIO()
    score = ride_the_bus(ScriptedRng([5, 9, 3, 3]), answers("h", "l", "h"), out)
    assert score == 2
    assert out.getvalue().count("Correct!") == score


def test_ride_the_bus_first_guess_wrong():
    out = io.StringIO()
    assert ride_the_bus(ScriptedRng([5, 2]), answers("h"), out) == 0
    assert "Wrong! Game over. Your score: 0" in out.getvalue()


def test_slots_three_of_a_kind():
    out = io.StringIO()
    reels = slots(ScriptedRng([1, 1, 1]), out)
    assert reels == (Symbol.SEVEN, Symbol.SEVEN, Symbol.SEVEN)
    assert out.getvalue() == "SEVEN | SEVEN | SEVEN\nThree of a kind!\n"


def test_slots_no_win():
    out = io.StringIO()
    reels = slots(ScriptedRng([0, 1, 2]), out)
    assert out.getvalue().splitlines() == ["CHERRY | SEVEN | BELL", slot_outcome(reels)]


def test_russian_roulette_keeps_playing_until_no():
    out = io.StringIO()
    pulls = russian_roulette(ScriptedRng([0, 3]), answers("y", "n"), out)
    assert pulls == [True, False]
    assert "BANG! Welcome to the Afterlife." in out.getvalue()
    assert "Click! You're safe." in out.getvalue()


def test_main_unknown_choice(capsys):
    with mock.patch("builtins.input", side_effect=["9"]):
        assert main([]) == 0
    assert capsys.readouterr().out.startswith("1) BLJK")


def test_main_plays_slots(capsys):
    with mock.patch("builtins.input", side_effect=["3"]):
        assert main() == 0
    last = capsys.readouterr().out.splitlines()[-1]
    assert last in {"Three of a kind!", "Two of a kind!", "No win."}