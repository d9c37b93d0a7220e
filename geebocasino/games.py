"""Blackjack, ride the bus, slots and russian roulette on a text console."""

from __future__ import annotations

import random
import sys
from enum import IntEnum
from typing import Callable, Optional, Sequence, TextIO

from .cards import random_blackjack_value, random_value

Ask = Callable[[str], str]


class Symbol(IntEnum):
    """Slot machine reel symbols."""

    CHERRY = 0
    SEVEN = 1
    BELL = 2


def slot_outcome(reels: Sequence[Symbol]) -> str:
    """Describe the result of three slot reels."""
    first, second, third = reels
    if first == second == third:
        return "Three of a kind!"
    if first == second or first == third or second == third:
        return "Two of a kind!"
    return "No win."


def _setup(rng, ask, out):
    return (
        random.Random() if rng is None else rng,
        input if ask is None else ask,
        sys.stdout if out is None else out,
    )


def _read_char(ask: Ask, prompt: str) -> str:
    """Read the first non-blank character of a reply; empty on end of input."""
    try:
        reply = ask(prompt)
    except EOFError:
        return ""
    return reply.strip()[:1]


def blackjack(rng=None, ask: Optional[Ask] = None, out: Optional[TextIO] = None) -> str:
    """Play one hand of blackjack; return "win", "lose" or "tie"."""
    rng, ask, out = _setup(rng, ask, out)
    player = random_blackjack_value(rng) + random_blackjack_value(rng)
    dealer = random_blackjack_value(rng) + random_blackjack_value(rng)

    print(f"You start with: {player}", file=out)
    while player < 21:
        if _read_char(ask, "Hit (h) or stand (s)? ") != "h":
            break
        card = random_blackjack_value(rng)
        player += card
        print(f"You drew: {card}, total: {player}", file=out)

    if player > 21:
        print("Bust! Dealer wins.", file=out)
        return "lose"

    print("Dealer's turn...", file=out)
    while dealer < 17:
        dealer += random_blackjack_value(rng)
    print(f"Dealer total: {dealer}", file=out)

    if dealer > 21 or player > dealer:
        print("You win!", file=out)
        return "win"
    if player < dealer:
        print("Dealer wins.", file=out)
        return "lose"
    print("It's a tie.", file=out)
    return "tie"


def ride_the_bus(rng=None, ask: Optional[Ask] = None, out: Optional[TextIO] = None) -> int:
    """Guess higher or lower until wrong; return the number of correct guesses."""
    rng, ask, out = _setup(rng, ask, out)
    current = random_value(rng)
    print(f"Starting card: {current}", file=out)
    score = 0
    while True:
        guess = _read_char(ask, "Will the next card be higher (h) or lower (l)? ")
        following = random_value(rng)
        print(f"Next card: {following}", file=out)
        if (guess == "h" and following > current) or (guess == "l" and following < current):
            print("Correct!", file=out)
            score += 1
        else:
            print(f"Wrong! Game over. Your score: {score}", file=out)
            return score
        current = following


def slots(rng=None, out: Optional[TextIO] = None) -> tuple[Symbol, Symbol, Symbol]:
    """Spin three reels, report the result and return the symbols."""
    rng, _, out = _setup(rng, None, out)
    reels = tuple(Symbol(rng.randrange(len(Symbol))) for _ in range(3))
    print(" | ".join(symbol.name for symbol in reels), file=out)
    print(slot_outcome(reels), file=out)
    return reels


def russian_roulette(rng=None, ask: Optional[Ask] = None, out: Optional[TextIO] = None) -> list[bool]:
    """Pull the trigger until the player stops; return whether each pull fired."""
    rng, ask, out = _setup(rng, ask, out)
    pulls = []
    while True:
        fired = rng.randrange(6) == 0
        pulls.append(fired)
        print("You spin the cylinder... pull the trigger...", file=out)
        if fired:
            print("BANG! Welcome to the Afterlife.", file=out)
        else:
            print("Click! You're safe.", file=out)
        if _read_char(ask, "Play again? (y/n): ") != "y":
            return pulls


def main(argv=None) -> int:
    """Show the game menu and play the chosen game."""
    print("1) BLJK\n 2) RDB\n 3) SLOTS\n 4) RR")
    try:
        choice = int(input().strip())
    except (ValueError, EOFError):
        return 0
    rng = random.Random()
    if choice == 1:
        blackjack(rng, input, sys.stdout)
    elif choice == 2:
        ride_the_bus(rng, input, sys.stdout)
    elif choice == 3:
        slots(rng, sys.stdout)
    elif choice == 4:
        russian_roulette(rng, input, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())