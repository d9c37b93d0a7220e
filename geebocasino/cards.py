"""Playing cards, random card draws and the player's purse."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    """The four card suits."""

    DIAMOND = 0
    CLUB = 1
    SPADE = 2
    HEART = 3


_SUIT_NAMES = {
    Suit.DIAMOND: "Diamond",
    Suit.CLUB: "Club",
    Suit.SPADE: "Spade",
    Suit.HEART: "Heart",
}


def suit_to_string(suit) -> str:
    """Return the display name of a suit, or "Unknown" for anything else."""
    try:
        return _SUIT_NAMES[Suit(suit)]
    except (ValueError, TypeError):
        return "Unknown"


@dataclass(frozen=True)
class Card:
    """A playing card with a suit and a face value."""

    suit: Suit
    value: int

    def is_red(self) -> bool:
        """Diamonds and hearts are red."""
        return self.suit in (Suit.DIAMOND, Suit.HEART)


def random_suit(rng: random.Random) -> Suit:
    """Draw a suit uniformly at random."""
    return Suit(rng.randint(0, 3))


def random_value(rng: random.Random) -> int:
    """Draw a card value from 1 to 13."""
    return rng.randint(1, 13)


def random_blackjack_value(rng: random.Random) -> int:
    """Draw a blackjack card value from 1 to 10."""
    return rng.randint(1, 10)


@dataclass
class Player:
    """A player and the cash they hold."""

    cash: int = 0


@dataclass
class Cheater(Player):
    """A player who does not play by the rules."""