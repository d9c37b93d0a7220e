"""A terminal casino with blackjack, ride the bus, slots and Russian roulette."""

__version__ = "0.1.0"