# geebocasino

A small casino for the terminal. It has four games:

- **Blackjack**: you hit or stand against a dealer, who draws until reaching
  at least 17.
- **Ride the Bus**: you guess whether the next card is higher or lower, and the
  game ends at the first wrong guess.
- **Slots**: three reels of CHERRY, SEVEN and BELL.
- **Russian Roulette**: a six-chamber cylinder, spun again before every pull.

## Installation

```
pip install .
```

No third-party libraries are needed. The menu and map screens use the
standard `curses` module, so on Windows you need a curses build for Python.

## Commands

Play a game from the plain text prompt:

```
geebocasino
```

Enter `1` (blackjack), `2` (ride the bus), `3` (slots) or `4` (Russian
roulette). Any other input exits.

Open the full-screen main menu:

```
geebocasino-menu
```

Move with the up and down arrow keys and press Enter to pick an entry. Choose
"5. Exit" to leave.

Show the game map, which splits the screen into four coloured quarters, one
per game:

```
geebocasino-map
```

Press any key to close it.

## Using it as a library

The games take a random generator, a function that asks for input and a text
stream for output, so they can be driven from code:

```python
import random
import sys

from geebocasino.games import Symbol, blackjack, slot_outcome

rng = random.Random(1)
result = blackjack(rng, ask=lambda prompt: "s", out=sys.stdout)  # "win", "lose" or "tie"

print(slot_outcome([Symbol.SEVEN, Symbol.SEVEN, Symbol.BELL]))  # Two of a kind!
```

`ride_the_bus` returns the number of correct guesses, `slots` returns the
three symbols, and `russian_roulette` returns a list telling whether each pull
fired.

`geebocasino.cards` holds `Card`, `Suit`, `suit_to_string`, `Player`,
`Cheater` and the card-drawing helpers `random_suit`, `random_value` and
`random_blackjack_value`.

`geebocasino.circlelist` holds `CircleList`, a circular doubly linked list of
named nodes:

```python
from geebocasino.circlelist import CircleList

ring = CircleList()
ring.add_items(["cat", "dog", "fish"])
ring.delete_node("dog")
print(list(ring), len(ring))  # ['cat', 'fish'] 2
```

## What it does not do

- There is no money in play. `Player` holds a cash amount, but no game reads or
  changes it, and nothing is won or lost beyond the message shown.
- The full-screen menu only shows a title screen for each game; it does not
  start the game itself. Use `geebocasino` to play.
- In the menu the balance is fixed at $55, so the Russian roulette screen always
  welcomes you; below $50 it would show the refusal from `roulette_message`.

## Running the tests

```
pip install .[test]
pytest
```