"""The full-screen casino main menu."""

from __future__ import annotations

import curses
import sys
from dataclasses import dataclass

STARTING_BALANCE = 55
ROULETTE_MINIMUM = 50

START_PAIR = 1
MENU_PAIR = 2
BLACKJACK_PAIR = 3
RIDE_THE_BUS_PAIR = 4
SLOTS_PAIR = 5
ROULETTE_PAIR = 6

OPTIONS = ("1. BlackJack", "2. Ride the Bus", "3. Slots", "4. Russian Roulette", "5. Exit")
PROMPT = "Press any key to continue..."
_ENTER_KEYS = (10, 13, curses.KEY_ENTER)


@dataclass
class Menu:
    """A wrapping list of options with one selected."""

    options: tuple = OPTIONS
    choice: int = 0

    def move_up(self) -> None:
        self.choice = len(self.options) - 1 if self.choice == 0 else self.choice - 1

    def move_down(self) -> None:
        self.choice = 0 if self.choice == len(self.options) - 1 else self.choice + 1

    def selected(self) -> str:
        return self.options[self.choice]


def roulette_message(balance: int) -> str:
    """Return the roulette greeting, or the refusal when funds are short."""
    if balance < ROULETTE_MINIMUM:
        return "INSUFFICIENT FUNDS - OBTAIN $50 TO PLAY"
    return "WELCOME TO RUSSIAN ROULETTE"


def _centre(stdscr, text: str) -> int:
    _, cols = stdscr.getmaxyx()
    return max((cols - len(text)) // 2, 0)


def _init_colors() -> None:
    curses.start_color()
    curses.init_pair(START_PAIR, curses.COLOR_WHITE, curses.COLOR_BLUE)
    curses.init_pair(MENU_PAIR, curses.COLOR_GREEN, curses.COLOR_BLACK)
    curses.init_pair(BLACKJACK_PAIR, curses.COLOR_RED, curses.COLOR_BLACK)
    curses.init_pair(RIDE_THE_BUS_PAIR, curses.COLOR_YELLOW, curses.COLOR_BLACK)
    curses.init_pair(SLOTS_PAIR, curses.COLOR_CYAN, curses.COLOR_BLACK)
    curses.init_pair(ROULETTE_PAIR, curses.COLOR_MAGENTA, curses.COLOR_BLACK)


def game_screen(stdscr, pair: int, title: str) -> int:
    """Show a centred title screen in a colour pair and wait for a key."""
    stdscr.clear()
    stdscr.bkgd(" ", curses.color_pair(pair))
    rows, _ = stdscr.getmaxyx()
    middle = rows // 2
    stdscr.addstr(max(middle - 2, 0), _centre(stdscr, title), title)
    stdscr.addstr(middle, _centre(stdscr, PROMPT), PROMPT)
    stdscr.refresh()
    return stdscr.getch()


def _draw_menu(stdscr, menu: Menu) -> None:
    stdscr.clear()
    stdscr.bkgd(" ", curses.color_pair(MENU_PAIR))
    stdscr.addstr(2, _centre(stdscr, "MAIN MENU"), "MAIN MENU")
    for row, option in enumerate(menu.options, start=4):
        attr = curses.A_REVERSE if option == menu.selected() else curses.A_NORMAL
        stdscr.addstr(row, _centre(stdscr, option), option, attr)
    stdscr.refresh()


def run(stdscr) -> None:
    """Show the welcome screen, then run the menu until Exit is chosen."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.keypad(True)
    _init_colors()
    game_screen(stdscr, START_PAIR, "WELCOME TO GEEBO'S GAMBLING BONANZA!")

    screens = {
        0: (BLACKJACK_PAIR, "WELCOME TO BLACKJACK"),
        1: (RIDE_THE_BUS_PAIR, "WELCOME TO RIDE THE BUS"),
        2: (SLOTS_PAIR, "WELCOME TO SLOTS"),
        3: (ROULETTE_PAIR, roulette_message(STARTING_BALANCE)),
    }
    menu = Menu()
    while True:
        _draw_menu(stdscr, menu)
        key = stdscr.getch()
        if key == curses.KEY_UP:
            menu.move_up()
        elif key == curses.KEY_DOWN:
            menu.move_down()
        elif key in _ENTER_KEYS:
            if menu.choice == len(menu.options) - 1:
                return
            pair, title = screens[menu.choice]
            game_screen(stdscr, pair, title)


def main(argv=None) -> int:
    """Start the menu on the terminal."""
    curses.wrapper(run)
    return 0


if __name__ == "__main__":
    sys.exit(main())