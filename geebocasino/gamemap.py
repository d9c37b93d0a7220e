"""A four-quadrant map of the casino games."""

from __future__ import annotations

import curses
import sys

GAME_TITLES = (
    "Game 1: BLACKJACK",
    "Game 2: RIDE THE BUS",
    "Game 3: SLOTS",
    "Game 4: RUSSIAN ROULETTE - MUST ACQUIRE $50 TO PLAY",
)

_BACKGROUNDS = (curses.COLOR_RED, curses.COLOR_BLUE, curses.COLOR_MAGENTA, curses.COLOR_CYAN)


def quadrants(max_y: int, max_x: int) -> list[tuple[int, int, int, int]]:
    """Return (height, width, top, left) for the four screen quarters."""
    half_y, half_x = max_y // 2, max_x // 2
    return [(half_y, half_x, top, left) for top in (0, half_y) for left in (0, half_x)]


def draw_map(stdscr) -> list:
    """Draw one coloured window per game, wait for a key, return the windows."""
    stdscr.refresh()
    curses.start_color()
    for pair, background in enumerate(_BACKGROUNDS, start=1):
        curses.init_pair(pair, curses.COLOR_BLACK, background)

    windows = []
    layout = zip(quadrants(*stdscr.getmaxyx()), GAME_TITLES)
    for pair, (geometry, title) in enumerate(layout, start=1):
        window = curses.newwin(*geometry)
        try:
            window.addstr(0, 0, title)
        except curses.error:
            pass  # title is cut short when the quarter is too small
        window.bkgd(" ", curses.color_pair(pair))
        window.refresh()
        windows.append(window)
    stdscr.getch()
    return windows


def main(argv=None) -> int:
    """Show the game map on the terminal."""
    try:
        curses.wrapper(draw_map)
    except curses.error:
        print("Unable to allocate memory for new window.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())