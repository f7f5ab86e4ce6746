"""Terminal front end: prints the numbered choices and reads a number back."""

import sys
from typing import TextIO

from .logging import get_logger

logger = get_logger(__name__)

PROMPT = "> "


class ConsoleIO:
    """GameIO over a pair of text streams (stdin/stdout by default).

    Input that is not a number, or is out of range for the choices just
    shown, is rejected with a hint and asked for again. End of input
    counts as quitting.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self._highest = 0

    def display_choices(self, choices: list[tuple[int, str]]) -> None:
        for index, description in choices:
            print(f"{index}) {description}", file=self.stdout)
        self._highest = max((index for index, _ in choices), default=0)

    def display_message(self, message: str) -> None:
        print(message, file=self.stdout)

    def read_selection(self) -> int:
        while True:
            print(PROMPT, end="", file=self.stdout, flush=True)
            line = self.stdin.readline()
            if not line:
                logger.debug("input_closed")
                return 0

            text = line.strip()
            try:
                selection = int(text)
            except ValueError:
                logger.debug("selection_not_a_number", text=text)
                print(f"Please enter a number from 0 to {self._highest}.", file=self.stdout)
                continue

            if 0 <= selection <= self._highest:
                return selection
            logger.debug("selection_out_of_range", selection=selection)
            print(f"Please enter a number from 0 to {self._highest}.", file=self.stdout)
