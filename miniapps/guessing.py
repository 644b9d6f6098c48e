"""Number guessing game: find a secret number between 1 and 100."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from typing import Sequence

MAX_ATTEMPTS = 7
LOWEST = 1
HIGHEST = 100


class GuessOutcome(enum.Enum):
    """Result of a single guess."""

    TOO_LOW = "Too low! Try again."
    TOO_HIGH = "Too high! Try again."
    CORRECT = "Correct!"


class GameOver(Exception):
    """Raised when a guess is made after the game has ended."""


def _random_secret() -> int:
    return random.randint(LOWEST, HIGHEST)


@dataclass
class GuessingGame:
    """State of one round of the guessing game."""

    secret: int = field(default_factory=_random_secret)
    max_attempts: int = MAX_ATTEMPTS
    attempts: int = field(default=0, init=False)
    won: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    @property
    def finished(self) -> bool:
        """True once the number was found or the attempts are used up."""
        return self.won or self.attempts >= self.max_attempts

    def guess(self, value: int) -> GuessOutcome:
        """Count one attempt and compare the value with the secret."""
        if self.finished:
            raise GameOver("the game is already over")
        self.attempts += 1
        if value < self.secret:
            return GuessOutcome.TOO_LOW
        if value > self.secret:
            return GuessOutcome.TOO_HIGH
        self.won = True
        return GuessOutcome.CORRECT

    def attempts_left(self) -> int:
        """Number of guesses still allowed."""
        return max(self.max_attempts - self.attempts, 0)


def _read_guess() -> int:
    while True:
        text = input("Enter your guess: ")
        try:
            return int(text.strip())
        except ValueError:
            print("Please enter a whole number.")


def main(argv: Sequence[str] | None = None) -> int:
    """Play one interactive game on standard input and output."""
    game = GuessingGame()

    print("=============================")
    print("   Welcome to Guessing Game  ")
    print("=============================")
    print(f"I have selected a number between {LOWEST} and {HIGHEST}.")
    print(f"You have {game.max_attempts} tries to guess it!")

    try:
        while not game.finished:
            outcome = game.guess(_read_guess())
            if outcome is GuessOutcome.CORRECT:
                print(f"Congratulations! You guessed it in {game.attempts} attempts.")
                break
            print(outcome.value)
            if game.finished:
                print(
                    f"Sorry, you ran out of attempts. The number was {game.secret}."
                )
    except EOFError:
        print()

    print("Thanks for playing!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())