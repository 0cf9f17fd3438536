"""
game.py

One round of Lucky Vault.

A secret country is drawn once when the session starts. Each input line is
then either ignored (blank), a quit, or an attempt. Attempts are answered
with a wrong-length notice, a count of letters in the right position, or a
win. The session only ends on a quit or a win; there is no attempt limit.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from lucky_vault import session_log
from lucky_vault.config import MODE_NAME, QUIT_TOKEN
from lucky_vault.patterns import pick_secret, position_matches


logger = logging.getLogger(__name__)

PROMPT = "Your guess: "


class SessionState(enum.Enum):
    AWAITING_INPUT = "awaiting_input"
    FINISHED = "finished"


class FeedbackKind(enum.Enum):
    RETRY = "retry"
    QUIT = "quit"
    WRONG_LENGTH = "wrong_length"
    MATCHES = "matches"
    CORRECT = "correct"


@dataclass(frozen=True)
class Feedback:
    kind: FeedbackKind
    message: str
    attempts: int
    matches: Optional[int] = None
    new_best: bool = False


class GuessSession:
    """
    Orchestrates a single round.

    `scores` is a HighScoreStore and `log` a SessionLog; the session writes to
    both but does not own them, so the caller closes the log.
    """

    def __init__(self, words, scores, log, rng=None, quit_token=QUIT_TOKEN):
        if not words:
            raise ValueError("A session needs at least one word to guess.")

        self.scores = scores
        self.log = log
        self.quit_token = quit_token
        self.rng = rng if rng is not None else np.random.default_rng()
        self.secret = pick_secret(words, self.rng)
        self.attempts = 0
        self.state = SessionState.AWAITING_INPUT

    @property
    def finished(self):
        return self.state is SessionState.FINISHED

    def submit(self, raw):
        """Evaluate one line of input and return what to tell the player."""
        if self.finished:
            raise RuntimeError("The session is already finished.")

        guess = raw.strip()

        if not guess:
            return Feedback(FeedbackKind.RETRY, "Empty guess. Try again.", self.attempts)

        if guess.lower() == self.quit_token.lower():
            return self.quit()

        self.attempts += 1

        if len(guess) != len(self.secret):
            self.log.append(guess, session_log.WRONG_LENGTH)
            return Feedback(
                FeedbackKind.WRONG_LENGTH,
                f"Wrong length ({len(guess)}). Need {len(self.secret)}.",
                self.attempts,
            )

        count = position_matches(guess, self.secret)
        if count == len(self.secret):
            return self._win(guess)

        self.log.append(guess, session_log.matches(count))
        return Feedback(
            FeedbackKind.MATCHES,
            f"Not it. {count} letter(s) correct (right position).",
            self.attempts,
            matches=count,
        )

    def quit(self):
        """End the round without touching the best score."""
        self.log.append(self.quit_token, session_log.USER_EXIT)
        self.state = SessionState.FINISHED
        logger.debug("Session quit after %d attempts", self.attempts)
        return Feedback(FeedbackKind.QUIT, "Bye.", self.attempts)

    def _win(self, guess):
        self.log.append(guess, session_log.correct_in(self.attempts))
        self.state = SessionState.FINISHED

        message = f"Correct in {self.attempts} attempts! Word was: {self.secret}"
        new_best = self.scores.update(self.attempts)
        if new_best:
            message += f"\nNEW BEST for {MODE_NAME} mode!"

        logger.debug("Session won in %d attempts (new best: %s)", self.attempts, new_best)
        return Feedback(
            FeedbackKind.CORRECT,
            message,
            self.attempts,
            matches=len(self.secret),
            new_best=new_best,
        )


def play(session, read=None, write=None):
    """
    Prompt for guesses until the session finishes.

    Defaults to input() and print(), looked up at call time. Running out of
    input counts as a quit.
    """
    read = read or input
    write = write or print
    while not session.finished:
        try:
            line = read(PROMPT)
        except EOFError:
            write("")
            feedback = session.quit()
        else:
            feedback = session.submit(line)
        write(feedback.message)
    return session.attempts
