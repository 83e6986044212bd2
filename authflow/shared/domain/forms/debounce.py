"""Debounced whole-form validity.

The coordinator watches the validity pair of the email and password fields.
Every change cancels the armed timer and arms a fresh one, so only the last
change of a burst survives long enough to commit the form validity.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Tuple

from .field_state import Validity

logger = logging.getLogger(__name__)

ValidityPair = Tuple[Validity, Validity]


class DebounceCoordinator:
    """Cancel-and-rearm timer around a single form validity flag.

    At most one timer handle is live at any time. Timers run on the asyncio
    loop given at construction, or the loop running when ``observe`` is
    called.
    """

    def __init__(
        self,
        delay: float,
        on_commit: Optional[Callable[[bool], None]] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ) -> None:
        """
        Args:
            delay: Quiet period in seconds
            on_commit: Called with the new form validity each time a timer fires
            loop: Event loop for the timers, defaults to the running loop
        """
        if delay < 0:
            raise ValueError(f"Debounce delay must be >= 0, got {delay}")
        self._delay = delay
        self._on_commit = on_commit
        self._loop = loop

        self._handle: Optional[asyncio.TimerHandle] = None
        # Bumped on every arm; a callback whose generation is stale must not commit
        self._generation = 0
        self._observed: Optional[ValidityPair] = None
        self._form_is_valid = False
        self._closed = False

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def form_is_valid(self) -> bool:
        """Form validity as of the last commit."""
        return self._form_is_valid

    @property
    def pending(self) -> bool:
        return self._handle is not None

    @property
    def closed(self) -> bool:
        return self._closed

    def observe(self, email_validity: Validity, password_validity: Validity) -> bool:
        """Record the current validity pair and rearm if it changed.

        Returns:
            True if a new timer was armed

        Raises:
            RuntimeError: If no loop was given and none is running; the
                coordinator state is left unchanged
        """
        if self._closed:
            logger.debug("Ignoring observe() on a torn down coordinator")
            return False

        pair = (email_validity, password_validity)
        if pair == self._observed:
            return False

        # Resolve the loop first; if there is none, the pair stays unobserved
        loop = self._loop or asyncio.get_running_loop()
        self._observed = pair
        self.cancel()
        self._arm(loop)
        return True

    def cancel(self) -> None:
        """Cancel the armed timer, if any. Safe to call repeatedly."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug("Debounce timer cancelled")

    def teardown(self) -> None:
        """Cancel the armed timer and refuse any further scheduling."""
        self.cancel()
        self._closed = True
        logger.debug("Debounce coordinator torn down")

    def _arm(self, loop: asyncio.AbstractEventLoop) -> None:
        self._generation += 1
        self._handle = loop.call_later(self._delay, self._fire, self._generation)
        logger.debug(f"Debounce timer armed for {self._delay:.3f}s (generation {self._generation})")

    def _fire(self, generation: int) -> None:
        if self._closed or generation != self._generation:
            return
        self._handle = None

        email_validity, password_validity = self._observed or (Validity.UNKNOWN, Validity.UNKNOWN)
        self._form_is_valid = (
            email_validity is Validity.VALID and password_validity is Validity.VALID
        )
        logger.debug(f"Form validity committed: {self._form_is_valid}")

        if self._on_commit is not None:
            self._on_commit(self._form_is_valid)
