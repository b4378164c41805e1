"""Lifecycle logging wrapper around a Vec2 value."""

from __future__ import annotations

import logging

from . import config
from .math.vec2 import Vec2

logger = logging.getLogger(__name__)


class VerboseVec2:
    """Holds a vector and logs when it is created and released.

    The wrapper never does arithmetic; use ``.vector`` for that.
    """

    def __init__(self, vector: Vec2, verbose: bool = config.DEFAULT_VERBOSE) -> None:
        self.vector = vector
        self.verbose = verbose
        self._released = False
        if self.verbose:
            logger.info("created %r", self.vector)

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        if self.verbose:
            logger.info("released %r", self.vector)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    def __repr__(self) -> str:
        return f"VerboseVec2({self.vector!r}, verbose={self.verbose})"
