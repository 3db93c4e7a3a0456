"""Episode selector state with change subscribers."""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

EpisodeCallback = Callable[[int], None]


class EpisodeSelector:
    """
    Current episode number. Only changes through select(); subscribers are
    called synchronously, in subscription order, with the new episode.
    """

    def __init__(self, initial: int = 1, *, last: Optional[int] = None):
        if last is not None and last < 1:
            raise ValueError("last episode must be >= 1")
        self.last = last
        self._validate(initial)
        self._current = initial
        self._subscribers: List[EpisodeCallback] = []

    @property
    def current(self) -> int:
        return self._current

    def episodes(self) -> list[int]:
        """Selectable episodes, or [] when the range is open-ended."""
        if self.last is None:
            return []
        return list(range(1, self.last + 1))

    def _validate(self, episode) -> None:
        if isinstance(episode, bool) or not isinstance(episode, int):
            raise TypeError(f"episode must be an int, got {type(episode).__name__}")
        if episode < 1:
            raise ValueError(f"episode must be >= 1, got {episode}")
        if self.last is not None and episode > self.last:
            raise ValueError(f"episode must be <= {self.last}, got {episode}")

    def select(self, episode: int) -> None:
        self._validate(episode)
        if episode == self._current:
            return
        logger.debug("Episode %d -> %d", self._current, episode)
        self._current = episode
        for cb in list(self._subscribers):
            cb(episode)

    def subscribe(self, callback: EpisodeCallback) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: EpisodeCallback) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)
