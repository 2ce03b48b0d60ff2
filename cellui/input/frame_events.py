"""Per-frame input event selection policy."""

from __future__ import annotations

import logging
from enum import StrEnum

from cellui.api.input_events import InputEvent

logger = logging.getLogger(__name__)


class EventPolicy(StrEnum):
    """What a frame sees when the poll returned nothing."""

    REUSE_LAST = "reuse_last"
    CLEAR_ON_MISS = "clear_on_miss"


class FrameEventSelector:
    """Choose the single event every widget of one frame receives.

    ``REUSE_LAST`` keeps presenting the previous event until a new one arrives,
    so a hover or press keeps showing between polls (and a held press keeps
    dispatching each frame). ``CLEAR_ON_MISS`` presents ``None`` instead.
    """

    def __init__(self, policy: EventPolicy, initial: InputEvent | None = None) -> None:
        self._policy = policy
        self._last = initial

    @property
    def policy(self) -> EventPolicy:
        return self._policy

    @property
    def last(self) -> InputEvent | None:
        return self._last

    def select(self, polled: InputEvent | None) -> InputEvent | None:
        """Return the event for this frame given the latest poll result."""
        if polled is not None:
            self._last = polled
            return polled
        if self._policy is EventPolicy.CLEAR_ON_MISS:
            self._last = None
        return self._last
