"""Event source contract and its curses implementation."""

from __future__ import annotations

import curses
import logging
from collections.abc import Callable
from typing import Any, Protocol, TypeAlias

from cellui.api.input_events import InputEvent, ResizeEvent
from cellui.input.curses_events import translate_key, translate_mouse

logger = logging.getLogger(__name__)

MouseReader: TypeAlias = Callable[[], tuple[int, int, int, int, int]]


class EventSource(Protocol):
    """Non-blocking input polling contract."""

    def poll(self, timeout_ms: int) -> InputEvent | None:
        """Wait at most ``timeout_ms`` for one event; ``None`` when nothing arrived."""


class CursesEventSource:
    """Read keys, mouse and resize events from a curses window."""

    def __init__(
        self,
        screen: Any,
        *,
        trace: bool = False,
        read_mouse: MouseReader | None = None,
    ) -> None:
        self._screen = screen
        self._trace = trace
        self._read_mouse: MouseReader = read_mouse or curses.getmouse

    def poll(self, timeout_ms: int) -> InputEvent | None:
        self._screen.timeout(max(0, int(timeout_ms)))
        try:
            key = self._screen.get_wch()
        except curses.error:
            # get_wch raises when the timeout expires with no input.
            return None
        event: InputEvent | None
        if key == curses.KEY_MOUSE:
            try:
                _device, column, row, _z, bstate = self._read_mouse()
            except curses.error:
                logger.debug("input_getmouse_failed", exc_info=True)
                return None
            event = translate_mouse(bstate, column, row)
        elif key == curses.KEY_RESIZE:
            height, width = self._screen.getmaxyx()
            event = ResizeEvent(width=width, height=height)
        else:
            event = translate_key(key)
        if self._trace and event is not None:
            logger.debug("input_event key=%r event=%r", key, event)
        return event
