"""Frame-driven host loop."""

from __future__ import annotations

from typing import TypeAlias

import logging
from collections.abc import Callable

from cellui.api.input_events import InputEvent, KeyEvent
from cellui.api.terminal import TerminalPort
from cellui.input.event_source import EventSource
from cellui.input.frame_events import FrameEventSelector
from cellui.ui_runtime.frame import Frame

logger = logging.getLogger(__name__)

DrawCallback: TypeAlias = Callable[[Frame, InputEvent | None], None]


def is_quit_event(event: InputEvent | None, quit_key: str | None) -> bool:
    if quit_key is None or not isinstance(event, KeyEvent):
        return False
    return event.event_type == "char" and event.value == quit_key


def run_frame_loop(
    terminal: TerminalPort,
    events: EventSource,
    selector: FrameEventSelector,
    draw: DrawCallback,
    *,
    poll_interval_ms: int = 100,
    quit_key: str | None = "q",
    max_frames: int | None = None,
) -> int:
    """Poll, pick the frame event, draw; return the number of frames drawn.

    Every widget drawn in one frame sees the same event. The loop stops on the
    quit key or after ``max_frames``.
    """
    frames = 0
    logger.debug("frame_loop_start policy=%s poll_interval_ms=%d", selector.policy, poll_interval_ms)
    while max_frames is None or frames < max_frames:
        event = selector.select(events.poll(poll_interval_ms))
        if is_quit_event(event, quit_key):
            break

        def _render(frame: Frame, frame_event: InputEvent | None = event) -> None:
            draw(frame, frame_event)

        terminal.draw(_render)
        frames += 1
    logger.info("frame_loop_stop frames=%d", frames)
    return frames
