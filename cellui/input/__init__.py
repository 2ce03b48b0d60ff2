"""Input capture and per-frame event selection."""

from cellui.input.curses_events import translate_key, translate_mouse
from cellui.input.event_source import CursesEventSource, EventSource
from cellui.input.frame_events import EventPolicy, FrameEventSelector

__all__ = [
    "CursesEventSource",
    "EventPolicy",
    "EventSource",
    "FrameEventSelector",
    "translate_key",
    "translate_mouse",
]
