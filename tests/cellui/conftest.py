from __future__ import annotations

import curses
from collections import deque
from collections.abc import Callable, Iterable

from cellui.api.input_events import InputEvent
from cellui.ui_runtime.buffer import Buffer
from cellui.ui_runtime.frame import Frame
from cellui.ui_runtime.geometry import Rect


class RecordingCommand:
    def __init__(self, name: str = "cmd", log: list[str] | None = None) -> None:
        self.name = name
        self.calls = 0
        self.log = log if log is not None else []

    def invoke(self) -> None:
        self.calls += 1
        self.log.append(self.name)


class FailingCommand:
    def invoke(self) -> None:
        raise RuntimeError("command failed")


class CursesError(Exception):
    pass


class FakeScreen:
    def __init__(self, width: int = 20, height: int = 6, keys: Iterable[int | str] = ()) -> None:
        self.width = width
        self.height = height
        self.keys: deque[int | str] = deque(keys)
        self.timeouts: list[int] = []
        self.writes: list[tuple[str, int, int, str, int]] = []
        self.keypad_enabled: bool | None = None
        self.erased = 0
        self.refreshed = 0

    def getmaxyx(self) -> tuple[int, int]:
        return self.height, self.width

    def timeout(self, value: int) -> None:
        self.timeouts.append(value)

    def get_wch(self) -> int | str:
        if not self.keys:
            raise curses.error("no input")
        return self.keys.popleft()

    def keypad(self, enabled: bool) -> None:
        self.keypad_enabled = enabled

    def addstr(self, row: int, column: int, text: str, attr: int = 0) -> None:
        self.writes.append(("addstr", row, column, text, attr))

    def insstr(self, row: int, column: int, text: str, attr: int = 0) -> None:
        self.writes.append(("insstr", row, column, text, attr))

    def erase(self) -> None:
        self.erased += 1

    def noutrefresh(self) -> None:
        self.refreshed += 1


class FakeCurses:
    """Records curses module calls without touching the real terminal."""

    error = CursesError
    COLOR_BLACK = 0
    COLOR_RED = 1
    COLOR_GREEN = 2
    COLOR_YELLOW = 3
    COLOR_BLUE = 4
    COLOR_MAGENTA = 5
    COLOR_CYAN = 6
    COLOR_WHITE = 7
    ALL_MOUSE_EVENTS = 0x0FFF
    REPORT_MOUSE_POSITION = 0x1000

    def __init__(self, screen: FakeScreen | None = None, *, colors: bool = True) -> None:
        self.screen = screen or FakeScreen()
        self.colors = colors
        self.calls: list[str] = []
        self.fail_on: set[str] = set()
        self.pairs: dict[int, tuple[int, int]] = {}
        self.mask: int | None = None

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if name in self.fail_on:
            raise CursesError(name)

    def initscr(self) -> FakeScreen:
        self._record("initscr")
        return self.screen

    def noecho(self) -> None:
        self._record("noecho")

    def echo(self) -> None:
        self._record("echo")

    def raw(self) -> None:
        self._record("raw")

    def noraw(self) -> None:
        self._record("noraw")

    def curs_set(self, visibility: int) -> None:
        self._record(f"curs_set({visibility})")

    def has_colors(self) -> bool:
        return self.colors

    def start_color(self) -> None:
        self._record("start_color")

    def use_default_colors(self) -> None:
        self._record("use_default_colors")

    def init_pair(self, pair: int, fg: int, bg: int) -> None:
        self.pairs[pair] = (fg, bg)

    def color_pair(self, pair: int) -> int:
        return pair << 8

    def mousemask(self, mask: int) -> tuple[int, int]:
        self._record(f"mousemask({mask:#x})")
        self.mask = mask
        return mask, 0

    def mouseinterval(self, interval: int) -> None:
        self._record(f"mouseinterval({interval})")

    def endwin(self) -> None:
        self._record("endwin")

    def doupdate(self) -> None:
        self._record("doupdate")


class ScriptedEventSource:
    def __init__(self, events: Iterable[InputEvent | None]) -> None:
        self._events: deque[InputEvent | None] = deque(events)
        self.timeouts: list[int] = []

    def poll(self, timeout_ms: int) -> InputEvent | None:
        self.timeouts.append(timeout_ms)
        return self._events.popleft() if self._events else None


class FakeTerminal:
    def __init__(self, width: int = 40, height: int = 12) -> None:
        self.area = Rect(0, 0, width, height)
        self.frames: list[Buffer] = []

    def enter(self) -> None:
        pass

    def exit(self) -> None:
        pass

    def size(self) -> Rect:
        return self.area

    def draw(self, render: Callable[[Frame], None]) -> Buffer:
        buffer = Buffer(self.area)
        render(Frame(buffer))
        self.frames.append(buffer)
        return buffer
