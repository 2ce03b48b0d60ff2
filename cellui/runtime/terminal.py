"""Curses terminal backend: mode switching, colors and buffer presentation."""

from __future__ import annotations

import curses
import locale
import logging
import sys
from collections.abc import Callable
from types import ModuleType, TracebackType
from typing import Any, TextIO

from cellui.api.ui_style import Color
from cellui.runtime.errors import TerminalError, log_recoverable
from cellui.ui_runtime.buffer import Buffer, Cell
from cellui.ui_runtime.frame import Frame
from cellui.ui_runtime.geometry import Rect

logger = logging.getLogger(__name__)

# Any-motion mouse tracking; curses alone only reports motion while a button is held.
MOTION_TRACKING_ON = "\033[?1003h"
MOTION_TRACKING_OFF = "\033[?1003l"

COLOR_NUMBERS: dict[Color, int] = {
    Color.BLACK: curses.COLOR_BLACK,
    Color.RED: curses.COLOR_RED,
    Color.GREEN: curses.COLOR_GREEN,
    Color.YELLOW: curses.COLOR_YELLOW,
    Color.BLUE: curses.COLOR_BLUE,
    Color.MAGENTA: curses.COLOR_MAGENTA,
    Color.CYAN: curses.COLOR_CYAN,
    Color.WHITE: curses.COLOR_WHITE,
}


class CursesTerminal:
    """Own the terminal for the lifetime of a frame loop."""

    def __init__(
        self,
        *,
        mouse_motion: bool = True,
        curses_api: ModuleType | Any = curses,
        stream: TextIO | None = None,
    ) -> None:
        self._curses = curses_api
        self._mouse_motion = mouse_motion
        self._stream = stream if stream is not None else sys.stdout
        self._screen: Any = None
        self._color_pairs: dict[Color, int] = {}
        self._previous: Buffer | None = None

    @property
    def screen(self) -> Any:
        if self._screen is None:
            raise TerminalError("terminal is not active")
        return self._screen

    @property
    def active(self) -> bool:
        return self._screen is not None

    def enter(self) -> None:
        if self._screen is not None:
            return
        try:
            locale.setlocale(locale.LC_ALL, "")
        except locale.Error:
            log_recoverable(logger, "terminal_locale_unsupported")
        api = self._curses
        try:
            screen = api.initscr()
        except api.error as exc:
            raise TerminalError("unable to switch to alternate screen") from exc
        self._screen = screen
        try:
            api.noecho()
            api.raw()
            screen.keypad(True)
        except api.error as exc:
            self._abort_enter()
            raise TerminalError("failed to enable raw mode") from exc
        try:
            api.curs_set(0)
        except api.error:
            log_recoverable(logger, "terminal_hide_cursor_unsupported")
        self._init_colors()
        self._enable_mouse_capture()
        height, width = screen.getmaxyx()
        logger.info("terminal_enter width=%d height=%d mouse_motion=%s", width, height, self._mouse_motion)

    def exit(self) -> None:
        if self._screen is None:
            return
        api = self._curses
        screen = self._screen
        self._screen = None
        self._previous = None
        self._color_pairs = {}
        self._disable_mouse_capture()

        def _restore_input_modes() -> None:
            screen.keypad(False)
            api.noraw()
            api.echo()

        failure: TerminalError | None = None
        steps: tuple[tuple[str, Callable[[], object]], ...] = (
            ("failed to disable raw mode", _restore_input_modes),
            ("unable to switch to main screen", api.endwin),
        )
        for message, step in steps:
            try:
                step()
            except api.error as exc:
                log_recoverable(logger, f"terminal_restore_step_failed step={message!r}", level=logging.WARNING)
                if failure is None:
                    failure = TerminalError(message)
                    failure.__cause__ = exc
        try:
            api.curs_set(1)
        except api.error:
            log_recoverable(logger, "terminal_show_cursor_unsupported")
        if failure is not None:
            raise failure
        logger.info("terminal_exit")

    def _abort_enter(self) -> None:
        try:
            self._curses.endwin()
        except self._curses.error:
            log_recoverable(logger, "terminal_abort_enter_failed")
        self._screen = None

    def __enter__(self) -> CursesTerminal:
        self.enter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            self.exit()
        except TerminalError:
            if exc is None:
                raise
            log_recoverable(logger, "terminal_restore_failed", level=logging.WARNING)

    def size(self) -> Rect:
        height, width = self.screen.getmaxyx()
        return Rect(0, 0, width, height)

    def draw(self, render: Callable[[Frame], None]) -> Buffer:
        """Render one frame and flush the changed cells."""
        area = self.size()
        buffer = Buffer(area)
        render(Frame(buffer))
        self._flush(buffer)
        return buffer

    def attribute_for(self, fg: Color) -> int:
        """Return the curses attribute for a foreground color."""
        pair = self._color_pairs.get(fg)
        if pair is None:
            return 0
        return self._curses.color_pair(pair)

    def _flush(self, buffer: Buffer) -> None:
        screen = self.screen
        previous = self._previous
        if previous is not None and previous.area != buffer.area:
            screen.erase()
            previous = None
        last_column = buffer.area.right - 1
        last_row = buffer.area.bottom - 1
        for column, row, cell in buffer.diff(previous):
            self._put(screen, column, row, cell, at_corner=(column == last_column and row == last_row))
        screen.noutrefresh()
        self._curses.doupdate()
        self._previous = buffer

    def _put(self, screen: Any, column: int, row: int, cell: Cell, *, at_corner: bool) -> None:
        attr = self.attribute_for(cell.fg)
        try:
            # addstr on the bottom-right cell fails after moving the cursor past the screen.
            if at_corner:
                screen.insstr(row, column, cell.symbol, attr)
            else:
                screen.addstr(row, column, cell.symbol, attr)
        except self._curses.error as exc:
            raise TerminalError(f"failed to draw cell ({column}, {row})") from exc

    def _init_colors(self) -> None:
        api = self._curses
        if not api.has_colors():
            return
        try:
            api.start_color()
            api.use_default_colors()
            background = -1
        except api.error:
            log_recoverable(logger, "terminal_default_colors_unsupported")
            background = api.COLOR_BLACK
        for pair, (color, number) in enumerate(COLOR_NUMBERS.items(), start=1):
            api.init_pair(pair, number, background)
            self._color_pairs[color] = pair

    def _enable_mouse_capture(self) -> None:
        api = self._curses
        api.mousemask(api.ALL_MOUSE_EVENTS | api.REPORT_MOUSE_POSITION)
        api.mouseinterval(0)
        if self._mouse_motion:
            self._stream.write(MOTION_TRACKING_ON)
            self._stream.flush()

    def _disable_mouse_capture(self) -> None:
        api = self._curses
        try:
            if self._mouse_motion:
                self._stream.write(MOTION_TRACKING_OFF)
                self._stream.flush()
            api.mousemask(0)
        except (api.error, OSError):
            log_recoverable(logger, "terminal_disable_mouse_capture_failed")
