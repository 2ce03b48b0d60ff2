import curses

from cellui.api.input_events import KeyEvent, PointerButton, PointerEventKind, ResizeEvent
from cellui.input.event_source import CursesEventSource

from tests.cellui.conftest import FakeScreen


def test_poll_returns_none_when_nothing_arrives() -> None:
    screen = FakeScreen()
    source = CursesEventSource(screen)
    assert source.poll(100) is None
    assert screen.timeouts == [100]


def test_poll_translates_keys_and_resize() -> None:
    screen = FakeScreen(width=30, height=8, keys=["x", curses.KEY_RESIZE])
    source = CursesEventSource(screen, trace=True)
    assert source.poll(10) == KeyEvent("char", "x")
    assert source.poll(10) == ResizeEvent(width=30, height=8)


def test_poll_reads_mouse_state() -> None:
    screen = FakeScreen(keys=[curses.KEY_MOUSE])
    source = CursesEventSource(screen, read_mouse=lambda: (0, 5, 1, 0, curses.BUTTON1_PRESSED))
    event = source.poll(10)
    assert event is not None
    assert event.kind is PointerEventKind.PRESSED
    assert event.button is PointerButton.LEFT
    assert (event.column, event.row) == (5, 1)


def test_poll_tolerates_getmouse_failure() -> None:
    def _fail() -> tuple[int, int, int, int, int]:
        raise curses.error("no mouse event")

    source = CursesEventSource(FakeScreen(keys=[curses.KEY_MOUSE]), read_mouse=_fail)
    assert source.poll(10) is None


def test_poll_reads_wide_characters_as_one_event() -> None:
    source = CursesEventSource(FakeScreen(keys=["é", "\n"]))
    assert source.poll(10) == KeyEvent("char", "é")
    assert source.poll(10) == KeyEvent("key_down", "enter")
    assert source.poll(10) is None
