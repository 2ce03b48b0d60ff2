from cellui.api.input_events import InputEvent, KeyEvent, pointer_moved, pointer_pressed
from cellui.input.frame_events import EventPolicy, FrameEventSelector
from cellui.runtime.host import is_quit_event, run_frame_loop
from cellui.ui_runtime.button import Button
from cellui.ui_runtime.frame import Frame
from cellui.ui_runtime.geometry import Rect
from cellui.ui_runtime.interactions import VisualState

from tests.cellui.conftest import FakeTerminal, RecordingCommand, ScriptedEventSource


def test_loop_stops_on_quit_key() -> None:
    terminal = FakeTerminal()
    events = ScriptedEventSource([None, pointer_moved(1, 1), KeyEvent("char", "q")])
    seen: list[InputEvent | None] = []
    frames = run_frame_loop(
        terminal,
        events,
        FrameEventSelector(EventPolicy.CLEAR_ON_MISS),
        lambda frame, event: seen.append(event),
        poll_interval_ms=5,
    )
    assert frames == 2
    assert seen == [None, pointer_moved(1, 1)]
    assert events.timeouts == [5, 5, 5]


def test_every_widget_in_a_frame_sees_the_same_event() -> None:
    terminal = FakeTerminal()
    states: list[tuple[VisualState, VisualState]] = []

    def _draw(frame: Frame, event: InputEvent | None) -> None:
        left = frame.render_button(Button(), Rect(0, 0, 10, 3), event)
        right = frame.render_button(Button(), Rect(20, 0, 10, 3), event)
        states.append((left, right))

    run_frame_loop(
        terminal,
        ScriptedEventSource([pointer_moved(2, 1), pointer_moved(22, 1)]),
        FrameEventSelector(EventPolicy.REUSE_LAST),
        _draw,
        max_frames=2,
    )
    assert states == [
        (VisualState.HOVERED, VisualState.NORMAL),
        (VisualState.NORMAL, VisualState.HOVERED),
    ]


def test_reused_press_dispatches_every_frame() -> None:
    command = RecordingCommand()

    def _draw(frame: Frame, event: InputEvent | None) -> None:
        frame.render_button(Button(on_left_click=command), Rect(0, 0, 10, 3), event)

    run_frame_loop(
        FakeTerminal(),
        ScriptedEventSource([pointer_pressed(1, 1)]),
        FrameEventSelector(EventPolicy.REUSE_LAST),
        _draw,
        max_frames=3,
    )
    assert command.calls == 3


def test_cleared_press_dispatches_once() -> None:
    command = RecordingCommand()

    def _draw(frame: Frame, event: InputEvent | None) -> None:
        frame.render_button(Button(on_left_click=command), Rect(0, 0, 10, 3), event)

    run_frame_loop(
        FakeTerminal(),
        ScriptedEventSource([pointer_pressed(1, 1)]),
        FrameEventSelector(EventPolicy.CLEAR_ON_MISS),
        _draw,
        max_frames=3,
    )
    assert command.calls == 1


def test_is_quit_event() -> None:
    assert is_quit_event(KeyEvent("char", "q"), "q")
    assert not is_quit_event(KeyEvent("key_down", "q"), "q")
    assert not is_quit_event(KeyEvent("char", "q"), None)
    assert not is_quit_event(pointer_moved(0, 0), "q")
