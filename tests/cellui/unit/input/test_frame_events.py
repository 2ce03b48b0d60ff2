from cellui.api.input_events import FocusEvent, pointer_moved
from cellui.input.frame_events import EventPolicy, FrameEventSelector


def test_reuse_last_keeps_previous_event_on_miss() -> None:
    initial = FocusEvent(focused=True)
    selector = FrameEventSelector(EventPolicy.REUSE_LAST, initial=initial)
    assert selector.select(None) is initial
    moved = pointer_moved(1, 1)
    assert selector.select(moved) is moved
    assert selector.select(None) is moved
    assert selector.last is moved


def test_clear_on_miss_presents_no_event() -> None:
    selector = FrameEventSelector(EventPolicy.CLEAR_ON_MISS, initial=FocusEvent(focused=True))
    moved = pointer_moved(1, 1)
    assert selector.select(moved) is moved
    assert selector.select(None) is None
    assert selector.last is None
    assert selector.policy is EventPolicy.CLEAR_ON_MISS
