import pytest

from cellui.api.commands import CallbackCommand
from cellui.api.input_events import PointerButton
from cellui.api.ui_style import (
    DEFAULT_HOVERED_BLOCK,
    DEFAULT_NORMAL_BLOCK,
    DEFAULT_PRESSED_BLOCK,
    Alignment,
    Block,
    BorderType,
    Wrap,
)
from cellui.ui_runtime.button import Button
from cellui.ui_runtime.geometry import Margin

from tests.cellui.conftest import RecordingCommand


def test_defaults() -> None:
    button = Button()
    assert button.text == ""
    assert button.normal_block == DEFAULT_NORMAL_BLOCK
    assert button.hovered_block == DEFAULT_HOVERED_BLOCK
    assert button.pressed_block == DEFAULT_PRESSED_BLOCK
    assert button.alignment is Alignment.LEFT
    assert button.wrap == Wrap(trim=False)
    assert button.margin == Margin(horizontal=1, vertical=1)
    assert button.scroll == (0, 0)
    assert button.command_for(PointerButton.LEFT) is None


def test_builder_returns_new_descriptors() -> None:
    base = Button()
    custom = (
        base.with_text("label")
        .with_alignment(Alignment.RIGHT)
        .with_normal_block(Block(border_type=BorderType.DOUBLE))
        .with_wrap(Wrap(trim=True))
        .with_margin(Margin(2, 0))
        .with_scroll(1, 2)
    )
    assert base == Button()
    assert custom.text == "label"
    assert custom.alignment is Alignment.RIGHT
    assert custom.normal_block.border_type is BorderType.DOUBLE
    assert custom.wrap == Wrap(trim=True)
    assert custom.margin == Margin(2, 0)
    assert custom.scroll == (1, 2)


def test_with_wrap_none_disables_wrapping() -> None:
    assert Button().with_wrap(None).wrap is None


def test_negative_scroll_is_rejected() -> None:
    with pytest.raises(ValueError):
        Button().with_scroll(-1)


def test_commands_are_bound_per_pointer_button() -> None:
    left, right, middle = RecordingCommand("l"), RecordingCommand("r"), RecordingCommand("m")
    button = Button().on_left(left).on_right(right).on_middle(middle)
    assert button.command_for(PointerButton.LEFT) is left
    assert button.command_for(PointerButton.RIGHT) is right
    assert button.command_for(PointerButton.MIDDLE) is middle
    assert button.command_for(None) is None


def test_on_click_none_clears_binding() -> None:
    button = Button().on_left(RecordingCommand()).on_click(PointerButton.LEFT, None)
    assert button.on_left_click is None


def test_callables_are_wrapped_in_callback_commands() -> None:
    button = Button().on_right(lambda: None)
    assert isinstance(button.on_right_click, CallbackCommand)
    direct = Button(on_middle_click=lambda: None)
    assert isinstance(direct.on_middle_click, CallbackCommand)


def test_non_callable_action_is_rejected() -> None:
    with pytest.raises(TypeError):
        Button().on_left("not callable")  # type: ignore[arg-type]
