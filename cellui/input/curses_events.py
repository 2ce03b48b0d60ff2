"""Translate curses key codes and mouse states into input events."""

from __future__ import annotations

import curses

from cellui.api.input_events import KeyEvent, PointerButton, PointerEvent, PointerEventKind

# Buttons 2 and 3 are middle and right in curses numbering. CLICKED counts as
# a press so clicks shorter than the poll interval still reach widgets.
_PRESS_MASKS: tuple[tuple[int, PointerButton], ...] = (
    (curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED | curses.BUTTON1_DOUBLE_CLICKED, PointerButton.LEFT),
    (curses.BUTTON2_PRESSED | curses.BUTTON2_CLICKED | curses.BUTTON2_DOUBLE_CLICKED, PointerButton.MIDDLE),
    (curses.BUTTON3_PRESSED | curses.BUTTON3_CLICKED | curses.BUTTON3_DOUBLE_CLICKED, PointerButton.RIGHT),
)
_RELEASE_MASKS: tuple[tuple[int, PointerButton], ...] = (
    (curses.BUTTON1_RELEASED, PointerButton.LEFT),
    (curses.BUTTON2_RELEASED, PointerButton.MIDDLE),
    (curses.BUTTON3_RELEASED, PointerButton.RIGHT),
)
# ncurses 5 has no button 5 mask.
_SCROLL_DOWN_MASK: int = getattr(curses, "BUTTON5_PRESSED", 0)

_KEY_NAMES: dict[int, str] = {
    9: "tab",
    10: "enter",
    13: "enter",
    27: "escape",
    127: "backspace",
    curses.KEY_BACKSPACE: "backspace",
    curses.KEY_ENTER: "enter",
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_HOME: "home",
    curses.KEY_END: "end",
    curses.KEY_PPAGE: "page_up",
    curses.KEY_NPAGE: "page_down",
    curses.KEY_DC: "delete",
    curses.KEY_IC: "insert",
}


def translate_mouse(bstate: int, column: int, row: int) -> PointerEvent | None:
    """Map one curses mouse state to a pointer event, or ``None`` when unknown."""
    for mask, button in _PRESS_MASKS:
        if bstate & mask:
            return PointerEvent(kind=PointerEventKind.PRESSED, column=column, row=row, button=button)
    for mask, button in _RELEASE_MASKS:
        if bstate & mask:
            return PointerEvent(kind=PointerEventKind.RELEASED, column=column, row=row, button=button)
    if bstate & curses.BUTTON4_PRESSED:
        return PointerEvent(kind=PointerEventKind.SCROLL_UP, column=column, row=row)
    if _SCROLL_DOWN_MASK and bstate & _SCROLL_DOWN_MASK:
        return PointerEvent(kind=PointerEventKind.SCROLL_DOWN, column=column, row=row)
    if bstate & curses.REPORT_MOUSE_POSITION or bstate == 0:
        return PointerEvent(kind=PointerEventKind.MOVED, column=column, row=row)
    return None


def translate_key(key: int | str) -> KeyEvent | None:
    """Map one ``get_wch`` result (a character or a key code) to a key event."""
    if isinstance(key, str):
        if len(key) != 1:
            return None
        code = ord(key)
        if code < curses.KEY_MIN:
            return _translate_code(code)
        # Code points above KEY_MIN are characters, never curses key codes.
        return KeyEvent(event_type="char", value=key) if key.isprintable() else None
    return _translate_code(key)


def _translate_code(code: int) -> KeyEvent | None:
    if code < 0:
        return None
    name = _KEY_NAMES.get(code)
    if name is not None:
        return KeyEvent(event_type="key_down", value=name)
    if curses.KEY_F0 < code <= curses.KEY_F0 + 63:
        return KeyEvent(event_type="key_down", value=f"f{code - curses.KEY_F0}")
    if code < curses.KEY_MIN:
        char = chr(code)
        if char.isprintable():
            return KeyEvent(event_type="char", value=char)
    return KeyEvent(event_type="key_down", value=f"key_{code}")
