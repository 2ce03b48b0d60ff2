"""Demo entry point."""

from __future__ import annotations

from button_demo.app import INITIAL_STATUS, draw_demo
from cellui.api.input_events import FocusEvent, InputEvent
from cellui.api.logging import LoggingConfig
from cellui.input.event_source import CursesEventSource
from cellui.input.frame_events import FrameEventSelector
from cellui.runtime.debug_config import load_runtime_config
from cellui.runtime.host import run_frame_loop
from cellui.runtime.logging import configure_logging, get_logger, shutdown_logging
from cellui.runtime.shared_state import SharedCell
from cellui.runtime.terminal import CursesTerminal
from cellui.ui_runtime.frame import Frame

logger = get_logger(__name__)


def main() -> int:
    """Run the demo until ``q`` is pressed."""
    config = load_runtime_config()
    # curses owns the screen, so records only go to the optional log file.
    configure_logging(
        LoggingConfig(
            level_name=config.log_level,
            console_enabled=False,
            file_path=config.log_file,
            file_format=config.log_format,
        )
    )
    logger.info(
        "demo_start policy=%s poll_interval_ms=%d",
        config.event_policy,
        config.poll_interval_ms,
    )
    status = SharedCell(INITIAL_STATUS)

    def _draw(frame: Frame, event: InputEvent | None) -> None:
        draw_demo(frame, event, status)

    try:
        with CursesTerminal(mouse_motion=config.mouse_motion_enabled) as terminal:
            events = CursesEventSource(terminal.screen, trace=config.input_trace_enabled)
            selector = FrameEventSelector(config.event_policy, initial=FocusEvent(focused=True))
            frames = run_frame_loop(
                terminal,
                events,
                selector,
                _draw,
                poll_interval_ms=config.poll_interval_ms,
            )
        logger.info("demo_stop frames=%d", frames)
    finally:
        shutdown_logging()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
