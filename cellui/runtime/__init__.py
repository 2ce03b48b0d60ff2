"""Runtime modules: configuration, logging, terminal backend and host loop."""

from cellui.runtime.debug_config import RuntimeConfig, load_runtime_config, resolve_log_level_name
from cellui.runtime.errors import TerminalError, log_recoverable
from cellui.runtime.host import is_quit_event, run_frame_loop
from cellui.runtime.logging import configure_logging, get_logger, setup_logging, shutdown_logging
from cellui.runtime.shared_state import SharedCell
from cellui.runtime.terminal import CursesTerminal

__all__ = [
    "CursesTerminal",
    "RuntimeConfig",
    "SharedCell",
    "TerminalError",
    "configure_logging",
    "get_logger",
    "is_quit_event",
    "load_runtime_config",
    "log_recoverable",
    "resolve_log_level_name",
    "run_frame_loop",
    "setup_logging",
    "shutdown_logging",
]
