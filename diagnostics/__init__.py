from .crash_capture import install_fatal_hook, write_crash_marker
from .logging_setup import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "install_fatal_hook",
    "write_crash_marker",
]
