from __future__ import annotations

import json
import logging
import os
import sys
import time
from pathlib import Path
from types import TracebackType
from typing import Any, Callable, Dict, Optional, Type

from .logging_setup import get_logger


def get_crash_dir(base_dir: Optional[Path] = None) -> Path:
    root = Path(base_dir) if base_dir is not None else Path("data/roaming")
    crash_dir = root / "crashes"
    crash_dir.mkdir(parents=True, exist_ok=True)
    return crash_dir


def write_crash_marker(
    exc: BaseException,
    context: Dict[str, Any] | None = None,
    base_dir: Optional[Path] = None,
) -> Path:
    crash_dir = get_crash_dir(base_dir)
    payload = {
        "ts": time.time(),
        "exception_type": type(exc).__name__,
        "message": str(exc),
        "context": context or {},
    }
    path = crash_dir / f"crash_marker_{int(time.time() * 1000)}.json"
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return path


def install_fatal_hook(
    base_dir: Optional[Path] = None,
    *,
    logger: Optional[logging.Logger] = None,
    exit_fn: Callable[[int], Any] = os._exit,
) -> Callable[..., None]:
    """Make any uncaught exception fatal: log, leave a crash marker, exit(1).

    Qt calls ``sys.excepthook`` for exceptions escaping paint/event overrides,
    so backend failures during a frame end the process too.
    """
    log = logger or get_logger()

    def _hook(
        exc_type: Type[BaseException],
        exc: BaseException,
        tb: Optional[TracebackType],
    ) -> None:
        log.critical("fatal %s: %s", exc_type.__name__, exc, exc_info=(exc_type, exc, tb))
        try:
            write_crash_marker(exc, {"pid": os.getpid()}, base_dir=base_dir)
        except OSError as marker_exc:
            log.error("crash marker not written: %s", marker_exc)
        sys.__excepthook__(exc_type, exc, tb)
        exit_fn(1)

    sys.excepthook = _hook
    return _hook
