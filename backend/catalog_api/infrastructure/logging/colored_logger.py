"""Colored history logger — ANSI-colored console tracing for undo/redo.

Makes it easy to follow snapshot saves, undo/redo steps and cascading
deletes in the terminal.

Color scheme:
    🟢 Green   — Snapshot saved
    🟡 Yellow  — Undo
    🔵 Blue    — Redo
    🟣 Magenta — Cascade delete
    🟠 Cyan    — Restore
    🔴 Red     — Errors
"""

import logging
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"


# ── History Stage Definitions ────────────────────────────────────────

class HistoryStage:
    """Predefined history stages with colors and icons."""

    SNAPSHOT = ("SNAPSHOT", _Colors.GREEN, "📸")
    UNDO = ("UNDO", _Colors.YELLOW, "↩️")
    REDO = ("REDO", _Colors.BLUE, "↪️")
    CASCADE = ("CASCADE", _Colors.MAGENTA, "🗑️")
    RESTORE = ("RESTORE", _Colors.CYAN, "♻️")
    ERROR = ("ERROR", _Colors.RED, "❌")


# ── HistoryLogger ────────────────────────────────────────────────────

class HistoryLogger:
    """Color-coded logger for snapshot and cascade tracing.

    Usage:
        log = HistoryLogger("SnapshotManager")
        log.step(HistoryStage.UNDO, "Undo: Delete actor: Alice", remaining=3)
        log.detail("actors=4 bins=9 media=31")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log one history step with its stage color."""
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.GRAY}({details}){_Colors.RESET}"
        self._logger.info(formatted)

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Log a failed step in red, with the traceback when an error is given."""
        label, _, _ = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
            self._logger.error(formatted, exc_info=error)
        else:
            self._logger.error(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        """Log additional detail (gray/dimmed)."""
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        if kwargs:
            details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            formatted += f" {_Colors.DIM}({details}){_Colors.RESET}"
        self._logger.info(formatted)
