#!/usr/bin/env python3
"""
Workflow Hints - Event Logger

Logs hint processing events to:
- Session log (<log_dir>/sessions/<date>-<session>.log)
- Daily rolling log (<log_dir>/<date>.log)

Write failures are ignored so logging never interrupts message handling.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence


class HintLogger:
    """Logger for mention, resolution and hint events."""

    def __init__(self, log_dir: Path, session_id: str = "unknown"):
        """Initialize logger with log directory and session ID."""
        self.log_dir = Path(log_dir)
        self.session_log_dir = self.log_dir / "sessions"
        self.session_id = session_id

        try:
            self.session_log_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            pass

    def _get_timestamp(self) -> str:
        """Get timestamp for log entries."""
        return datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    def _get_log_date(self) -> str:
        """Get date for log file naming."""
        return datetime.now().strftime("%Y-%m-%d")

    def _sanitize_message(self, message: str) -> str:
        """Sanitize message by replacing newlines."""
        return message.replace("\n", "\\n")

    @property
    def session_log(self) -> Path:
        return self.session_log_dir / f"{self._get_log_date()}-{self.session_id}.log"

    def log_event(self, category: str, message: str) -> None:
        """Append an event to the session and daily logs."""
        log_line = f"[{self._get_timestamp()}] [{category}] {self._sanitize_message(message)}"

        try:
            with open(self.session_log, "a") as f:
                f.write(log_line + "\n")
        except OSError:
            pass

        daily_log = self.log_dir / f"{self._get_log_date()}.log"
        try:
            with open(daily_log, "a") as f:
                f.write(f"[{self.session_id}] {log_line}\n")
        except OSError:
            pass

    # --- Hint Events ---

    def log_strip(self, before_len: int, after_len: int) -> None:
        """Log removal of stale hint text."""
        if before_len != after_len:
            self.log_event("STRIP", f"Removed {before_len - after_len} chars of hint/highlight text")

    def log_mention(self, name: str, force: bool = False) -> None:
        suffix = " (forced)" if force else ""
        self.log_event("MENTION", f"//{name}{suffix}")

    def log_resolve(self, mention: str, resolved: Optional[str], suggestions: Sequence[str] = ()) -> None:
        """Log resolution of a mention, with suggestions when unresolved."""
        if resolved:
            self.log_event("RESOLVE", f"{mention} -> {resolved}")
        elif suggestions:
            self.log_event("RESOLVE", f"{mention} unresolved, suggestions: {', '.join(suggestions)}")
        else:
            self.log_event("RESOLVE", f"{mention} unresolved")

    def log_hint(self, names: Sequence[str], theme: str) -> None:
        self.log_event("HINT", f"Appended {theme} hint for: {', '.join(names)}")

    def log_skip(self, name: str) -> None:
        self.log_event("HINT", f"Skipped {name} (already hinted)")

    def log_error(self, message: str) -> None:
        """Log error event."""
        self.log_event("ERROR", message)

    # --- Utility ---

    def get_log_content(self) -> str:
        """Get today's session log content."""
        try:
            with open(self.session_log, 'r') as f:
                return f.read()
        except OSError:
            return ""
