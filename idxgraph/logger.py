"""Lightweight structured logging for query counters and CLI runs."""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Protocol


class Logger(Protocol):
    """Protocol for minimal logger implementations."""

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG``-level event."""
        ...

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO``-level event."""
        ...

    def warning(self, event: str, **fields: Any) -> None:
        """Emit a ``WARNING``-level event."""
        ...


class NoopLogger:
    """Logger that discards all events."""

    def debug(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        """Ignore a ``DEBUG`` event."""
        return

    def info(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        """Ignore an ``INFO`` event."""
        return

    def warning(self, event: str, **fields: Any) -> None:  # pragma: no cover - noop
        """Ignore a ``WARNING`` event."""
        return


class StdLogger:
    """Line-oriented logger with optional JSON output.

    Plain lines look like ``debug dijkstra.done source=0 settled=5``; in
    JSON mode every event is one object with ``level`` and ``event`` keys
    followed by the event fields.

    Args:
        level: Minimum level to emit (``"debug"``, ``"info"`` or
            ``"warning"``).
        json_fmt: Emit one JSON object per line instead of ``k=v`` pairs.
        stream: Writable text stream, ``sys.stderr`` by default.
        bound: Fields attached to every event emitted by this logger.
    """

    _levels: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: Any | None = None,
        bound: Dict[str, Any] | None = None,
    ) -> None:
        if level not in self._levels:
            raise ValueError(f"unknown log level {level!r}")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr
        self.bound: Dict[str, Any] = dict(bound or {})

    def bind(self, **fields: Any) -> "StdLogger":
        """Return a logger sharing this stream with extra bound fields."""
        merged = dict(self.bound)
        merged.update(fields)
        return StdLogger(
            level=self.level, json_fmt=self.json_fmt, stream=self.stream, bound=merged
        )

    def enabled(self, level: str) -> bool:
        """Return whether events at ``level`` would be written."""
        return self._levels[level] >= self._levels[self.level]

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit a log ``event`` at ``level`` with additional ``fields``."""
        if not self.enabled(level):
            return
        payload = dict(self.bound)
        payload.update(fields)
        if self.json_fmt:
            obj = {"level": level, "event": event}
            obj.update(payload)
            self.stream.write(json.dumps(obj) + "\n")
        else:
            kv = " ".join(f"{k}={v}" for k, v in payload.items())
            msg = f"{level} {event} {kv}".rstrip()
            self.stream.write(msg + "\n")

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG`` event."""
        self.log("debug", event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO`` event."""
        self.log("info", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        """Emit a ``WARNING`` event."""
        self.log("warning", event, **fields)


__all__ = ["Logger", "NoopLogger", "StdLogger"]
