"""
Hierarchical runtime tracing for stroke recognition.

Spans nest with timing, events attach to the innermost open span. Output goes
to stderr and optionally to a file, as text lines or additionally as JSON.
Tracing is off by default, so recognize() stays silent unless asked.
"""

import functools
import json
import sys
import time
from contextlib import contextmanager
from datetime import datetime

import numpy as np
from pydantic import BaseModel


class TracerConfig:
    """Configuration for the tracer."""

    def __init__(self):
        self.enabled = False
        self.level = "INFO"
        self.file_path = None
        self.json_output = False
        self._file_handle = None

    def configure(self, enabled=False, level="INFO", file_path=None, json_output=False):
        """Configure tracer settings."""
        self.enabled = enabled
        self.level = level.upper()
        self.file_path = file_path
        self.json_output = json_output

        self.close()

        if file_path and enabled:
            self._file_handle = open(file_path, "w", encoding="utf-8")

    def close(self):
        """Close file handle if open."""
        if self._file_handle:
            self._file_handle.close()
            self._file_handle = None


class Tracer:
    """
    Nested span tracer.

    Each line carries a timestamp, level, indentation for the current depth
    and the module:function of the span it belongs to.
    """

    LEVELS = {"ERROR": 0, "WARN": 1, "INFO": 2, "DEBUG": 3}

    def __init__(self):
        self.config = TracerConfig()
        self._depth = 0
        self._span_stack = []

    def _should_log(self, level):
        if not self.config.enabled:
            return False
        return self.LEVELS.get(level, 2) <= self.LEVELS.get(self.config.level, 2)

    def _write(self, level, module, func, message, meta=None):
        if not self._should_log(level):
            return

        now = datetime.now()
        timestamp = now.strftime("%H:%M:%S.") + f"{now.microsecond // 1000:03d}"
        location = f"{module}:{func}" if func else module
        lines = [f"{timestamp} {level:<5} {'  ' * self._depth}{location}  {message}"]

        if self.config.json_output:
            lines.append(json.dumps({
                "timestamp": timestamp,
                "level": level,
                "depth": self._depth,
                "module": module,
                "function": func,
                "message": message,
                "meta": {k: summarize(v) for k, v in (meta or {}).items()},
            }))

        handle = self.config._file_handle
        for line in lines:
            print(line, file=sys.stderr)
            if handle:
                handle.write(line + "\n")
        if handle:
            handle.flush()

    @contextmanager
    def span(self, name, module="", **meta):
        """
        Context manager for a traced span.

        Logs start and end with elapsed time; failures are logged at ERROR
        and re-raised.
        """
        if not self.config.enabled:
            yield
            return

        start_time = time.perf_counter()
        meta_str = " ".join(f"{k}={summarize(v)}" for k, v in meta.items())
        self._write("INFO", module, name, f"start {meta_str}".strip(), meta)
        self._depth += 1
        self._span_stack.append((name, module))

        try:
            yield
        except Exception as e:
            self._close_span()
            elapsed = (time.perf_counter() - start_time) * 1000
            self._write("ERROR", module, name, f"failed dt={elapsed:.1f}ms error={type(e).__name__}: {str(e)[:100]}")
            raise
        else:
            self._close_span()
            elapsed = (time.perf_counter() - start_time) * 1000
            self._write("INFO", module, name, f"end ok dt={elapsed:.1f}ms")

    def _close_span(self):
        self._depth -= 1
        self._span_stack.pop()

    def event(self, message, level="INFO", **meta):
        """Log a one-off event within the current span."""
        if not self._should_log(level):
            return

        func, module = self._span_stack[-1] if self._span_stack else ("", "")
        meta_str = " ".join(f"{k}={summarize(v)}" for k, v in meta.items())
        self._write(level, module, func, f"{message} {meta_str}".strip(), meta)


def summarize(obj, max_len=200):
    """
    Summarize an object for logging.

    Returns a compact string representation that never exceeds max_len chars.
    Point sequences report their length and bounds, shapes their kind.
    """
    try:
        result = _summarize_impl(obj)
    except Exception:
        result = f"<{type(obj).__name__}>"
    if len(result) > max_len:
        return result[:max_len - 3] + "..."
    return result


def _is_point_list(obj):
    return (
        isinstance(obj, (list, tuple))
        and len(obj) > 0
        and all(isinstance(p, (list, tuple)) and len(p) == 2 for p in obj[:3])
    )


def _summarize_impl(obj):
    if obj is None:
        return "None"

    type_name = type(obj).__name__

    if isinstance(obj, np.ndarray):
        shape_str = "x".join(str(s) for s in obj.shape)
        return f"ndarray({obj.dtype},{shape_str})"

    if isinstance(obj, BaseModel):
        kind = getattr(obj, "kind", None)
        if kind is not None:
            return f"{type_name}(kind={getattr(kind, 'value', kind)})"
        fields = list(type(obj).model_fields.keys())[:3]
        return f"{type_name}(fields={fields}...)"

    if isinstance(obj, str):
        if len(obj) > 50:
            return f"str(len={len(obj)})"
        return repr(obj)

    if isinstance(obj, bool):
        return str(obj)

    if isinstance(obj, (int, float, np.integer, np.floating)):
        if isinstance(obj, (float, np.floating)):
            return f"{float(obj):.4g}"
        return str(obj)

    if _is_point_list(obj):
        xs = [p[0] for p in obj]
        ys = [p[1] for p in obj]
        return (
            f"points(n={len(obj)},"
            f"x=[{min(xs):.1f},{max(xs):.1f}],y=[{min(ys):.1f},{max(ys):.1f}])"
        )

    if isinstance(obj, (list, tuple)):
        if len(obj) == 0:
            return f"{type_name}(len=0)"
        return f"{type_name}(len={len(obj)},first={type(obj[0]).__name__})"

    if isinstance(obj, dict):
        keys = ",".join(str(k) for k in list(obj.keys())[:5])
        return f"dict(len={len(obj)},keys=[{keys}])"

    return f"<{type_name}>"


def trace(label=None):
    """
    Decorator to trace function execution.

    Wraps a function in a span that logs start/end with timing.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if not _tracer.config.enabled:
                return func(*args, **kwargs)

            func_module = func.__module__.split(".")[-1] if func.__module__ else ""
            with _tracer.span(label or func.__name__, module=func_module):
                return func(*args, **kwargs)

        return wrapper
    return decorator


# Global tracer instance
_tracer = Tracer()


def get_tracer():
    """Get the global tracer instance."""
    return _tracer


def configure_tracer(enabled=False, level="INFO", file_path=None, json_output=False):
    """Configure the global tracer."""
    _tracer.config.configure(
        enabled=enabled,
        level=level,
        file_path=file_path,
        json_output=json_output,
    )
