"""
Log records tagged with the catalog run and the pipeline phase.

A catalog run is one invocation of the generator. Every record emitted while
it is in progress carries ``run_id`` (also the stem of the run report file)
and ``phase``, one of ``PIPELINE_PHASES``. Records go to stderr so a report
printed to stdout stays clean.
"""

from __future__ import annotations

import contextvars
import logging
import sys
import uuid
from contextlib import contextmanager
from typing import Any, Callable, Iterator, TextIO, Tuple

PIPELINE_PHASES: Tuple[str, ...] = ("extract", "details", "build", "report")
NO_CONTEXT = "-"

LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | run_id=%(run_id)s | phase=%(phase)s | "
    "%(name)s | %(message)s"
)

# Connection-pool chatter from requests is only useful when debugging transport
QUIET_LOGGERS: Tuple[str, ...] = ("urllib3",)

_current_run: contextvars.ContextVar[str] = contextvars.ContextVar(
    "catalog_run_id", default=NO_CONTEXT
)
_current_phase: contextvars.ContextVar[str] = contextvars.ContextVar(
    "catalog_phase", default=NO_CONTEXT
)


class _RunContextFilter(logging.Filter):
    """Copy the active run id and phase onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _current_run.get()
        record.phase = _current_phase.get()
        return True


def configure_structured_logging(
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Install one stderr handler on the root logger with the run/phase format.

    Calling it again replaces the handler installed by the previous call, so
    the CLI can be invoked repeatedly in one process without duplicate lines.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if any(isinstance(f, _RunContextFilter) for f in handler.filters):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(_RunContextFilter())
    root.addHandler(handler)
    root.setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    return handler


def set_run_id(run_id: str | None = None) -> str:
    """Start a catalog run, generating a short hex id when none is given."""
    value = run_id or uuid.uuid4().hex[:12]
    _current_run.set(value)
    return value


def get_run_id() -> str:
    return _current_run.get()


def get_phase() -> str:
    return _current_phase.get()


@contextmanager
def phase_scope(phase: str) -> Iterator[None]:
    """Tag records emitted inside the block with ``phase``.

    Raises:
        ValueError: If ``phase`` is not one of ``PIPELINE_PHASES``.
    """
    if phase not in PIPELINE_PHASES:
        raise ValueError(f"Unknown pipeline phase '{phase}'")
    token = _current_phase.set(phase)
    try:
        yield
    finally:
        _current_phase.reset(token)


def bind_context(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Bind ``fn`` to a snapshot of the caller's run and phase.

    Pool threads do not inherit context variables, so tasks are bound before
    submission to keep their records attributed to the submitting phase.
    """
    snapshot = contextvars.copy_context()

    def _run(*args: Any, **kwargs: Any) -> Any:
        return snapshot.run(fn, *args, **kwargs)

    return _run
