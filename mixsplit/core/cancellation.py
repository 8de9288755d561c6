"""Cooperative cancellation for sequential external calls."""

import signal
import threading
from contextlib import contextmanager

from .exceptions import PipelineCancelledError

CANCEL_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGINT", "SIGTERM") if hasattr(signal, name)
)


class CancellationToken:
    """Flag checked before every external process is started."""

    def __init__(self):
        self._event = threading.Event()
        self.reason = None

    def cancel(self, reason: str = "Cancelled by request") -> None:
        self.reason = reason
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise PipelineCancelledError(self.reason or "Cancelled")


@contextmanager
def cancel_on_signals(token: CancellationToken):
    """Route SIGINT/SIGTERM to ``token`` while the block runs.

    The running process is left to finish; the next one is never started.
    Outside the main thread handlers cannot be installed and the block runs
    unchanged.
    """

    def _signal_handler(signum, frame):
        token.cancel(f"Interrupted by {signal.Signals(signum).name}")

    previous = {}
    for sig in CANCEL_SIGNALS:
        try:
            previous[sig] = signal.signal(sig, _signal_handler)
        except ValueError:
            pass

    try:
        yield token
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)
