import signal
import threading

import pytest

from mixsplit.core.cancellation import CancellationToken, cancel_on_signals
from mixsplit.core.exceptions import ExitCode, PipelineCancelledError


def test_token_raises_once_cancelled():
    token = CancellationToken()
    token.raise_if_cancelled()

    token.cancel("enough")
    assert token.cancelled
    with pytest.raises(PipelineCancelledError, match="enough") as exc:
        token.raise_if_cancelled()
    assert exc.value.exit_code == ExitCode.CANCELLED


@pytest.mark.parametrize("signum", [signal.SIGINT, signal.SIGTERM])
def test_signals_cancel_the_token_and_handlers_are_restored(signum):
    original = signal.getsignal(signum)
    token = CancellationToken()

    with cancel_on_signals(token):
        handler = signal.getsignal(signum)
        assert handler is not original
        handler(signum, None)

    assert token.cancelled
    assert signal.Signals(signum).name in token.reason
    assert signal.getsignal(signum) is original


def test_signals_left_alone_outside_main_thread():
    original = signal.getsignal(signal.SIGINT)
    token = CancellationToken()
    seen = []

    def worker():
        with cancel_on_signals(token):
            seen.append(signal.getsignal(signal.SIGINT))

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()

    assert seen == [original]
    assert not token.cancelled
