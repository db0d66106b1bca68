"""
Cancellation tokens for streams listing runs.

A ``CancellationToken`` is checked before every outbound request of a
listing run. It can be tripped programmatically via ``cancel()`` or, once
``install()`` has been called, by SIGINT/SIGTERM, which lets the CLI stop
a long listing cleanly between requests.
"""

from __future__ import annotations

import logging
import signal
from types import FrameType
from typing import Any, Callable, Optional, Union

from ytstreams.exceptions import OperationCancelledError

# Type for signal handlers as returned by signal.getsignal()
SignalHandlerType = Union[Callable[[int, Optional[FrameType]], Any], int, None]

logger = logging.getLogger(__name__)


class CancellationToken:
    """
    Cooperative cancellation flag for a listing run.

    Unlike a process-wide shutdown handler, each run gets its own token, so
    concurrent runs against different channels never affect each other.

    Attributes
    ----------
    is_cancelled : bool
        True once cancellation has been requested.
    signal_received : str | None
        The name of the signal that tripped the token, if any.

    Examples
    --------
    >>> token = CancellationToken()
    >>> token.install()
    >>> try:
    ...     async for stream in service.get_streams(channel_id, cancellation=token):
    ...         print(stream.title)
    ... except OperationCancelledError:
    ...     print("Stopped")
    ... finally:
    ...     token.uninstall()
    """

    def __init__(self) -> None:
        """Initialize an untripped token."""
        self._cancelled = False
        self._signal_received: str | None = None
        self._original_sigint: SignalHandlerType = None
        self._original_sigterm: SignalHandlerType = None
        self._installed = False

    @property
    def is_cancelled(self) -> bool:
        """Check if cancellation has been requested."""
        return self._cancelled

    @property
    def signal_received(self) -> str | None:
        """Get the name of the signal that triggered cancellation."""
        return self._signal_received

    def cancel(self) -> None:
        """Request cancellation."""
        self._cancelled = True

    def check_cancelled(self) -> None:
        """
        Raise if cancellation has been requested.

        Raises
        ------
        OperationCancelledError
            If the token has been tripped.
        """
        if self._cancelled:
            reason = f" via {self._signal_received}" if self._signal_received else ""
            raise OperationCancelledError(
                message=f"Streams listing cancelled{reason}",
                signal_received=self._signal_received,
            )

    def install(self) -> None:
        """
        Install signal handlers for SIGINT and SIGTERM.

        Saves original handlers so they can be restored on uninstall.
        """
        if self._installed:
            return

        self._original_sigint = signal.getsignal(signal.SIGINT)
        self._original_sigterm = signal.getsignal(signal.SIGTERM)

        signal.signal(signal.SIGINT, self._handle_signal)
        signal.signal(signal.SIGTERM, self._handle_signal)

        self._installed = True
        logger.debug("Cancellation handlers installed for SIGINT and SIGTERM")

    def uninstall(self) -> None:
        """Uninstall signal handlers and restore the original ones."""
        if not self._installed:
            return

        if self._original_sigint is not None:
            signal.signal(signal.SIGINT, self._original_sigint)
        if self._original_sigterm is not None:
            signal.signal(signal.SIGTERM, self._original_sigterm)

        self._installed = False
        logger.debug("Cancellation handlers uninstalled, original handlers restored")

    def _handle_signal(self, signum: int, frame: object) -> None:
        """
        Trip the token on an incoming signal.

        Parameters
        ----------
        signum : int
            Signal number (e.g., signal.SIGINT, signal.SIGTERM).
        frame : object
            Current stack frame (unused but required by signal API).
        """
        signal_name = signal.Signals(signum).name
        self._signal_received = signal_name
        self._cancelled = True

        logger.warning(
            "Received %s - stopping after the current request", signal_name
        )
