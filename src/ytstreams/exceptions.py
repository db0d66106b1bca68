"""
Custom exceptions for the ytstreams application.

This module defines domain-specific exceptions so callers can tell an
upstream schema change (``ExtractionError``) apart from a network problem
(``TransportError``) or a cancelled run (``OperationCancelledError``).
"""

from __future__ import annotations


class YtStreamsError(Exception):
    """Base exception for all ytstreams errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize YtStreamsError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class ExtractionError(YtStreamsError):
    """
    Exception raised when required data cannot be extracted from a response.

    Raised when the initial page data is missing after all retries, when a
    response body is not valid JSON, or when a field required to build a
    stream record (video ID, author, thumbnail URL/size) is absent. This
    usually means YouTube changed its page or response format.

    Attributes
    ----------
    message : str
        Human-readable error message.
    field_name : str | None
        Name of the missing field, if the error concerns a single field.

    Examples
    --------
    >>> try:
    ...     async for stream in service.get_streams(channel_id):
    ...         print(stream.title)
    ... except ExtractionError as e:
    ...     print(f"Upstream format changed ({e.field_name}): {e.message}")
    """

    def __init__(
        self,
        message: str = "Failed to extract data from YouTube response",
        field_name: str | None = None,
    ) -> None:
        """
        Initialize ExtractionError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message
            (default: "Failed to extract data from YouTube response").
        field_name : str | None, optional
            Name of the missing field (default: None).
        """
        self.field_name: str | None = field_name
        super().__init__(message)

    @classmethod
    def missing_field(cls, field_name: str) -> "ExtractionError":
        """
        Build an error for a missing required field.

        Parameters
        ----------
        field_name : str
            Human-readable name of the field (e.g., "video ID").

        Returns
        -------
        ExtractionError
            Error with a message of the form ``Failed to extract the <field>.``
        """
        return cls(message=f"Failed to extract the {field_name}.", field_name=field_name)


class TransportError(YtStreamsError):
    """
    Exception raised for HTTP status and network failures.

    Wraps non-success HTTP responses and ``httpx`` transport errors. These
    are not retried by ytstreams and are surfaced to the caller immediately.

    Attributes
    ----------
    message : str
        Human-readable error message.
    url : str
        The URL that was being requested.
    status_code : int | None
        HTTP status code, or None when no response was received.
    original_error : Exception | None
        The underlying exception, if any.
    """

    def __init__(
        self,
        message: str = "Request to YouTube failed",
        url: str = "",
        status_code: int | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """
        Initialize TransportError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Request to YouTube failed").
        url : str, optional
            The requested URL (default: "").
        status_code : int | None, optional
            HTTP status code returned, if any (default: None).
        original_error : Exception | None, optional
            The original exception that caused this error (default: None).
        """
        self.url: str = url
        self.status_code: int | None = status_code
        self.original_error: Exception | None = original_error
        super().__init__(message)


class OperationCancelledError(YtStreamsError):
    """
    Exception raised when a cancellation token is tripped.

    Raised before an outbound request once cancellation has been requested,
    so that no further network calls are issued.

    Attributes
    ----------
    message : str
        Human-readable error message.
    signal_received : str | None
        Name of the signal that triggered cancellation, if any.
    """

    def __init__(
        self,
        message: str = "Operation cancelled",
        signal_received: str | None = None,
    ) -> None:
        """
        Initialize OperationCancelledError.

        Parameters
        ----------
        message : str, optional
            Human-readable error message (default: "Operation cancelled").
        signal_received : str | None, optional
            Signal that triggered the cancellation (default: None).
        """
        self.signal_received: str | None = signal_received
        super().__init__(message)


# Exit codes for CLI integration
EXIT_CODE_SUCCESS = 0
EXIT_CODE_GENERAL_ERROR = 1
EXIT_CODE_INVALID_ARGS = 2
EXIT_CODE_EXTRACTION_FAILED = 3
EXIT_CODE_NETWORK_ERROR = 4
EXIT_CODE_INTERRUPTED = 130  # Standard Unix signal interrupt exit code
