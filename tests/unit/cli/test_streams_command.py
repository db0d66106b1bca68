"""
Tests for the `ytstreams streams` command.

The service is patched with a fake whose listing methods return async
generators over factory-built streams, so no HTTP happens.
"""

from __future__ import annotations

import datetime as _dt
import json
import logging
from collections.abc import AsyncIterator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from tests.factories.id_factory import CHANNEL_ID
from tests.factories.stream_factory import AuthorFactory, ChannelStreamFactory
from ytstreams.cli.commands.streams import _format_duration, _setup_logging
from ytstreams.cli.main import app
from ytstreams.exceptions import ExtractionError, OperationCancelledError, TransportError
from ytstreams.models.stream import StreamStatus

SERVICE_PATH = "ytstreams.cli.commands.streams.ChannelStreamsService"


async def _iterate(items: list[Any]) -> AsyncIterator[Any]:
    for item in items:
        yield item


async def _fail(error: Exception) -> AsyncIterator[Any]:
    raise error
    yield  # pragma: no cover


@pytest.fixture
def runner():
    """CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep handlers bound to the runner's streams out of the package logger."""
    with patch("ytstreams.cli.commands.streams._setup_logging") as mock_setup:
        yield mock_setup


@pytest.fixture
def streams():
    """One stream per status."""
    return [
        ChannelStreamFactory(id="uuuuuuuuuuu", status=StreamStatus.UPCOMING, duration=None),
        ChannelStreamFactory(id="lllllllllll", status=StreamStatus.LIVE, duration=None),
        ChannelStreamFactory(id="ppppppppppp", status=StreamStatus.PAST),
    ]


def _patched_service(**methods: Any) -> MagicMock:
    service = MagicMock()
    for name, side_effect in methods.items():
        getattr(service, name).side_effect = side_effect
    return service


class TestStreamsCommand:
    """Tests for listing output."""

    def test_table_output(self, runner, streams):
        service = _patched_service(get_streams=lambda *args: _iterate(streams))

        with patch(SERVICE_PATH, return_value=service):
            result = runner.invoke(app, ["streams", CHANNEL_ID])

        assert result.exit_code == 0
        assert "uuuuuuuuuuu" in result.stdout
        assert "lllllllllll" in result.stdout
        assert "ppppppppppp" in result.stdout
        assert "3 stream(s)" in result.stdout

    def test_json_lines_output(self, runner, streams):
        service = _patched_service(get_streams=lambda *args: _iterate(streams))

        with patch(SERVICE_PATH, return_value=service):
            result = runner.invoke(app, ["streams", CHANNEL_ID, "--json"])

        assert result.exit_code == 0
        lines = [json.loads(line) for line in result.stdout.splitlines() if line]
        assert [line["id"] for line in lines] == ["uuuuuuuuuuu", "lllllllllll", "ppppppppppp"]
        assert [line["status"] for line in lines] == ["upcoming", "live", "past"]

    def test_channel_url_accepted(self, runner, streams):
        service = _patched_service(get_streams=lambda *args: _iterate(streams))

        with patch(SERVICE_PATH, return_value=service):
            result = runner.invoke(
                app, ["streams", f"https://www.youtube.com/channel/{CHANNEL_ID}/streams"]
            )

        assert result.exit_code == 0
        assert service.get_streams.call_args.args[0] == CHANNEL_ID

    @pytest.mark.parametrize(
        "status,method",
        [
            ("live", "get_live_streams"),
            ("upcoming", "get_upcoming_streams"),
            ("past", "get_past_streams"),
        ],
    )
    def test_status_selects_method(self, runner, streams, status, method):
        service = _patched_service(**{method: lambda *args: _iterate(streams[:1])})

        with patch(SERVICE_PATH, return_value=service):
            result = runner.invoke(app, ["streams", CHANNEL_ID, "--status", status])

        assert result.exit_code == 0
        getattr(service, method).assert_called_once()
        service.get_streams.assert_not_called()

    def test_limit(self, runner, streams):
        service = _patched_service(get_streams=lambda *args: _iterate(streams))

        with patch(SERVICE_PATH, return_value=service):
            result = runner.invoke(app, ["streams", CHANNEL_ID, "--limit", "2", "--json"])

        assert result.exit_code == 0
        assert len([line for line in result.stdout.splitlines() if line]) == 2

    def test_bracketed_titles_printed_literally(self, runner):
        bracketed = [
            ChannelStreamFactory(
                title="[/] oops",
                author=AuthorFactory(channel_title="[bold]Chan[/]"),
            )
        ]
        service = _patched_service(get_streams=lambda *args: _iterate(bracketed))

        with patch(SERVICE_PATH, return_value=service):
            result = runner.invoke(app, ["streams", CHANNEL_ID])

        assert result.exit_code == 0
        assert "[/] oops" in result.stdout
        assert "[bold]Chan[/]" in result.stdout


class TestStreamsCommandErrors:
    """Tests for argument validation and exit codes."""

    def test_invalid_channel(self, runner):
        with patch(SERVICE_PATH) as mock_service:
            result = runner.invoke(app, ["streams", "https://www.youtube.com/@someone"])

        assert result.exit_code == 2
        mock_service.assert_not_called()

    def test_invalid_limit(self, runner):
        result = runner.invoke(app, ["streams", CHANNEL_ID, "--limit", "0"])
        assert result.exit_code == 2

    @pytest.mark.parametrize(
        "error,exit_code",
        [
            (ExtractionError.missing_field("video author"), 3),
            (TransportError(status_code=503), 4),
            (OperationCancelledError(signal_received="SIGINT"), 130),
        ],
    )
    def test_error_exit_codes(self, runner, error, exit_code):
        service = _patched_service(get_streams=lambda *args: _fail(error))

        with patch(SERVICE_PATH, return_value=service):
            result = runner.invoke(app, ["streams", CHANNEL_ID])

        assert result.exit_code == exit_code

    def test_bracketed_error_message_printed_literally(self, runner):
        error = TransportError(message="GET [/]x failed", status_code=503)
        service = _patched_service(get_streams=lambda *args: _fail(error))

        with patch(SERVICE_PATH, return_value=service):
            result = runner.invoke(app, ["streams", CHANNEL_ID])

        assert result.exit_code == 4
        assert "GET [/]x failed" in result.stdout


class TestHelpers:
    """Tests for formatting and logging helpers."""

    @pytest.mark.parametrize(
        "duration,expected",
        [
            (None, "-"),
            (_dt.timedelta(minutes=1, seconds=5), "1:05"),
            (_dt.timedelta(hours=1, minutes=2, seconds=3), "1:02:03"),
        ],
    )
    def test_format_duration(self, duration, expected):
        assert _format_duration(duration) == expected

    def test_setup_logging_verbose(self):
        package_logger = logging.getLogger("ytstreams")
        saved_handlers = list(package_logger.handlers)
        saved_level = package_logger.level
        try:
            _setup_logging(verbose=True)
            assert package_logger.level == logging.DEBUG
            assert package_logger.handlers
        finally:
            package_logger.handlers = saved_handlers
            package_logger.setLevel(saved_level)
