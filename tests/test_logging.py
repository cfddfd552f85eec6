"""Logging helpers and what the client logs."""

from __future__ import annotations

import asyncio
import json
import logging

import pytest

from conftest import NOT_FOUND_PAYLOAD, json_response
from whatismymmr.core.logging import bootstrap_logging, context, get_context, get_logger, shutdown_logging
from whatismymmr.core.logging.formatter import ConsoleFormatter, JSONFormatter
from whatismymmr.core.logging.levels import LogLevel, register_levels, to_level
from whatismymmr.domain import WhatIsMyMMRError


@pytest.mark.parametrize(
    "value, expected",
    [("success", 25), ("TRACE", 5), ("debug", logging.DEBUG), ("bogus", logging.INFO), (40, 40)],
)
def test_to_level(value, expected) -> None:
    assert to_level(value) == expected


def test_register_levels_names_custom_levels() -> None:
    register_levels()
    assert logging.getLevelName(int(LogLevel.SUCCESS)) == "SUCCESS"
    assert logging.getLevelName(int(LogLevel.TRACE)) == "TRACE"


def test_context_is_scoped() -> None:
    with context(region="euw", path=None):
        assert get_context() == {"region": "euw"}
        with context(path="/api/v1/distribution"):
            assert get_context() == {"region": "euw", "path": "/api/v1/distribution"}
        assert get_context() == {"region": "euw"}
    assert get_context() == {}


def test_formatters_include_context_and_extras() -> None:
    record = logging.makeLogRecord(
        {"name": "whatismymmr.test", "levelname": "INFO", "levelno": 20, "msg": "hello", "service": "client", "status": 404}
    )

    with context(host="na.whatismymmr.com"):
        payload = json.loads(JSONFormatter().format(record))
        line = ConsoleFormatter(color=False).format(record)

    assert payload["message"] == "hello"
    assert payload["service"] == "client"
    assert payload["context"] == {"host": "na.whatismymmr.com"}
    assert payload["status"] == 404
    assert "hello" in line
    assert "host=na.whatismymmr.com" in line
    assert "status=404" in line


def test_lazy_messages_are_not_built_when_disabled() -> None:
    logger = get_logger("whatismymmr.tests.lazy")
    logging.getLogger("whatismymmr.tests.lazy").setLevel(logging.WARNING)

    logger.debug(lambda: 1 / 0)


def test_bootstrap_writes_json_lines(tmp_path) -> None:
    bootstrap_logging(level="DEBUG", console=False, log_dir=tmp_path, log_file_name="test.jsonl")
    try:
        get_logger("whatismymmr.tests.file", service="tests").success("written")
    finally:
        shutdown_logging()

    lines = (tmp_path / "test.jsonl").read_text().splitlines()
    record = json.loads(lines[-1])
    assert record["message"] == "written"
    assert record["level"] == "SUCCESS"
    assert record["service"] == "tests"


def test_shutdown_detaches_handlers(tmp_path) -> None:
    package_logger = logging.getLogger("whatismymmr")
    before = list(package_logger.handlers)

    bootstrap_logging(console=True, log_dir=tmp_path)
    assert len(package_logger.handlers) == len(before) + 2
    shutdown_logging()

    assert package_logger.handlers == before


def test_client_logs_non_200_with_request_context(make_client, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="whatismymmr")
    client = make_client(lambda request: json_response(404, NOT_FOUND_PAYLOAD))

    async def _run():
        async with client:
            await client.get_summoner("nobody", "euw")

    with pytest.raises(WhatIsMyMMRError):
        asyncio.run(_run())

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert [r.getMessage() for r in warnings] == [
        "HTTP 404 for https://euw.whatismymmr.com/api/v1/summoner?name=nobody"
    ]
    assert warnings[0].service == "client"
    assert warnings[0].name == "whatismymmr.infrastructure.api.client"


def test_client_traces_each_response(make_client, caplog) -> None:
    payload = {"ranked": {"avg": 1200}}
    caplog.set_level(int(LogLevel.TRACE), logger="whatismymmr")
    client = make_client(lambda request: json_response(200, payload))

    async def _run():
        async with client:
            await client.get_summoner("Faker", "kr")

    asyncio.run(_run())

    traces = [r for r in caplog.records if r.levelno == int(LogLevel.TRACE)]
    assert [r.getMessage() for r in traces] == [
        f"HTTP 200, {len(json.dumps(payload))} bytes from https://kr.whatismymmr.com/api/v1/summoner?name=Faker"
    ]
    assert traces[0].service == "client"


def test_trace_is_silent_above_its_level(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="whatismymmr.tests.trace")

    get_logger("whatismymmr.tests.trace").trace(lambda: 1 / 0)

    assert caplog.records == []
