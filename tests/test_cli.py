"""Command-line front end."""

from __future__ import annotations

import asyncio
import json

import httpx

from conftest import NOT_FOUND_PAYLOAD, json_response
from whatismymmr import main as main_module
from whatismymmr.presentation.cli import (
    EXIT_NETWORK_ERROR,
    EXIT_OK,
    EXIT_REMOTE_ERROR,
    DistributionCommand,
    SummonerCommand,
)
from whatismymmr.presentation.cli import lookup_commands


def test_summoner_json_output(make_client, summoner_payload, capsys) -> None:
    cmd = SummonerCommand(json_out=True, client_factory=lambda: make_client(lambda r: json_response(200, summoner_payload)))

    code = asyncio.run(cmd.run("Faker", "euw"))

    assert code == EXIT_OK
    assert json.loads(capsys.readouterr().out) == summoner_payload


def test_summoner_text_output(make_client, summoner_payload, capsys) -> None:
    cmd = SummonerCommand(client_factory=lambda: make_client(lambda r: json_response(200, summoner_payload)))

    code = asyncio.run(cmd.run("Faker", "euw"))

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "Summoner: Faker [euw, Europe West]" in out
    assert "- Ranked Solo/Duo: 1550 ± 40 (closest rank Gold II, percentile 74.7)" in out
    assert "- Normal Draft: 1400 ± 80 (closest rank Silver I, percentile 61.2) [low confidence]" in out


def test_summoner_without_estimates(make_client, capsys) -> None:
    cmd = SummonerCommand(client_factory=lambda: make_client(lambda r: json_response(200, {"ranked": {"avg": None}})))

    asyncio.run(cmd.run("Smurf", "na"))

    out = capsys.readouterr().out
    assert "- Ranked Solo/Duo: no estimate" in out
    assert "- ARAM: no estimate" in out


def test_remote_error_exit_code(make_client, capsys) -> None:
    cmd = SummonerCommand(client_factory=lambda: make_client(lambda r: json_response(404, NOT_FOUND_PAYLOAD)))

    code = asyncio.run(cmd.run("nobody", "na"))

    assert code == EXIT_REMOTE_ERROR
    assert "error 404: not found" in capsys.readouterr().err


def test_remote_error_as_json(make_client, capsys) -> None:
    cmd = DistributionCommand(json_out=True, client_factory=lambda: make_client(lambda r: json_response(404, NOT_FOUND_PAYLOAD)))

    code = asyncio.run(cmd.run("na"))

    assert code == EXIT_REMOTE_ERROR
    assert json.loads(capsys.readouterr().out) == NOT_FOUND_PAYLOAD


def test_network_error_exit_code(make_client, capsys) -> None:
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    cmd = DistributionCommand(client_factory=lambda: make_client(_refuse))

    code = asyncio.run(cmd.run("na"))

    assert code == EXIT_NETWORK_ERROR
    assert "network error" in capsys.readouterr().err


def test_distribution_text_output(make_client, distribution_payload, capsys) -> None:
    cmd = DistributionCommand(client_factory=lambda: make_client(lambda r: json_response(200, distribution_payload)))

    code = asyncio.run(cmd.run("kr"))

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "MMR distribution [kr, Korea]" in out
    assert "- Ranked Solo/Duo: 1000-1200, peak at 1100, 670 players" in out
    assert "- ARAM: 1500-1700, peak at 1600, 45 players" in out


def test_distribution_text_skips_non_numeric_buckets(make_client, capsys) -> None:
    payload = {"ranked": {"1000": 20, "unknown": 5, "1100": "n/a"}, "normal": "n/a"}
    cmd = DistributionCommand(client_factory=lambda: make_client(lambda r: json_response(200, payload)))

    code = asyncio.run(cmd.run("oce"))

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "MMR distribution [oce]" in out
    assert "- Ranked Solo/Duo: 1000-1000, peak at 1000, 25 players" in out
    assert "- Normal Draft: no data" in out


def test_parser_defaults() -> None:
    args = main_module.build_parser().parse_args(["summoner", "Faker"])

    assert args.command == "summoner"
    assert args.name == "Faker"
    assert args.region is None
    assert args.json is False


def test_main_runs_a_lookup(monkeypatch, make_client, distribution_payload, capsys) -> None:
    requests: list[httpx.Request] = []

    def _respond(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return json_response(200, distribution_payload)

    monkeypatch.setattr(lookup_commands, "WhatIsMyMMRClient", lambda: make_client(_respond))

    code = main_module.main(["distribution", "--region", "euw", "--json"])

    assert code == EXIT_OK
    assert requests[0].url.host == "euw.whatismymmr.com"
    assert json.loads(capsys.readouterr().out) == distribution_payload
