import json

import pytest

from amasign import cli
from amasign.crypto.keys import derive_keypair
from amasign.exceptions import RemoteRejected, TransportError

ARGS_JSON = '[{"b58":"RECIPIENT"},"1000000000","AMA"]'


def test_missing_arguments_is_usage_error(capsys):
    with pytest.raises(SystemExit) as info:
        cli.main(["SEED", "Coin"])
    assert info.value.code == 2
    assert capsys.readouterr().out == ""


def test_invalid_args_json(seed, capsys):
    assert cli.main([seed, "Coin", "transfer", "[1, 2"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "args_json" in captured.err


def test_invalid_timeout(seed, capsys):
    assert cli.main([seed, "Coin", "transfer", ARGS_JSON, "--timeout", "soon"]) == 2


def test_dry_run_prints_signer(seed, capsys):
    assert cli.main([seed, "Coin", "transfer", ARGS_JSON, "--dry-run"]) == 0
    _, public_key = derive_keypair(seed)
    assert json.loads(capsys.readouterr().out) == {"signer": public_key.base58()}


def test_malformed_seed(capsys):
    assert cli.main(["0OIl", "Coin", "transfer", ARGS_JSON, "--dry-run"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "0OIl" not in captured.err


def test_success_prints_result(seed, monkeypatch, capsys):
    calls = []

    async def fake_submit(args, call_args, timeout):
        calls.append((args.network, args.endpoint, call_args, timeout))
        return {"transaction_hash": "abc", "status": "submitted"}

    monkeypatch.setattr(cli, "_submit", fake_submit)
    assert cli.main([
        seed, "Coin", "transfer", ARGS_JSON, "testnet",
        "--endpoint", "http://localhost:9000", "--timeout", "5",
    ]) == 0

    assert json.loads(capsys.readouterr().out) == {"transaction_hash": "abc", "status": "submitted"}
    assert calls == [(
        "testnet",
        "http://localhost:9000",
        [{"b58": "RECIPIENT"}, "1000000000", "AMA"],
        5.0,
    )]


def test_default_network_is_mainnet(seed, monkeypatch, capsys):
    networks = []

    async def fake_submit(args, call_args, timeout):
        networks.append(args.network)
        return "ok"

    monkeypatch.setattr(cli, "_submit", fake_submit)
    assert cli.main([seed, "Coin", "transfer", ARGS_JSON]) == 0
    assert networks == ["mainnet"]
    assert capsys.readouterr().out.strip() == "ok"


def test_endpoint_from_environment(seed, monkeypatch):
    endpoints = []

    async def fake_submit(args, call_args, timeout):
        endpoints.append(args.endpoint)
        return "ok"

    monkeypatch.setenv("AMASIGN_ENDPOINT", "http://env.example")
    monkeypatch.setattr(cli, "_submit", fake_submit)
    assert cli.main([seed, "Coin", "transfer", ARGS_JSON]) == 0
    assert endpoints == ["http://env.example"]


@pytest.mark.parametrize("error", [
    RemoteRejected("Remote error", detail={"code": -1, "message": "nope"}),
    TransportError("Network error"),
])
def test_failures_exit_nonzero_without_output(seed, monkeypatch, capsys, error):
    async def fake_submit(args, call_args, timeout):
        raise error

    monkeypatch.setattr(cli, "_submit", fake_submit)
    assert cli.main([seed, "Coin", "transfer", ARGS_JSON]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error:")
    assert seed not in captured.err


@pytest.mark.parametrize("value", ["inf", "-inf", "nan", "0", "-1"])
def test_non_finite_timeout_is_rejected(seed, value, capsys):
    assert cli.main([seed, "Coin", "transfer", ARGS_JSON, "--timeout", value]) == 2
    assert capsys.readouterr().out == ""
