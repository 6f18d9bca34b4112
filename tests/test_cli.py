import json

import httpx
import pytest
from click.testing import CliRunner

from livy_client.cli import main as cli_main
from livy_client.client import AsyncLivy


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_file = tmp_path / "config.json"
    monkeypatch.setattr(cli_main, "CONFIG_FILE", config_file)
    for var in ("LIVY_URL", "LIVY_NEGOTIATE", "LIVY_USERNAME"):
        monkeypatch.delenv(var, raising=False)
    return config_file


@pytest.fixture
def livy_server(monkeypatch):
    """Route every CLI-built client to a handler the test installs."""
    seen = []
    state = {"handler": None}

    def handler(request):
        seen.append(request)
        return state["handler"](request)

    def factory(url, **kwargs):
        return AsyncLivy(url, transport=httpx.MockTransport(handler), **kwargs)

    monkeypatch.setattr(cli_main, "AsyncLivy", factory)

    def install(respond):
        state["handler"] = respond
        return seen

    return install


def test_missing_url_is_usage_error(runner):
    result = runner.invoke(cli_main.main, ["sessions", "list"])
    assert result.exit_code == 1
    assert "No Livy URL" in result.output


def test_session_state(runner, livy_server, base_url):
    seen = livy_server(lambda r: httpx.Response(200, json={"id": 5, "state": "idle"}))
    result = runner.invoke(cli_main.main, ["--url", base_url, "sessions", "state", "5"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "idle"
    assert seen[0].url.path == "/sessions/5/state"


def test_session_get_json(runner, livy_server, base_url):
    livy_server(lambda r: httpx.Response(200, json={"id": 5, "kind": "pyspark", "appInfo": {"sparkUiUrl": None}}))
    result = runner.invoke(cli_main.main, ["--url", base_url, "sessions", "get", "5", "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["kind"] == "pyspark"
    assert payload["appInfo"] == {"sparkUiUrl": None}


def test_sessions_list_passes_pagination(runner, livy_server, base_url):
    seen = livy_server(lambda r: httpx.Response(200, json={"from": 2, "total": 3, "sessions": []}))
    result = runner.invoke(cli_main.main, ["--url", base_url, "sessions", "list", "--from", "2", "--size", "1"])
    assert result.exit_code == 0, result.output
    assert dict(seen[0].url.params) == {"from": "2", "size": "1"}


def test_session_log_prints_lines(runner, livy_server, base_url):
    livy_server(lambda r: httpx.Response(200, json={"id": 1, "log": ["first", "second"]}))
    result = runner.invoke(cli_main.main, ["--url", base_url, "sessions", "log", "1"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["first", "second"]


def test_session_create_sends_conf(runner, livy_server, base_url):
    seen = livy_server(lambda r: httpx.Response(201, json={"id": 4, "state": "starting"}))
    result = runner.invoke(cli_main.main, [
        "--url", base_url, "sessions", "create", "--kind", "pyspark", "--conf", "spark.executor.cores=2",
    ])
    assert result.exit_code == 0, result.output
    assert json.loads(seen[0].content) == {"kind": "pyspark", "conf": {"spark.executor.cores": "2"}}


def test_session_create_rejects_malformed_conf(runner, livy_server, base_url):
    livy_server(lambda r: httpx.Response(201, json={}))
    result = runner.invoke(cli_main.main, ["--url", base_url, "sessions", "create", "--conf", "oops"])
    assert result.exit_code == 2


def test_statement_run_and_output(runner, livy_server, base_url):
    livy_server(lambda r: httpx.Response(200, json={
        "id": 0, "state": "available",
        "output": {"status": "ok", "execution_count": 0, "data": {"text/plain": "2"}},
    }))
    result = runner.invoke(cli_main.main, ["--url", base_url, "statements", "get", "1", "0"])
    assert result.exit_code == 0, result.output
    assert "2" in result.output


def test_statement_cancel(runner, livy_server, base_url):
    seen = livy_server(lambda r: httpx.Response(200, json={"msg": "canceled"}))
    result = runner.invoke(cli_main.main, ["--url", base_url, "statements", "cancel", "1", "3"])
    assert result.exit_code == 0, result.output
    assert "canceled" in result.output
    assert seen[0].url.path == "/sessions/1/statements/3/cancel"


def test_batch_state(runner, livy_server, base_url):
    livy_server(lambda r: httpx.Response(200, json={"id": 2, "state": "success"}))
    result = runner.invoke(cli_main.main, ["--url", base_url, "batches", "state", "2"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "success"


def test_unexpected_status_exit_code(runner, livy_server, base_url):
    livy_server(lambda r: httpx.Response(404, text="Session '5' not found."))
    result = runner.invoke(cli_main.main, ["--url", base_url, "sessions", "get", "5"])
    assert result.exit_code == 4
    assert "404" in result.output


def test_transport_failure_exit_code(runner, livy_server, base_url):
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    livy_server(refuse)
    result = runner.invoke(cli_main.main, ["--url", base_url, "sessions", "list"])
    assert result.exit_code == 3


def test_decode_failure_exit_code(runner, livy_server, base_url):
    livy_server(lambda r: httpx.Response(200, json={"id": 1, "kind": "unknown-engine"}))
    result = runner.invoke(cli_main.main, ["--url", base_url, "sessions", "get", "1"])
    assert result.exit_code == 5
    assert "$.kind" in result.output


def test_url_from_environment(runner, livy_server, monkeypatch, base_url):
    seen = livy_server(lambda r: httpx.Response(200, json={"id": 1, "state": "dead"}))
    monkeypatch.setenv("LIVY_URL", base_url)
    result = runner.invoke(cli_main.main, ["sessions", "state", "1"])
    assert result.exit_code == 0, result.output
    assert str(seen[0].url).startswith(base_url)


def test_config_set_show_and_use(runner, livy_server, isolated_config, base_url):
    result = runner.invoke(cli_main.main, ["config", "set", "--url", base_url, "--timeout", "5"])
    assert result.exit_code == 0, result.output
    assert json.loads(isolated_config.read_text()) == {"url": base_url, "timeout": 5.0}

    result = runner.invoke(cli_main.main, ["config", "show"])
    assert f"url = {base_url}" in result.output

    seen = livy_server(lambda r: httpx.Response(200, json={"id": 1, "state": "idle"}))
    result = runner.invoke(cli_main.main, ["sessions", "state", "1"])
    assert result.exit_code == 0, result.output
    assert len(seen) == 1


def test_option_overrides_saved_url(runner, livy_server, isolated_config, base_url):
    isolated_config.write_text(json.dumps({"url": "http://stale:8998"}))
    seen = livy_server(lambda r: httpx.Response(200, json={"id": 1, "state": "idle"}))
    result = runner.invoke(cli_main.main, ["--url", base_url, "sessions", "state", "1"])
    assert result.exit_code == 0, result.output
    assert seen[0].url.host == "livy.example.com"


def test_config_clear(runner, isolated_config, base_url):
    isolated_config.write_text(json.dumps({"url": base_url}))
    result = runner.invoke(cli_main.main, ["config", "clear"])
    assert result.exit_code == 0
    assert json.loads(isolated_config.read_text()) == {}


def test_exit_code_mapping():
    from livy_client.errors import DecodeError, LivyError, TransportError, UnexpectedStatus

    assert cli_main.exit_code_for(TransportError(OSError("x"))) == 3
    assert cli_main.exit_code_for(UnexpectedStatus(500)) == 4
    assert cli_main.exit_code_for(DecodeError("$", "bad")) == 5
    assert cli_main.exit_code_for(LivyError("other", "x")) == 1
