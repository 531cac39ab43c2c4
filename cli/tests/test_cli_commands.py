from __future__ import annotations

import httpx
from typer.testing import CliRunner

from flightstats_cli import config, main
from flightstats_client import ApiClientError, FlexClient

runner = CliRunner()


def _use_tmp_config(tmp_path, monkeypatch) -> None:
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    for name in (config.ENV_APP_ID, config.ENV_APP_KEY, config.ENV_BASE_URI):
        monkeypatch.delenv(name, raising=False)


def _mock_client(monkeypatch, handler, module: str) -> None:
    def _make_client(cfg, *, base_uri_override=None):
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        return FlexClient(config.to_client_options(cfg), http_client=http_client)

    monkeypatch.setattr(f"flightstats_cli.commands.{module}.make_client", _make_client)


def test_help_lists_command_groups() -> None:
    result = runner.invoke(main.app, ["--help"])
    assert result.exit_code == 0
    for name in ("settings", "status", "schedules", "request"):
        assert name in result.output


def test_settings_init_and_show(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)

    result = runner.invoke(main.app, ["settings", "init", "--app-id", "my-id", "--app-key", "secret-key"])
    assert result.exit_code == 0
    assert tmp_path.joinpath("config.toml").exists()

    result = runner.invoke(main.app, ["settings", "show"])
    assert result.exit_code == 0
    assert "app_id=my-id" in result.output
    assert "secret-key" not in result.output


def test_settings_set_switches(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)

    result = runner.invoke(main.app, ["settings", "set", "--app-id", "x", "--utc-time", "off"])
    assert result.exit_code == 0
    cfg = config.load_config()
    assert cfg.app_id == "x"
    assert cfg.use_utc_time is False
    assert cfg.use_http_errors is True

    result = runner.invoke(main.app, ["settings", "set", "--http-errors", "maybe"])
    assert result.exit_code != 0


def test_status_without_credentials_exits_2(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)

    result = runner.invoke(main.app, ["status", "by-id", "42"])

    assert result.exit_code == 2
    assert "appId" in result.output


def test_status_by_id_prints_json(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    monkeypatch.setenv(config.ENV_APP_ID, "id")
    monkeypatch.setenv(config.ENV_APP_KEY, "key")

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/flightstatus/rest/v2/json/flight/status/42")
        return httpx.Response(200, json={"flightStatus": {"flightId": 42}})

    _mock_client(monkeypatch, handler, "status_cmd")
    result = runner.invoke(main.app, ["status", "by-id", "42"])

    assert result.exit_code == 0
    assert '"flightId": 42' in result.output


def test_status_reports_api_errors(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    monkeypatch.setenv(config.ENV_APP_ID, "id")
    monkeypatch.setenv(config.ENV_APP_KEY, "key")

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, text="message: bad credentials")

    _mock_client(monkeypatch, handler, "status_cmd")
    result = runner.invoke(main.app, ["status", "dep", "AA", "100", "2024-05-01"])

    assert result.exit_code == 1
    assert "bad credentials" in result.output
    assert not isinstance(result.exception, ApiClientError)


def test_schedules_rejects_bad_date(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)

    result = runner.invoke(main.app, ["schedules", "departing", "AA", "100", "05/01/2024"])

    assert result.exit_code == 2


def test_request_passes_query_and_extended_options(tmp_path, monkeypatch) -> None:
    _use_tmp_config(tmp_path, monkeypatch)
    monkeypatch.setenv(config.ENV_APP_ID, "id")
    monkeypatch.setenv(config.ENV_APP_KEY, "key")
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"ok": True})

    _mock_client(monkeypatch, handler, "request_cmd")
    result = runner.invoke(
        main.app,
        ["request", "airports", "v1", "active", "-q", "codeType=IATA", "-x", "useHTTPErrors"],
    )

    assert result.exit_code == 0
    assert seen["path"] == "/flex/airports/rest/v1/json/active"
    assert seen["params"]["codeType"] == "IATA"
    assert seen["params"]["extendedOptions"] == "useHTTPErrors"
