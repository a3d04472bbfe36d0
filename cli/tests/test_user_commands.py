from __future__ import annotations

from typer.testing import CliRunner

from gotrue_cli import config, main

runner = CliRunner()


def _signed_in(token: str = "jwt-1") -> None:
    cfg = config.default_config()
    cfg.auth.access_token = token
    config.save_config(cfg)


def test_user_show_sends_stored_token(config_dir, server) -> None:
    _signed_in()
    server.on("GET", "/user", 200, {"id": "u1", "email": "a@b.com", "role": "authenticated"})

    result = runner.invoke(main._build_app(), ["user", "show"])

    assert result.exit_code == 0, result.output
    assert "a@b.com" in result.output
    assert server.requests[-1].headers["Authorization"] == "Bearer jwt-1"


def test_user_show_token_option_overrides_stored(config_dir, server) -> None:
    _signed_in()
    server.on("GET", "/user", 200, {"id": "u1", "email": "a@b.com"})

    result = runner.invoke(main._build_app(), ["user", "show", "--token", "other-jwt"])

    assert result.exit_code == 0, result.output
    assert server.requests[-1].headers["Authorization"] == "Bearer other-jwt"


def test_user_show_without_token(config_dir) -> None:
    result = runner.invoke(main._build_app(), ["user", "show"])

    assert result.exit_code == 2
    assert "No access token" in result.output


def test_user_update_sends_data(config_dir, server) -> None:
    _signed_in()
    server.on("PUT", "/user", 200, {"id": "u1", "email": "a@b.com", "user_metadata": {"name": "A"}})

    result = runner.invoke(main._build_app(), ["user", "update", "--data", '{"name": "A"}'])

    assert result.exit_code == 0, result.output
    assert server.json_of(server.requests[-1]) == {"data": {"name": "A"}}


def test_user_update_rejects_bad_json(config_dir) -> None:
    _signed_in()

    result = runner.invoke(main._build_app(), ["user", "update", "--data", "[1, 2]"])

    assert result.exit_code == 2
    assert "JSON object" in result.output


def test_invite_reports_user(config_dir, server) -> None:
    _signed_in("service-role")
    server.on("POST", "/invite", 200, {"id": "u2", "email": "new@b.com"})

    result = runner.invoke(main._build_app(), ["invite", "new@b.com"])

    assert result.exit_code == 0, result.output
    assert "new@b.com" in result.output
    assert server.json_of(server.requests[-1]) == {"email": "new@b.com"}


def test_server_settings_printed_as_json(config_dir, server) -> None:
    server.on("GET", "/settings", 200, {"disable_signup": False, "external": {"github": True}})

    result = runner.invoke(main._build_app(), ["settings"])

    assert result.exit_code == 0, result.output
    assert '"disable_signup": false' in result.output


def _with_prod_profile() -> None:
    cfg = config.default_config()
    cfg.auth.access_token = "default-token"
    cfg.profiles["prod"] = config.ProfileConfig(base_url="http://prod.test", access_token="prod-token")
    config.save_config(cfg)


def test_user_show_uses_profile_token(config_dir, server) -> None:
    _with_prod_profile()
    server.on("GET", "/user", 200, {"id": "u1", "email": "a@b.com"})

    result = runner.invoke(main._build_app(), ["--profile", "prod", "user", "show"])

    assert result.exit_code == 0, result.output
    assert server.requests[-1].url.host == "prod.test"
    assert server.requests[-1].headers["Authorization"] == "Bearer prod-token"


def test_user_update_uses_profile_token(config_dir, server) -> None:
    _with_prod_profile()
    server.on("PUT", "/user", 200, {"id": "u1", "email": "b@b.com"})

    result = runner.invoke(main._build_app(), ["--profile", "prod", "user", "update", "--email", "b@b.com"])

    assert result.exit_code == 0, result.output
    assert server.requests[-1].headers["Authorization"] == "Bearer prod-token"
