from __future__ import annotations

from typer.testing import CliRunner

from gotrue_cli import main
from gotrue_cli.auth_state import AuthContext


def test_user_commands_listed_when_token_present(monkeypatch) -> None:
    monkeypatch.setattr(main, "resolve_auth_context", lambda check_remote=True: AuthContext(state="token_present"))
    result = CliRunner().invoke(main._build_app(), ["--help"])
    assert result.exit_code == 0
    assert "user" in result.output
    assert "invite" in result.output


def test_user_commands_hidden_without_token(monkeypatch) -> None:
    monkeypatch.setattr(main, "resolve_auth_context", lambda check_remote=True: AuthContext(state="no_token"))
    result = CliRunner().invoke(main._build_app(), ["--help"])
    assert result.exit_code == 0
    assert "invite" not in result.output
    assert "settings" in result.output
