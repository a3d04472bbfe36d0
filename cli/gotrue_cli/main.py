from __future__ import annotations

import typer

from .auth_state import resolve_auth_context
from .commands import auth_cmd, config_cmd, invite_cmd, settings_cmd, users_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="gotrue",
        help="GoTrue authentication server CLI",
        no_args_is_help=True,
    )

    ctx = resolve_auth_context(check_remote=False)

    # Always available
    app.add_typer(config_cmd.app, name="config")
    app.add_typer(auth_cmd.app, name="auth")
    app.command("settings")(settings_cmd.show_server_settings)

    # Token commands stay callable with --token but are hidden until a token is known
    signed_out = ctx.state == "no_token"
    app.add_typer(users_cmd.app, name="user", hidden=signed_out)
    app.command("invite", hidden=signed_out)(invite_cmd.invite_user)

    @app.callback()
    def _main(
            ctx: typer.Context,
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
            profile: str | None = typer.Option(None, "--profile", help="Config profile to use."),
            base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
    ):
        setup_logging(verbose)
        ctx.obj = {"profile": profile, "base_url": base_url}

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
