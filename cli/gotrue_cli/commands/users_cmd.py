from __future__ import annotations

import typer
from rich.table import Table

from gotrue_client import User

from .. import console
from ..config import load_config
from ..formatting import format_timestamp
from ..http import call, client_for, parse_data_option, require_token

app = typer.Typer(help="Inspect and update the signed-in user.")


def _render_user(user: User) -> None:
    table = Table(show_header=False, box=None)
    table.add_column("field", style="bold")
    table.add_column("value")
    table.add_row("id", user.id or "-")
    table.add_row("email", user.email or "-")
    table.add_row("aud", user.aud or "-")
    table.add_row("role", user.role or "-")
    table.add_row("confirmed", format_timestamp(user.confirmed_at))
    table.add_row("last sign in", format_timestamp(user.last_sign_in_at))
    table.add_row("created", format_timestamp(user.created_at))
    table.add_row("updated", format_timestamp(user.updated_at))
    console.print(table)


@app.command("show")
def show_user(
    ctx: typer.Context,
    token: str | None = typer.Option(None, "--token", help="JWT (defaults to the stored one)."),
    json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    jwt = require_token(ctx, cfg, token)
    user = call(client_for(ctx, cfg), "Fetching user", lambda c: c.get_user(jwt))
    if json_out:
        console.print_json(user.raw)
        return
    _render_user(user)


@app.command("update")
def update_user(
    ctx: typer.Context,
    email: str | None = typer.Option(None, "--email", help="New email address."),
    password: str | None = typer.Option(None, "--password", hide_input=True, help="New password."),
    data: str | None = typer.Option(None, "--data", help="User metadata as a JSON object."),
    token: str | None = typer.Option(None, "--token", help="JWT (defaults to the stored one)."),
):
    info: dict = {}
    if email:
        info["email"] = email
    if password:
        info["password"] = password
    parsed = parse_data_option(data)
    if parsed is not None:
        info["data"] = parsed
    if not info:
        console.err("Nothing to update. Pass --email, --password or --data.")
        raise typer.Exit(code=2)

    cfg = load_config()
    jwt = require_token(ctx, cfg, token)
    user = call(client_for(ctx, cfg), "Update", lambda c: c.update_user(jwt, info))
    console.ok("User updated.")
    _render_user(user)
