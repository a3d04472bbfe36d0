from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..http import call, client_for


def show_server_settings(ctx: typer.Context):
    """Show the server's environment settings (enabled providers, signup state)."""
    cfg = load_config()
    data = call(client_for(ctx, cfg), "Fetching settings", lambda c: c.settings())
    console.print_json(data)
