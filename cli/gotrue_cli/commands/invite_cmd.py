from __future__ import annotations

import typer

from gotrue_client import Invitation

from .. import console
from ..config import load_config
from ..http import call, client_for, parse_data_option


def invite_user(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Email address to invite."),
    data: str | None = typer.Option(None, "--data", help="User metadata as a JSON object."),
):
    """Invite a new user. Requires a service-role access token."""
    cfg = load_config()
    invitation = Invitation(email=email, data=parse_data_option(data))
    user = call(client_for(ctx, cfg), "Invite", lambda c: c.invite(invitation))
    console.ok(f"Invitation sent to {user.email or email}.")
    if user.id:
        console.info(f"User id: {user.id}")
