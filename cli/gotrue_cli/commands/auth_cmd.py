from __future__ import annotations

from typing import Any

import typer

from gotrue_client import Credentials

from .. import console
from ..auth_state import resolve_auth_context
from ..config import AppConfig, load_config, save_config
from ..http import call, client_for, parse_data_option, require_token, token_fields

app = typer.Typer(help="Sign up, sign in and manage the stored session.")


def _store_session(cfg: AppConfig, payload: Any) -> str | None:
    access_token, refresh_token = token_fields(payload)
    if not access_token:
        return None
    cfg.auth.access_token = access_token
    if refresh_token:
        cfg.auth.refresh_token = refresh_token
    if isinstance(payload, dict) and payload.get("token_type"):
        cfg.auth.token_type = str(payload["token_type"])
    return save_config(cfg)


@app.command("signup")
def signup(
    ctx: typer.Context,
    email: str = typer.Option(..., "--email", prompt=True, help="Email address."),
    password: str = typer.Option(
        ..., "--password", prompt=True, hide_input=True, confirmation_prompt=True, help="Password."
    ),
    data: str | None = typer.Option(None, "--data", help="User metadata as a JSON object."),
    provider: str | None = typer.Option(None, "--provider", help="Signup provider."),
    audience: str | None = typer.Option(None, "--audience", help="Audience (aud) for the new user."),
):
    cfg = load_config()
    creds = Credentials(
        email=email,
        password=password,
        data=parse_data_option(data),
        provider=provider,
        audience=audience,
    )
    user = call(client_for(ctx, cfg), "Signup", lambda c: c.sign_up(creds))
    console.ok(f"Signed up {email}.")
    if isinstance(user, dict) and not user.get("confirmed_at"):
        console.info("Check your inbox to confirm the address.")


@app.command("login")
def login(
    ctx: typer.Context,
    email: str = typer.Option(..., "--email", prompt=True, help="Email address."),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True, help="Password."),
):
    cfg = load_config()
    creds = Credentials(email=email, password=password)
    payload = call(client_for(ctx, cfg), "Login", lambda c: c.sign_in(creds))
    save_path = _store_session(cfg, payload)
    if save_path is None:
        console.err("Login returned no access token.")
        raise typer.Exit(code=2)
    console.ok(f"Login successful. Token saved to {save_path}.")


@app.command("refresh")
def refresh(
    ctx: typer.Context,
    refresh_token: str | None = typer.Option(
        None, "--refresh-token", help="Refresh token (defaults to the stored one)."
    ),
):
    cfg = load_config()
    token = (refresh_token or cfg.auth.refresh_token).strip()
    if not token:
        console.err("No refresh token stored. Run: gotrue auth login")
        raise typer.Exit(code=2)
    payload = call(client_for(ctx, cfg), "Refresh", lambda c: c.refresh_access_token(token))
    save_path = _store_session(cfg, payload)
    if save_path is None:
        console.err("Refresh returned no access token.")
        raise typer.Exit(code=2)
    console.ok(f"Access token refreshed. Saved to {save_path}.")


@app.command("logout", help="Revoke the session on the server and clear stored tokens.")
def logout(
    ctx: typer.Context,
    token: str | None = typer.Option(None, "--token", help="JWT to sign out (defaults to the stored one)."),
):
    cfg = load_config()
    jwt = require_token(ctx, cfg, token)
    call(client_for(ctx, cfg), "Logout", lambda c: c.sign_out(jwt))
    if jwt != cfg.auth.access_token.strip():
        console.ok("Signed out. Stored session left unchanged.")
        return
    cfg.auth.access_token = ""
    cfg.auth.refresh_token = ""
    save_path = save_config(cfg)
    console.ok(f"Signed out. Tokens cleared from {save_path}.")


@app.command("recover")
def recover(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Email address of the account."),
):
    cfg = load_config()
    call(client_for(ctx, cfg), "Recovery", lambda c: c.recover(email))
    console.ok(f"Recovery email sent to {email}.")


@app.command("magic-link")
def magic_link(
    ctx: typer.Context,
    email: str = typer.Argument(..., help="Email address to send the link to."),
):
    cfg = load_config()
    call(client_for(ctx, cfg), "Magic link", lambda c: c.send_magic_link(email))
    console.ok(f"Magic link sent to {email}.")


@app.command("provider-url")
def provider_url(
    ctx: typer.Context,
    provider: str = typer.Argument(..., help="OAuth2 provider name, e.g. github."),
):
    cfg = load_config()
    client = client_for(ctx, cfg)
    try:
        console.print(client.url_for_provider(provider), soft_wrap=True)
    finally:
        client.close()


@app.command("status")
def status(ctx: typer.Context):
    opts = ctx.obj if isinstance(ctx.obj, dict) else {}
    auth = resolve_auth_context(profile=opts.get("profile"), base_url=opts.get("base_url"))
    if auth.state == "authed":
        console.ok(f"Signed in as {auth.email or '-'} (role: {auth.role or '-'}).")
        return
    messages = {
        "no_token": "Not signed in.",
        "invalid_token": "Stored token was rejected. Run: gotrue auth refresh",
        "unreachable": "Server unreachable; cannot verify the stored token.",
    }
    console.warn(messages.get(auth.state, auth.state))
    raise typer.Exit(code=1)
