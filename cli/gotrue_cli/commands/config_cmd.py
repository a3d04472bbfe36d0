from __future__ import annotations

import os

import typer

from .. import console
from ..config import config_path, default_config, load_config, normalize_base_url, save_config
from ..formatting import mask_token

app = typer.Typer(help="Manage local CLI config (~/.config/gotrue/config.toml).")


@app.command("init")
def init_config(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        base_url: str = typer.Option(
            ...,
            "--base-url",
            prompt="GoTrue base URL",
            help="GoTrue base URL like http://localhost:9999",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.base_url = normalize_base_url(base_url, warn=True)
    if not cfg.base_url:
        console.err("Base URL cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_config():
    cfg = load_config()
    console.print(
        f"base_url={cfg.base_url} access_token={mask_token(cfg.auth.access_token)} "
        f"refresh_token={mask_token(cfg.auth.refresh_token)} token_type={cfg.auth.token_type}"
    )
    for name, prof in sorted(cfg.profiles.items()):
        console.print(f"profile {name}: base_url={prof.base_url or '-'} access_token={mask_token(prof.access_token)}")


@app.command("get")
def get_config_value(
        key: str = typer.Argument(..., help="Config key (base_url, token_type)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "base_url":
        console.print(cfg.base_url)
        return
    if k == "token_type":
        console.print(cfg.auth.token_type)
        return
    console.err(f"Unknown setting: {key}")
    raise typer.Exit(code=2)


@app.command("set")
def set_config_value(
        base_url: str | None = typer.Option(None, "--base-url", help="Set GoTrue base URL."),
        access_token: str | None = typer.Option(None, "--access-token", help="Set default access token."),
):
    cfg = load_config()
    if base_url is not None:
        cfg.base_url = normalize_base_url(base_url, warn=True)
    if access_token is not None:
        cfg.auth.access_token = access_token.strip()
    saved = save_config(cfg)
    console.ok(f"Config updated: {saved}")
