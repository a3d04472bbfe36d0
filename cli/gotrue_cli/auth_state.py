from __future__ import annotations

from dataclasses import dataclass

from gotrue_client import Err, NetworkError

from .config import apply_profile, load_config, resolve_access_token
from .http import make_client


@dataclass
class AuthContext:
    state: str
    email: str | None = None
    role: str | None = None


def resolve_auth_context(
        check_remote: bool = True,
        *,
        profile: str | None = None,
        base_url: str | None = None,
) -> AuthContext:
    cfg = apply_profile(load_config(), profile)
    token = resolve_access_token(cfg)
    if not token:
        return AuthContext(state="no_token")
    if not check_remote:
        return AuthContext(state="token_present")

    client = make_client(cfg, profile=None, base_url_override=base_url)
    try:
        result = client.get_user(token)
    except NetworkError:
        return AuthContext(state="unreachable")
    finally:
        client.close()

    if isinstance(result, Err):
        if result.error.code in (401, 403):
            return AuthContext(state="invalid_token")
        return AuthContext(state="unreachable")
    user = result.value
    return AuthContext(state="authed", email=user.email, role=user.role)
