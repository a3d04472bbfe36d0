from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Credentials:
    email: str
    password: str
    data: dict[str, Any] | None = None
    provider: str | None = None
    audience: str | None = None

    @staticmethod
    def coerce(value: "Credentials | Mapping[str, Any]") -> "Credentials":
        """Build credentials from a mapping, ignoring keys the service does not accept."""
        if isinstance(value, Credentials):
            return value
        data = value.get("data")
        return Credentials(
            email=str(value.get("email") or ""),
            password=str(value.get("password") or ""),
            data=dict(data) if isinstance(data, Mapping) else None,
            provider=value.get("provider"),
            audience=value.get("audience"),
        )

    def to_signup_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"email": self.email, "password": self.password}
        if self.data is not None:
            payload["data"] = self.data
        if self.provider is not None:
            payload["provider"] = self.provider
        # the service names the audience "aud"
        payload["aud"] = self.audience
        return payload

    def to_token_payload(self) -> dict[str, Any]:
        return {"email": self.email, "password": self.password}


@dataclass(frozen=True)
class Invitation:
    email: str
    data: dict[str, Any] | None = None

    @staticmethod
    def coerce(value: "Invitation | Mapping[str, Any]") -> "Invitation":
        if isinstance(value, Invitation):
            return value
        data = value.get("data")
        return Invitation(
            email=str(value.get("email") or ""),
            data=dict(data) if isinstance(data, Mapping) else None,
        )

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"email": self.email}
        if self.data is not None:
            payload["data"] = self.data
        return payload


@dataclass(frozen=True)
class User:
    id: str | None = None
    aud: str | None = None
    role: str | None = None
    email: str | None = None
    confirmed_at: str | None = None
    invited_at: str | None = None
    last_sign_in_at: str | None = None
    app_metadata: dict[str, Any] = field(default_factory=dict)
    user_metadata: dict[str, Any] = field(default_factory=dict)
    created_at: str | None = None
    updated_at: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @staticmethod
    def from_payload(payload: Any) -> "User":
        if not isinstance(payload, dict):
            return User()

        def _text(key: str) -> str | None:
            value = payload.get(key)
            return str(value) if value is not None else None

        def _mapping(key: str) -> dict[str, Any]:
            value = payload.get(key)
            return dict(value) if isinstance(value, dict) else {}

        return User(
            id=_text("id"),
            aud=_text("aud"),
            role=_text("role"),
            email=_text("email"),
            confirmed_at=_text("confirmed_at"),
            invited_at=_text("invited_at"),
            last_sign_in_at=_text("last_sign_in_at"),
            app_metadata=_mapping("app_metadata"),
            user_metadata=_mapping("user_metadata"),
            created_at=_text("created_at"),
            updated_at=_text("updated_at"),
            raw=dict(payload),
        )
