from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .models import User
from .results import Err, Ok, Result, ServiceError


@dataclass(frozen=True)
class RawResponse:
    status: int
    body: Any = None


def default_handler(_response: RawResponse) -> None:
    return None


def body_handler(response: RawResponse) -> Any:
    return response.body


def user_handler(response: RawResponse) -> User:
    return User.from_payload(response.body)


def format_error(response: RawResponse) -> ServiceError:
    body = response.body
    message = body.get("msg") if isinstance(body, dict) else None
    return ServiceError(
        code=response.status,
        message=message,
        body=body,
    )


def normalize(
        response: RawResponse,
        expected_status: int = 200,
        transform: Callable[[RawResponse], Any] = default_handler,
) -> Result:
    """Map a raw response to ``Ok(transform(response))`` or ``Err(ServiceError)``.

    Only an exact match with ``expected_status`` counts as success, so a 200
    from an endpoint that answers 204 is an error. ``transform`` runs on the
    success path only.
    """
    if response.status == expected_status:
        return Ok(transform(response))
    return Err(format_error(response))
