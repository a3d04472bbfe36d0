__version__ = "0.1.0"

from .client import GoTrueClient
from .config_types import ClientConfig
from .errors import ApiError, AuthError, GoTrueClientError, NetworkError
from .models import Credentials, Invitation, User
from .results import Err, Ok, Result, ServiceError

__all__ = [
    "GoTrueClient",
    "ClientConfig",
    "ApiError",
    "AuthError",
    "GoTrueClientError",
    "NetworkError",
    "Credentials",
    "Invitation",
    "User",
    "Ok",
    "Err",
    "Result",
    "ServiceError",
]
