from __future__ import annotations

__all__ = [
    "__version__",
    "ApiError",
    "ConfigurationError",
    "Core",
    "DispatchError",
    "ENDPOINTS",
    "Endpoint",
    "MissingBodyError",
    "MissingParameterError",
    "Result",
    "ScorecardClient",
    "ScorecardError",
    "UnknownEndpointError",
    "uptime",
]

__version__ = "1.0.0"

from . import uptime  # noqa: E402
from .client import ENDPOINTS, ScorecardClient  # noqa: E402
from .core import Core  # noqa: E402
from .endpoints import Endpoint  # noqa: E402
from .errors import (  # noqa: E402
    ApiError,
    ConfigurationError,
    DispatchError,
    MissingBodyError,
    MissingParameterError,
    ScorecardError,
    UnknownEndpointError,
)
from .responses import Result  # noqa: E402
