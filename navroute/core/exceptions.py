from __future__ import annotations


class AppError(Exception):
    """Base app error."""


class RoutingRequestError(AppError):
    """Raised when a routing backend cannot be reached or answers with an error."""


class RouteParseError(AppError):
    """Raised when a routing response has no usable trip."""


class UnknownRoutingModeError(AppError, ValueError):
    """Raised when a routing mode / costing name is not recognised."""
