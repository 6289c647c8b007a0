# -*- coding: utf-8 -*-
"""
PropertyHub Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "PropertyHubApiClient",
    "HttpSubmissionGateway",
    "SubmissionGateway",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "PropertyHubApiClient":
        from .api_client import PropertyHubApiClient
        return PropertyHubApiClient
    elif name in ("HttpSubmissionGateway", "SubmissionGateway"):
        from . import submission_gateway
        return getattr(submission_gateway, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
