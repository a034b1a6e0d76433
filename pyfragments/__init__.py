"""Client library for a remote fragments store."""

from pyfragments.auth import AuthContext, BearerTokenAuth
from pyfragments.config import ClientConfig, ConversionPolicy
from pyfragments.services.fragments import AsyncFragmentClient, FragmentClient

__version__ = "0.1.0"

__all__ = [
    "AsyncFragmentClient",
    "AuthContext",
    "BearerTokenAuth",
    "ClientConfig",
    "ConversionPolicy",
    "FragmentClient",
]
