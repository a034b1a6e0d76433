"""
Client configuration.

A ``ClientConfig`` is handed to each client explicitly, so several clients
pointing at different servers can live side by side.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_API_URL = "http://localhost:8080"


class ConversionPolicy(str, Enum):
    """How ``read_as`` treats targets missing from the conversion catalog."""

    PASSTHROUGH = "passthrough"
    STRICT = "strict"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_API_URL

    # PASSTHROUGH lets the server decide on any conversion request;
    # STRICT rejects out-of-catalog targets before a request is made.
    conversion_policy: ConversionPolicy = ConversionPolicy.PASSTHROUGH

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        object.__setattr__(
            self, "conversion_policy", ConversionPolicy(self.conversion_policy)
        )

    @classmethod
    def from_env(cls, base_url: Optional[str] = None) -> "ClientConfig":
        """
        Build a config from the environment.

        PYFRAGMENTS_API_URL: server root (default http://localhost:8080)
        PYFRAGMENTS_CONVERSION_POLICY: passthrough|strict
        An explicit ``base_url`` wins over the environment.
        """
        policy = (
            (os.getenv("PYFRAGMENTS_CONVERSION_POLICY") or "passthrough")
            .strip()
            .lower()
        )
        return cls(
            base_url=base_url or os.getenv("PYFRAGMENTS_API_URL") or DEFAULT_API_URL,
            conversion_policy=ConversionPolicy(policy),
        )
