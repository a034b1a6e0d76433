from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict

from pyfragments.utils import underscore_to_camelcase


def _env_extra_mode() -> str:
    """PYFRAGMENTS_EXTRA: allow|forbid|ignore, anything else means allow."""
    raw = (os.getenv("PYFRAGMENTS_EXTRA") or "").strip().lower()
    return raw if raw in {"forbid", "ignore"} else "allow"


class WireModel(BaseModel):
    """
    Base for models parsed from server responses.

    Field names are snake_case with camelCase aliases. Unknown fields are
    kept by default; tighten at runtime before import with
      export PYFRAGMENTS_EXTRA=forbid
    """

    model_config = ConfigDict(
        extra=_env_extra_mode(),
        alias_generator=underscore_to_camelcase,
        populate_by_name=True,
    )


__all__ = ["WireModel", "_env_extra_mode"]
