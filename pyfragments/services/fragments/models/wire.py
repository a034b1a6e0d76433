"""
Wire models for /v1/fragments responses.

  GET    /v1/fragments?expand=1  -> {"status": "ok", "fragments": [id | record, ...]}
  POST   /v1/fragments           -> {"status": "ok", "fragment": record}
  PUT    /v1/fragments/{id}      -> {"status": "ok", "fragment": record}
  DELETE /v1/fragments/{id}      -> {"status": "ok"}
  GET    /                       -> {"status": "ok", ...}
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, List, Optional, Union

from pydantic import AfterValidator, Field

from ._base import WireModel


def _as_utc(v: Optional[datetime]) -> Optional[datetime]:
    if v is not None and v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v


UtcDateTime = Annotated[Optional[datetime], AfterValidator(_as_utc)]


class FragmentRecord(WireModel):
    id: str
    owner_id: Optional[str] = None
    type: Optional[str] = None
    size: Optional[int] = None
    created: UtcDateTime = None
    updated: UtcDateTime = None


class FragmentListResponse(WireModel):
    status: Optional[str] = None
    fragments: List[Union[FragmentRecord, str]] = Field(...)


class FragmentEnvelope(WireModel):
    status: Optional[str] = None
    fragment: FragmentRecord


class StatusResponse(WireModel):
    status: str
