"""
PeakPerformance Backend — Shared Pydantic Schemas
===================================================

What:  Base payload model, scalar field type, and the response envelopes
       every resource shares.
Why:   The nine resources differ only in field names; validation rules and
       response shapes are identical.

Design Decision:
    Every payload field is declared optional at the Pydantic level. The
    required-field rule on create is a truthiness check (missing, null, "",
    0 and false are all "absent") that answers 400 with a resource-specific
    message. Letting Pydantic enforce presence would answer 422 with
    FastAPI's generic error list instead.
"""

from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

# Wire values are strings, numbers or null; nested objects are rejected (422)
Scalar = Optional[Union[int, float, str]]


class ResourcePayload(BaseModel):
    """
    Base class for create/update request bodies.

    Subclasses declare their fields as `Scalar = None` and, for create
    payloads, list the fields that must be truthy in `REQUIRED_FIELDS`.
    Unknown keys (including the identity on update) are dropped.
    """

    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ()

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def missing_required(self) -> List[str]:
        """Names of required fields that are absent or falsy, in REQUIRED_FIELDS order."""
        data = self.model_dump(by_alias=True)
        return [name for name in self.REQUIRED_FIELDS if not data.get(name)]

    def all_fields(self) -> Dict[str, Any]:
        """Every declared field keyed by column name; unset fields are None."""
        return self.model_dump(by_alias=True)

    def submitted_fields(self) -> Dict[str, Any]:
        """Only the fields the client actually sent, keyed by column name."""
        return self.model_dump(by_alias=True, exclude_unset=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """Returned by successful PUT and DELETE calls."""
    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    What:  Error body for every 400/404/500 response.
    Why:   Existing clients read a single `error` key holding the message.

    Example:
        {"error": "inventario no encontrada"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
