"""
PeakPerformance Backend — Pydantic Request/Response Schemas
=============================================================

What:  One module per resource with its create and update bodies, plus the
       shared envelopes in `common`.
Why:   Schemas are the API contract; SQLAlchemy models are the table layout.
       They share names but change for different reasons.

Every `<Resource>Create` extends `<Resource>Update` with the identity field
(and any create-only columns), so the updatable subset is exactly the update
schema's field list.
"""

from peakperformance.schemas.common import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    ResourcePayload,
    Scalar,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "ResourcePayload",
    "Scalar",
]
