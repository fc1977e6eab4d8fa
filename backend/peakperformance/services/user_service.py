"""
PeakPerformance Backend — User Service
========================================

What:  The users resource: generic CRUD plus credential hashing.
Why:   `usuarios.contraseña` must never be stored or echoed in plaintext.
How:   Overrides the ResourceService hooks:
       - prepare_insert: hash the credential before INSERT
       - prepare_update: hash it only when the body carries a new one
       - created_response: drop `contraseña`, expose the digest as `passHash`

Update behaviour:
    A PUT without `contraseña` (or with an empty one) leaves the stored digest
    untouched. Re-hashing a missing value would replace a valid credential
    with the digest of an empty string.
"""

import logging
from typing import Any, Dict

from peakperformance.schemas.common import ResourcePayload
from peakperformance.security import PasswordHasher
from peakperformance.services.resource_service import ResourceService

logger = logging.getLogger(__name__)

CREDENTIAL_FIELD = "contraseña"
DIGEST_RESPONSE_FIELD = "passHash"


class UserService(ResourceService):
    """ResourceService for `usuarios` with an injected password hasher."""

    def __init__(self, *args, hasher: PasswordHasher, **kwargs):
        super().__init__(*args, **kwargs)
        self.hasher = hasher

    async def prepare_insert(self, values: Dict[str, Any]) -> Dict[str, Any]:
        # The required-field check already guaranteed a non-empty credential
        values = dict(values)
        values[CREDENTIAL_FIELD] = await self.hasher.hash(values[CREDENTIAL_FIELD])
        return values

    async def prepare_update(self, values: Dict[str, Any]) -> Dict[str, Any]:
        values = dict(values)
        credential = values.pop(CREDENTIAL_FIELD, None)
        if credential:
            values[CREDENTIAL_FIELD] = await self.hasher.hash(credential)
        elif credential is not None:
            logger.debug("Ignoring empty credential in user update")
        return values

    def created_response(
        self,
        identity: Any,
        payload: ResourcePayload,
        values: Dict[str, Any],
    ) -> Dict[str, Any]:
        body = super().created_response(identity, payload, values)
        body.pop(CREDENTIAL_FIELD, None)
        body[DIGEST_RESPONSE_FIELD] = values[CREDENTIAL_FIELD]
        return body
