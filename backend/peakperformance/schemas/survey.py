"""
Request bodies for /api/satisfaccion.

`id_pedido` is create-only: a survey stays attached to the order it rates.
"""

from typing import ClassVar, Tuple

from peakperformance.schemas.common import ResourcePayload, Scalar


class SurveyUpdate(ResourcePayload):
    id_usuario: Scalar = None
    puntuacion: Scalar = None
    comentarios: Scalar = None
    fecha_encuesta: Scalar = None


class SurveyCreate(SurveyUpdate):
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = (
        "id_encuesta",
        "id_usuario",
        "id_pedido",
        "puntuacion",
        "comentarios",
        "fecha_encuesta",
    )

    id_encuesta: Scalar = None
    id_pedido: Scalar = None
