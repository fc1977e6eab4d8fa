"""Request bodies for /api/notificacion."""

from typing import ClassVar, Tuple

from peakperformance.schemas.common import ResourcePayload, Scalar


class NotificationUpdate(ResourcePayload):
    id_usuario: Scalar = None
    id_pedido: Scalar = None
    mensaje_notificacion: Scalar = None
    fecha_notificacion: Scalar = None
    estado_notificacion: Scalar = None
    destinatario: Scalar = None


class NotificationCreate(NotificationUpdate):
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = (
        "id_notificacion",
        "id_usuario",
        "id_pedido",
        "mensaje_notificacion",
        "fecha_notificacion",
        "estado_notificacion",
        "destinatario",
    )

    id_notificacion: Scalar = None
