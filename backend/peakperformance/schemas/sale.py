"""Request bodies for /api/venta."""

from typing import ClassVar, Tuple

from peakperformance.schemas.common import ResourcePayload, Scalar


class SaleUpdate(ResourcePayload):
    id_usuario: Scalar = None
    fecha_venta: Scalar = None
    total_venta: Scalar = None
    comision: Scalar = None
    mesero_encargado: Scalar = None


class SaleCreate(SaleUpdate):
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = (
        "id_venta",
        "id_usuario",
        "fecha_venta",
        "total_venta",
        "comision",
        "mesero_encargado",
    )

    id_venta: Scalar = None
