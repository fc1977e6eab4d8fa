"""Request bodies for /api/inventario."""

from typing import ClassVar, Tuple

from peakperformance.schemas.common import ResourcePayload, Scalar


class InventoryUpdate(ResourcePayload):
    id_producto: Scalar = None
    cantidad_disponible: Scalar = None
    unidad_medida: Scalar = None
    fecha_actualizacion: Scalar = None
    alerta_stock: Scalar = None


class InventoryCreate(InventoryUpdate):
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = (
        "id_inventario",
        "id_producto",
        "cantidad_disponible",
        "unidad_medida",
        "fecha_actualizacion",
        "alerta_stock",
    )

    id_inventario: Scalar = None
