"""Request bodies for /api/informe_inventario."""

from typing import ClassVar, Tuple

from peakperformance.schemas.common import ResourcePayload, Scalar


class InventoryReportUpdate(ResourcePayload):
    id_inventario: Scalar = None
    fecha_informe: Scalar = None
    descripcion_informe: Scalar = None


class InventoryReportCreate(InventoryReportUpdate):
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = (
        "id_informe",
        "id_inventario",
        "fecha_informe",
        "descripcion_informe",
    )

    id_informe: Scalar = None
