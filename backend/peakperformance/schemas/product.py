"""Request bodies for /api/productos."""

from typing import ClassVar, Tuple

from peakperformance.schemas.common import ResourcePayload, Scalar


class ProductUpdate(ResourcePayload):
    nombre_productos: Scalar = None
    descripcion_productos: Scalar = None
    precio_producto: Scalar = None
    tiempo_preparacion: Scalar = None
    categoria: Scalar = None


class ProductCreate(ProductUpdate):
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = (
        "id_producto",
        "nombre_productos",
        "descripcion_productos",
        "precio_producto",
        "tiempo_preparacion",
        "categoria",
    )

    id_producto: Scalar = None
