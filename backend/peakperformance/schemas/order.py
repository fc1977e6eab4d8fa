"""
Request bodies for /api/pedidos.

The update body has no `id_venta`: the sale an order was billed under is
set once on create, so it is declared only on `OrderCreate`.
"""

from typing import ClassVar, Tuple

from peakperformance.schemas.common import ResourcePayload, Scalar


class OrderUpdate(ResourcePayload):
    id_usuario: Scalar = None
    id_producto: Scalar = None
    fecha_pedido: Scalar = None
    estado_pedido: Scalar = None
    cantidad: Scalar = None
    tiempo_entrega_estimado: Scalar = None
    detalles_pedido: Scalar = None
    resumen_pedido: Scalar = None
    total_pagar: Scalar = None


class OrderCreate(OrderUpdate):
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = (
        "id_pedido",
        "id_usuario",
        "id_producto",
        "id_venta",
        "fecha_pedido",
        "estado_pedido",
        "cantidad",
        "tiempo_entrega_estimado",
        "detalles_pedido",
        "total_pagar",
    )

    id_pedido: Scalar = None
    id_venta: Scalar = None
