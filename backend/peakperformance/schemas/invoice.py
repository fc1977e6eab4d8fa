"""Request bodies for /api/facturacion."""

from typing import ClassVar, Tuple

from peakperformance.schemas.common import ResourcePayload, Scalar


class InvoiceUpdate(ResourcePayload):
    id_venta: Scalar = None
    fecha_factura: Scalar = None
    metodo_pago: Scalar = None
    descuentos: Scalar = None
    impuestos: Scalar = None
    tipos_factura: Scalar = None


class InvoiceCreate(InvoiceUpdate):
    # descuentos may be omitted: an invoice without discounts is valid
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = (
        "id_factura",
        "id_venta",
        "fecha_factura",
        "metodo_pago",
        "impuestos",
        "tipos_factura",
    )

    id_factura: Scalar = None
