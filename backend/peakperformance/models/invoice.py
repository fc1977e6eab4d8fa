"""
PeakPerformance Backend — Invoice SQLAlchemy Model
====================================================

What:  ORM model for the `facturacion` table: one invoice per sale.
"""

from typing import Optional

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from peakperformance.database import Base


class Invoice(Base):
    """Invoice issued for a sale, with payment method, discounts and taxes."""

    __tablename__ = "facturacion"

    id_factura: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    id_venta: Mapped[Optional[int]] = mapped_column(Integer)
    fecha_factura: Mapped[Optional[str]] = mapped_column(String(30))
    metodo_pago: Mapped[Optional[str]] = mapped_column(String(50))
    # Discounts are optional on create; NULL means none were applied
    descuentos: Mapped[Optional[float]] = mapped_column(Numeric(10, 2, asdecimal=False))
    impuestos: Mapped[Optional[float]] = mapped_column(Numeric(10, 2, asdecimal=False))
    tipos_factura: Mapped[Optional[str]] = mapped_column(String(50))

    def __repr__(self) -> str:
        return f"<Invoice(id_factura={self.id_factura}, id_venta={self.id_venta})>"
