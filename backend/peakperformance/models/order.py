"""
PeakPerformance Backend — Order SQLAlchemy Model
==================================================

What:  ORM model for the `pedidos` table.
Why:   The widest table in the schema; an order ties together a user, a
       product and the sale it was billed under.

Note:
    `id_venta` is fixed at creation. The update handler does not write it,
    so an order cannot be moved to another sale.
"""

from typing import Optional

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from peakperformance.database import Base


class Order(Base):
    __tablename__ = "pedidos"

    id_pedido: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    id_usuario: Mapped[Optional[int]] = mapped_column(Integer)
    id_producto: Mapped[Optional[int]] = mapped_column(Integer)
    id_venta: Mapped[Optional[int]] = mapped_column(Integer)
    fecha_pedido: Mapped[Optional[str]] = mapped_column(String(30))
    estado_pedido: Mapped[Optional[str]] = mapped_column(String(30))
    cantidad: Mapped[Optional[int]] = mapped_column(Integer)
    tiempo_entrega_estimado: Mapped[Optional[str]] = mapped_column(String(50))
    detalles_pedido: Mapped[Optional[str]] = mapped_column(Text)
    resumen_pedido: Mapped[Optional[str]] = mapped_column(Text)
    total_pagar: Mapped[Optional[float]] = mapped_column(Numeric(10, 2, asdecimal=False))

    def __repr__(self) -> str:
        return (
            f"<Order(id_pedido={self.id_pedido}, id_usuario={self.id_usuario}, "
            f"estado='{self.estado_pedido}')>"
        )
