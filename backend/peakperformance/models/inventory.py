"""
PeakPerformance Backend — Inventory SQLAlchemy Model
======================================================

What:  ORM model for the `inventario` table: stock on hand per product.
"""

from typing import Optional

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from peakperformance.database import Base


class Inventory(Base):
    """Available quantity of one product, with its low-stock alert threshold."""

    __tablename__ = "inventario"

    id_inventario: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    id_producto: Mapped[Optional[int]] = mapped_column(Integer)
    cantidad_disponible: Mapped[Optional[float]] = mapped_column(Numeric(10, 2, asdecimal=False))
    unidad_medida: Mapped[Optional[str]] = mapped_column(String(30))
    fecha_actualizacion: Mapped[Optional[str]] = mapped_column(String(30))
    alerta_stock: Mapped[Optional[int]] = mapped_column(Integer)

    def __repr__(self) -> str:
        return f"<Inventory(id_inventario={self.id_inventario}, id_producto={self.id_producto})>"
