"""
PeakPerformance Backend — Product SQLAlchemy Model
====================================================

What:  ORM model for the `productos` table (the menu/catalogue).
Who:   Referenced by inventory rows and orders through `id_producto`.
"""

from typing import Optional

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from peakperformance.database import Base


class Product(Base):
    """A sellable product with its price and preparation time."""

    __tablename__ = "productos"

    id_producto: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    nombre_productos: Mapped[Optional[str]] = mapped_column(String(100))
    descripcion_productos: Mapped[Optional[str]] = mapped_column(Text)
    # asdecimal=False: JSON responses carry plain numbers, not Decimal strings
    precio_producto: Mapped[Optional[float]] = mapped_column(Numeric(10, 2, asdecimal=False))
    tiempo_preparacion: Mapped[Optional[str]] = mapped_column(String(50))
    categoria: Mapped[Optional[str]] = mapped_column(String(50))

    def __repr__(self) -> str:
        return f"<Product(id_producto={self.id_producto}, nombre='{self.nombre_productos}')>"
