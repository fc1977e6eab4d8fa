"""
PeakPerformance Backend — Sale SQLAlchemy Model
=================================================

What:  ORM model for the `venta` table: a closed sale and the waiter's commission.
"""

from typing import Optional

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from peakperformance.database import Base


class Sale(Base):
    __tablename__ = "venta"

    id_venta: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    id_usuario: Mapped[Optional[int]] = mapped_column(Integer)
    fecha_venta: Mapped[Optional[str]] = mapped_column(String(30))
    total_venta: Mapped[Optional[float]] = mapped_column(Numeric(10, 2, asdecimal=False))
    comision: Mapped[Optional[float]] = mapped_column(Numeric(10, 2, asdecimal=False))
    mesero_encargado: Mapped[Optional[str]] = mapped_column(String(100))

    def __repr__(self) -> str:
        return f"<Sale(id_venta={self.id_venta}, total_venta={self.total_venta})>"
