"""
PeakPerformance Backend — Inventory Report SQLAlchemy Model
=============================================================

What:  ORM model for the `informe_inventario` table: free-text reports
       written against an inventory row.
"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from peakperformance.database import Base


class InventoryReport(Base):
    __tablename__ = "informe_inventario"

    id_informe: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    id_inventario: Mapped[Optional[int]] = mapped_column(Integer)
    fecha_informe: Mapped[Optional[str]] = mapped_column(String(30))
    descripcion_informe: Mapped[Optional[str]] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<InventoryReport(id_informe={self.id_informe}, id_inventario={self.id_inventario})>"
