"""
PeakPerformance Backend — Satisfaction Survey SQLAlchemy Model
================================================================

What:  ORM model for the `encuesta_satisfaccion` table: a customer's rating
       and comments for one order.
"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from peakperformance.database import Base


class Survey(Base):
    __tablename__ = "encuesta_satisfaccion"

    id_encuesta: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    id_usuario: Mapped[Optional[int]] = mapped_column(Integer)
    # Fixed at creation; a survey always belongs to the order it was filed for
    id_pedido: Mapped[Optional[int]] = mapped_column(Integer)
    puntuacion: Mapped[Optional[int]] = mapped_column(Integer)
    comentarios: Mapped[Optional[str]] = mapped_column(Text)
    fecha_encuesta: Mapped[Optional[str]] = mapped_column(String(30))

    def __repr__(self) -> str:
        return f"<Survey(id_encuesta={self.id_encuesta}, puntuacion={self.puntuacion})>"
