"""
PeakPerformance Backend — Notification SQLAlchemy Model
=========================================================

What:  ORM model for the `notificacion` table: messages sent to a user
       about one of their orders.
"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from peakperformance.database import Base


class Notification(Base):
    __tablename__ = "notificacion"

    id_notificacion: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    id_usuario: Mapped[Optional[int]] = mapped_column(Integer)
    id_pedido: Mapped[Optional[int]] = mapped_column(Integer)
    mensaje_notificacion: Mapped[Optional[str]] = mapped_column(Text)
    fecha_notificacion: Mapped[Optional[str]] = mapped_column(String(30))
    estado_notificacion: Mapped[Optional[str]] = mapped_column(String(30))
    destinatario: Mapped[Optional[str]] = mapped_column(String(100))

    def __repr__(self) -> str:
        return f"<Notification(id_notificacion={self.id_notificacion}, id_usuario={self.id_usuario})>"
