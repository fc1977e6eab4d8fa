"""
PeakPerformance Backend — User SQLAlchemy Model
=================================================

What:  ORM model for the `usuarios` table.
Why:   The only table holding a secret. The `contraseña` column stores a
       bcrypt digest (60 chars); plaintext never reaches this model.

Column naming:
    The Python attribute is `password`; the database column keeps its
    original name `contraseña`. Services address columns by database name,
    so the wire format and the table stay in sync.
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from peakperformance.database import Base


class User(Base):
    __tablename__ = "usuarios"

    id_usuario: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    nombre_usuario: Mapped[Optional[str]] = mapped_column(String(100))
    apellido_usuario: Mapped[Optional[str]] = mapped_column(String(100))
    estado: Mapped[Optional[str]] = mapped_column(String(30))
    password: Mapped[Optional[str]] = mapped_column("contraseña", String(255))
    correo_electronico: Mapped[Optional[str]] = mapped_column(String(150))
    telefono: Mapped[Optional[str]] = mapped_column(String(30))
    fecha_creacion: Mapped[Optional[str]] = mapped_column(String(30))
    fecha_modificacion: Mapped[Optional[str]] = mapped_column(String(30))

    def __repr__(self) -> str:
        # Never include the digest
        return f"<User(id_usuario={self.id_usuario}, correo='{self.correo_electronico}')>"
