"""
Request bodies for /api/usuarios.

The credential travels as `contraseña` on the wire. It is exposed in Python
as `password` (alias `contraseña`); dumps use the alias so the service sees
column names.
"""

from typing import ClassVar, Tuple

from pydantic import Field

from peakperformance.schemas.common import ResourcePayload, Scalar


class UserUpdate(ResourcePayload):
    nombre_usuario: Scalar = None
    apellido_usuario: Scalar = None
    password: Scalar = Field(default=None, alias="contraseña")
    correo_electronico: Scalar = None
    telefono: Scalar = None
    fecha_creacion: Scalar = None
    fecha_modificacion: Scalar = None


class UserCreate(UserUpdate):
    # estado may be omitted; it is stored as NULL
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = (
        "id_usuario",
        "nombre_usuario",
        "apellido_usuario",
        "contraseña",
        "correo_electronico",
        "telefono",
        "fecha_creacion",
        "fecha_modificacion",
    )

    id_usuario: Scalar = None
    estado: Scalar = None
