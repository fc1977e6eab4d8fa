"""
PeakPerformance Backend — Test Configuration (conftest.py)
============================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (mocked sessions, a throwaway
       SQLite database, an HTTP client bound to a fresh app).
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── fake_hasher: Deterministic stand-in for bcrypt ("hashed_<plaintext>")
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── database: Database over a temporary SQLite file with all tables created
    ├── broken_database: Database whose file cannot be opened (every query fails)
    ├── test_client: HTTPX AsyncClient for an app using `database`
    ├── bcrypt_client: HTTPX AsyncClient for an app hashing with real bcrypt
    └── broken_client: HTTPX AsyncClient for an app using `broken_database`
"""

import os
from typing import List
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings for testing BEFORE any app imports
# Why: Prevents tests from picking up a developer's .env database
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["BCRYPT_ROUNDS"] = "4"

from peakperformance.config import Settings  # noqa: E402
from peakperformance.database import Database  # noqa: E402
from peakperformance.main import create_app  # noqa: E402
from peakperformance.security import PasswordHasher  # noqa: E402


class FakeHasher:
    """Records every plaintext it is asked to hash."""

    def __init__(self):
        self.calls: List[str] = []

    async def hash(self, plaintext) -> str:
        self.calls.append(plaintext)
        return f"hashed_{plaintext}"


@pytest.fixture
def fake_hasher():
    return FakeHasher()


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get(mock_db_session):
            mock_db_session.execute.return_value.first.return_value = None
            ...
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def database(tmp_path):
    """A real Database on a temporary SQLite file, with every table created."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'peakperformance.db'}")
    await db.create_tables()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def broken_database(tmp_path):
    """A Database pointing into a directory that does not exist."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nowhere.db'}")
    yield db
    await db.dispose()


def _client_for(database, hasher) -> AsyncClient:
    app = create_app(settings=Settings(), database=database, hasher=hasher)
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(database, fake_hasher):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    async with _client_for(database, fake_hasher) as client:
        yield client


@pytest_asyncio.fixture
async def bcrypt_client(database):
    """Client whose users resource hashes with real bcrypt at the lowest cost."""
    async with _client_for(database, PasswordHasher(rounds=4)) as client:
        yield client


@pytest_asyncio.fixture
async def broken_client(broken_database, fake_hasher):
    async with _client_for(broken_database, fake_hasher) as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Sample payloads (one valid create body per resource)
# ══════════════════════════════════════════════════════════════════════════

SAMPLE_PAYLOADS = {
    "/api/satisfaccion": {
        "id_encuesta": 4,
        "id_usuario": 1,
        "id_pedido": 2,
        "puntuacion": 5,
        "comentarios": "Excelente servicio",
        "fecha_encuesta": "2024-07-25",
    },
    "/api/facturacion": {
        "id_factura": 4,
        "id_venta": 2,
        "fecha_factura": "2024-07-25",
        "metodo_pago": "Tarjeta",
        "descuentos": 5.5,
        "impuestos": 19.0,
        "tipos_factura": "Electronica",
    },
    "/api/informe_inventario": {
        "id_informe": 4,
        "id_inventario": 3,
        "fecha_informe": "2024-07-25",
        "descripcion_informe": "Conteo mensual sin novedades",
    },
    "/api/inventario": {
        "id_inventario": 10,
        "id_producto": 3,
        "cantidad_disponible": 100,
        "unidad_medida": "unidades",
        "fecha_actualizacion": "2024-07-25",
        "alerta_stock": 10,
    },
    "/api/notificacion": {
        "id_notificacion": 10,
        "id_usuario": 1,
        "id_pedido": 2,
        "mensaje_notificacion": "Tu pedido está listo",
        "fecha_notificacion": "2024-07-25",
        "estado_notificacion": "enviada",
        "destinatario": "cliente@example.com",
    },
    "/api/pedidos": {
        "id_pedido": 10,
        "id_usuario": 1,
        "id_producto": 3,
        "id_venta": 2,
        "fecha_pedido": "2024-07-25",
        "estado_pedido": "pendiente",
        "cantidad": 2,
        "tiempo_entrega_estimado": "30 minutos",
        "detalles_pedido": "Sin cebolla",
        "resumen_pedido": "2 hamburguesas",
        "total_pagar": 25.5,
    },
    "/api/productos": {
        "id_producto": 10,
        "nombre_productos": "Pantalón Jeans",
        "descripcion_productos": "Jeans de mezclilla azul",
        "precio_producto": 45.0,
        "tiempo_preparacion": "10 minutos",
        "categoria": "Ropa",
    },
    "/api/usuarios": {
        "id_usuario": 10,
        "nombre_usuario": "Pedro",
        "apellido_usuario": "Gomez",
        "estado": "activo",
        "contraseña": "password123",
        "correo_electronico": "pedro@example.com",
        "telefono": "123456789",
        "fecha_creacion": "2023-07-22",
        "fecha_modificacion": "2023-07-22",
    },
    "/api/venta": {
        "id_venta": 10,
        "id_usuario": 1,
        "fecha_venta": "2024-07-25",
        "total_venta": 150.0,
        "comision": 15.0,
        "mesero_encargado": "Carlos",
    },
}


@pytest.fixture
def sample_payloads():
    return {prefix: dict(body) for prefix, body in SAMPLE_PAYLOADS.items()}
