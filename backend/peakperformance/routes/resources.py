"""
PeakPerformance Backend — Resource Route Handlers
===================================================

What:  Builds the five CRUD endpoints for each resource and mounts them.
Why:   All nine resources expose the same HTTP surface; a factory keeps the
       routers identical instead of nine hand-copied modules.
How:   `build_resource_router()` closes over one ResourceService and binds
       its create/update schemas as the request body types, so FastAPI's
       OpenAPI docs show the real fields of each resource.

HTTP surface per resource:
    GET    /api/<resource>        → 200 [records]          | 500
    GET    /api/<resource>/{id}   → 200 record             | 404 | 500
    POST   /api/<resource>        → 201 record + "id"      | 400 | 500
    PUT    /api/<resource>/{id}   → 200 {"message": ...}   | 404 | 500
    DELETE /api/<resource>/{id}   → 200 {"message": ...}   | 404 | 500

Routes stay THIN: extract path/body, call the service, return its result.
Errors are raised by the service and formatted by the global handlers.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, FastAPI
from sqlalchemy.ext.asyncio import AsyncSession

from peakperformance.database import get_db_session
from peakperformance.schemas.common import ErrorResponse, MessageResponse
from peakperformance.services.resource_service import ResourceService

logger = logging.getLogger(__name__)

# Resource key (from the catalogue) → (base path, OpenAPI tag)
RESOURCE_ROUTES = {
    "satisfaccion": ("/api/satisfaccion", "Encuestas de satisfacción"),
    "facturacion": ("/api/facturacion", "Facturación"),
    "informe_inventario": ("/api/informe_inventario", "Informes de inventario"),
    "inventario": ("/api/inventario", "Inventario"),
    "notificacion": ("/api/notificacion", "Notificaciones"),
    "pedidos": ("/api/pedidos", "Pedidos"),
    "productos": ("/api/productos", "Productos"),
    "usuarios": ("/api/usuarios", "Usuarios"),
    "venta": ("/api/venta", "Ventas"),
}


def build_resource_router(prefix: str, service: ResourceService, tag: str) -> APIRouter:
    """
    Create the CRUD router for one resource.

    Args:
        prefix:  Base path, e.g. "/api/productos"
        service: The configured ResourceService for the table
        tag:     OpenAPI tag grouping the five endpoints in /docs

    Returns:
        An APIRouter ready for `app.include_router()`.
    """
    router = APIRouter(prefix=prefix, tags=[tag])
    create_schema = service.create_schema
    update_schema = service.update_schema
    table = service.table.name

    @router.get(
        "",
        response_model=List[Dict[str, Any]],
        responses={500: {"description": "Server error", "model": ErrorResponse}},
        summary=f"List all rows of {table}",
    )
    async def list_records(db: AsyncSession = Depends(get_db_session)) -> List[Dict[str, Any]]:
        return await service.list_records(db)

    @router.get(
        "/{record_id}",
        response_model=Dict[str, Any],
        responses={
            404: {"description": "No row with this id", "model": ErrorResponse},
            500: {"description": "Server error", "model": ErrorResponse},
        },
        summary=f"Get one row of {table} by {service.identity.name}",
    )
    async def get_record(
        record_id: str,
        db: AsyncSession = Depends(get_db_session),
    ) -> Dict[str, Any]:
        # record_id stays a string: the database compares it to the key column
        return await service.get_record(db, record_id)

    @router.post(
        "",
        status_code=201,
        response_model=Dict[str, Any],
        responses={
            400: {"description": "Required fields missing", "model": ErrorResponse},
            500: {"description": "Server error", "model": ErrorResponse},
        },
        summary=f"Create a row in {table}",
    )
    async def create_record(
        payload: Optional[create_schema] = None,
        db: AsyncSession = Depends(get_db_session),
    ) -> Dict[str, Any]:
        # A missing body counts as {} and fails the required-field check
        if payload is None:
            payload = create_schema()
        return await service.create_record(db, payload)

    @router.put(
        "/{record_id}",
        response_model=MessageResponse,
        responses={
            404: {"description": "No row with this id", "model": ErrorResponse},
            500: {"description": "Server error", "model": ErrorResponse},
        },
        summary=f"Update a row of {table}",
    )
    async def update_record(
        record_id: str,
        payload: Optional[update_schema] = None,
        db: AsyncSession = Depends(get_db_session),
    ) -> Dict[str, str]:
        if payload is None:
            payload = update_schema()
        return await service.update_record(db, record_id, payload)

    @router.delete(
        "/{record_id}",
        response_model=MessageResponse,
        responses={
            404: {"description": "No row with this id", "model": ErrorResponse},
            500: {"description": "Server error", "model": ErrorResponse},
        },
        summary=f"Delete a row of {table}",
    )
    async def delete_record(
        record_id: str,
        db: AsyncSession = Depends(get_db_session),
    ) -> Dict[str, str]:
        return await service.delete_record(db, record_id)

    return router


def include_resource_routers(app: FastAPI, services: Dict[str, ResourceService]) -> None:
    """Mount one router per catalogue entry, each under its own base path."""
    for key, service in services.items():
        prefix, tag = RESOURCE_ROUTES[key]
        app.include_router(build_resource_router(prefix, service, tag))
        logger.debug("Mounted %s at %s", service.name, prefix)
