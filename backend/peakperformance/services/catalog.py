"""
PeakPerformance Backend — Resource Catalogue
==============================================

What:  The nine resource definitions: model, payload schemas and messages.
Why:   The only per-resource knowledge in the backend lives here; routes and
       services are generic.
How:   `build_resource_services()` instantiates one ResourceService per
       resource. It is called by the application factory, which supplies the
       password hasher so tests can swap it for a fake.

Message strings:
    Deployed clients match on these exact texts, so typos ("corectamente"),
    trailing spaces and the two strings that name another resource (the
    inventory-report list error and the survey update error) are kept as-is.
"""

from typing import Dict

from peakperformance.models import (
    Inventory,
    InventoryReport,
    Invoice,
    Notification,
    Order,
    Product,
    Sale,
    Survey,
    User,
)
from peakperformance.schemas.inventory import InventoryCreate, InventoryUpdate
from peakperformance.schemas.inventory_report import (
    InventoryReportCreate,
    InventoryReportUpdate,
)
from peakperformance.schemas.invoice import InvoiceCreate, InvoiceUpdate
from peakperformance.schemas.notification import NotificationCreate, NotificationUpdate
from peakperformance.schemas.order import OrderCreate, OrderUpdate
from peakperformance.schemas.product import ProductCreate, ProductUpdate
from peakperformance.schemas.sale import SaleCreate, SaleUpdate
from peakperformance.schemas.survey import SurveyCreate, SurveyUpdate
from peakperformance.schemas.user import UserCreate, UserUpdate
from peakperformance.security import PasswordHasher
from peakperformance.services.resource_service import ResourceMessages, ResourceService
from peakperformance.services.user_service import UserService


SURVEY_MESSAGES = ResourceMessages(
    list_error="al obtener las encuestas de satisfaccion",
    get_error="Error al obtener la encuesta",
    not_found="Encuesta no encontrada",
    required="Puntuacion, comentarios necesarios y fecha",
    create_error="Error al crear la encuesta de satisfaccion",
    update_not_found="Encuesta no encontrada ",
    updated="Encuesta de satisfaccion actualizada correctamente",
    update_error="Error al actualizar el producto",
    delete_not_found="Encuesta no encontrada",
    deleted="Encuesta eliminada correctamente",
    delete_error="Error al eliminar la encuesta",
)

INVOICE_MESSAGES = ResourceMessages(
    list_error="al obtener la factura",
    get_error="Error al obtener la facturacion",
    not_found="Factura no encontrada",
    required="Metodo de pago y tipo de facturacion son requeridos",
    create_error="Error al crear la factura",
    update_not_found="Factura no encontrada ",
    updated="Factura actualizada correctamente",
    update_error="Error al actualizar la factura",
    delete_not_found="Factura no encontrada",
    deleted="Factura eliminada corectamente",
    delete_error="Error al eliminar la factura",
)

INVENTORY_REPORT_MESSAGES = ResourceMessages(
    list_error="al obtener las encuestas de satisfaccion",
    get_error="Error al obtener el informe",
    not_found="Informe no encontrado",
    required="La descripcion es necesaria",
    create_error="Error al crear la descripcion del informe",
    update_not_found="Informe no encontrado ",
    updated="Informe de inventario actualizado correctamente",
    update_error="Error al actualizar el informe de inventario",
    delete_not_found="Informe no encontrado",
    deleted="Informe eliminado correctamente",
    delete_error="Error al eliminar el informe",
)

INVENTORY_MESSAGES = ResourceMessages(
    list_error="al obtener los datos del inventario",
    get_error="Error al obtener el inventario",
    not_found="inventario no encontrada",
    required="Datos requeridos obligaroriamente",
    create_error="Error al crear el inventario",
    update_not_found="Inventario no encontrado ",
    updated="Inventario actualizado correctamente",
    update_error="Error al actualizar el inventario",
    delete_not_found="Inventario no encontrado",
    deleted="Inventario eliminado corectamente",
    delete_error="Error al eliminar el inventario",
)

NOTIFICATION_MESSAGES = ResourceMessages(
    list_error="al obtener los datos de la notificacion",
    get_error="Error al obtener la notificacion",
    not_found="notificacion no encontrada",
    required="Datos requeridos obligatoriamente",
    create_error="Error al crear la notificacion",
    update_not_found="Notificacion no encontrada ",
    updated="Notificacion actualizada correctamente",
    update_error="Error al actualizar la notificacion",
    delete_not_found="Notificacion no encontrada",
    deleted="Notificacion eliminada corectamente",
    delete_error="Error al eliminar la notificacion",
)

ORDER_MESSAGES = ResourceMessages(
    list_error="al obtener los datos de los pedidos",
    get_error="Error al obtener el pedido",
    not_found="Pedido no encontrado",
    required="Datos requeridos",
    create_error="Error al crear el pedido",
    update_not_found="Pedido no encontrada ",
    updated="Pedido actualizada correctamente",
    update_error="Error al actualizar el pedido",
    delete_not_found="Pedido no encontrado",
    deleted="Pedido eliminado corectamente",
    delete_error="Error al eliminar un pedido",
)

PRODUCT_MESSAGES = ResourceMessages(
    list_error="al obtener los productos",
    get_error="Error al obtener el producto",
    not_found="producto no encontrado",
    required="Nombre y precio son requeridos",
    create_error="Error al crear el producto",
    update_not_found="Producto no encontrado ",
    updated="Producto actualizado correctamente",
    update_error="Error al actualizar el producto",
    delete_not_found="Producto no encontrado",
    deleted="Producto eliminado corectamente",
    delete_error="Error al eliminar el producto",
)

USER_MESSAGES = ResourceMessages(
    list_error="al obtener los datos del usuario",
    get_error="Error al obtener el usuario",
    not_found="Usuario no encontrado",
    required="Datos requeridos obligatoriamente",
    create_error="Error al crear el usuario",
    update_not_found="Usuario no encontrado ",
    updated="Usuario actualizado correctamente",
    update_error="Error al actualizar el usuario",
    delete_not_found="Usuario no encontrado",
    deleted="Usuario eliminado corectamente",
    delete_error="Error al eliminar el usuario",
)

SALE_MESSAGES = ResourceMessages(
    list_error="al obtener los datos de la venta",
    get_error="Error al obtener la venta",
    not_found="venta no encontrada",
    required="Datos requeridos",
    create_error="Error al crear la venta",
    update_not_found="venta no encontrada ",
    updated="Venta actualizada correctamente",
    update_error="Error al actualizar la venta",
    delete_not_found="Venta no encontrada",
    deleted="Venta eliminada corectamente",
    delete_error="Error al eliminar la venta",
)


def build_resource_services(hasher: PasswordHasher) -> Dict[str, ResourceService]:
    """
    Instantiate the nine resource services.

    Returns:
        Mapping of resource key (used by the router table) to service.
    """
    return {
        "satisfaccion": ResourceService(
            "encuesta", Survey, SurveyCreate, SurveyUpdate, SURVEY_MESSAGES
        ),
        "facturacion": ResourceService(
            "factura", Invoice, InvoiceCreate, InvoiceUpdate, INVOICE_MESSAGES
        ),
        "informe_inventario": ResourceService(
            "informe",
            InventoryReport,
            InventoryReportCreate,
            InventoryReportUpdate,
            INVENTORY_REPORT_MESSAGES,
        ),
        "inventario": ResourceService(
            "inventario", Inventory, InventoryCreate, InventoryUpdate, INVENTORY_MESSAGES
        ),
        "notificacion": ResourceService(
            "notificacion",
            Notification,
            NotificationCreate,
            NotificationUpdate,
            NOTIFICATION_MESSAGES,
        ),
        "pedidos": ResourceService("pedido", Order, OrderCreate, OrderUpdate, ORDER_MESSAGES),
        "productos": ResourceService(
            "producto", Product, ProductCreate, ProductUpdate, PRODUCT_MESSAGES
        ),
        "usuarios": UserService(
            "usuario", User, UserCreate, UserUpdate, USER_MESSAGES, hasher=hasher
        ),
        "venta": ResourceService("venta", Sale, SaleCreate, SaleUpdate, SALE_MESSAGES),
    }
