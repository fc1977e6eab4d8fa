"""
PeakPerformance Backend — SQLAlchemy Models
=============================================

One module per table. Importing this package registers all nine tables with
`Base.metadata`.

Table conventions shared by every model:
    - Primary key supplied by the client on create (autoincrement disabled)
    - Id-shaped references to other tables are plain integers; referential
      integrity belongs to the database, not to this layer
    - Dates are stored as strings, exactly as the client sent them
    - Money columns are NUMERIC(10, 2) read back as float
"""

from peakperformance.models.inventory import Inventory
from peakperformance.models.inventory_report import InventoryReport
from peakperformance.models.invoice import Invoice
from peakperformance.models.notification import Notification
from peakperformance.models.order import Order
from peakperformance.models.product import Product
from peakperformance.models.sale import Sale
from peakperformance.models.survey import Survey
from peakperformance.models.user import User

__all__ = [
    "Inventory",
    "InventoryReport",
    "Invoice",
    "Notification",
    "Order",
    "Product",
    "Sale",
    "Survey",
    "User",
]
