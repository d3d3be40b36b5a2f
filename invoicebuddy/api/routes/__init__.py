"""API route modules."""

from invoicebuddy.api.routes.customers import router as customers_router
from invoicebuddy.api.routes.dashboard import router as dashboard_router
from invoicebuddy.api.routes.health import router as health_router
from invoicebuddy.api.routes.invoices import router as invoices_router
from invoicebuddy.api.routes.products import router as products_router
from invoicebuddy.api.routes.reports import router as reports_router

__all__ = [
    "health_router",
    "customers_router",
    "products_router",
    "invoices_router",
    "reports_router",
    "dashboard_router",
]
