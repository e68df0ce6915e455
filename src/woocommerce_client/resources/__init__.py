"""Resource-specific convenience wrappers."""
from .customers import CustomersResource
from .orders import OrdersResource
from .products import ProductsResource

__all__ = ["ProductsResource", "OrdersResource", "CustomersResource"]
