from .products import ProductReadApi, ProductWriteApi

__all__ = [
    "ProductReadApi",
    "ProductWriteApi",
]
