# src/models/product.py

"""Product data model returned by the catalog search endpoint."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A single catalog product, immutable once fetched."""

    id: int
    title: str
    price: float
    rating: float = 0.0
    brand: str = ""
    category: str = ""
    thumbnail: str = ""
