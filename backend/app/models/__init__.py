"""ORM model exports for convenient imports elsewhere in the app."""

from app.models.base import Base
from app.models.category import Category
from app.models.city import City
from app.models.country import Country
from app.models.state import State
from app.models.subcategory import Subcategory

__all__ = [
    "Base",
    "Category",
    "City",
    "Country",
    "State",
    "Subcategory",
]
