"""ORM Models — the four dealership tables, imported together for metadata."""

from car_shop.models.brand import Brand
from car_shop.models.car_centre import CarCentre
from car_shop.models.car import Car
from car_shop.models.order import Order

__all__ = ["Brand", "CarCentre", "Car", "Order"]
