"""ORM models."""

from items_api.models.item import Item

__all__ = ["Item"]
