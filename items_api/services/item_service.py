"""Service layer for item business logic."""

from __future__ import annotations

import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from items_api.errors import MismatchError, NotFoundError
from items_api.models.item import Item
from items_api.repositories.item_repository import ItemRepository

logger = logging.getLogger(__name__)


class ItemService:
    """Item use-cases."""

    def __init__(self, repository: ItemRepository | None = None) -> None:
        self._repo = repository or ItemRepository()

    def list_items(self, session: Session) -> list[Item]:
        return self._repo.list_items(session)

    def get_item(self, session: Session, item_id: int) -> Item:
        item = self._repo.get_by_id(session, item_id)
        if item is None:
            raise NotFoundError(message=f"Item {item_id} not found")
        return item

    def create_item(self, session: Session, *, name: str, price: Decimal, category: str) -> Item:
        item = self._repo.create(session, name=name, price=price, category=category)
        logger.info("Created item %s", item.id)
        return item

    def replace_item(
        self,
        session: Session,
        item_id: int,
        *,
        name: str,
        price: Decimal,
        category: str,
        body_id: int | None = None,
    ) -> Item:
        """Overwrite every field of item ``item_id``.

        Raises:
            MismatchError: ``body_id`` is set and differs from ``item_id``.
                Checked first, so the row is left untouched.
            NotFoundError: no such item.
        """
        if body_id is not None and body_id != item_id:
            raise MismatchError(
                message=f"Body id {body_id} does not match path id {item_id}",
                details={"path_id": item_id, "body_id": body_id},
            )

        item = self._repo.replace(session, item_id, name=name, price=price, category=category)
        if item is None:
            raise NotFoundError(message=f"Item {item_id} not found")
        logger.info("Replaced item %s", item_id)
        return item

    def delete_item(self, session: Session, item_id: int) -> None:
        if not self._repo.delete(session, item_id):
            raise NotFoundError(message=f"Item {item_id} not found")
        logger.info("Deleted item %s", item_id)
