"""Repository layer for Item persistence."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from items_api.models.item import Item

# Widest integer key any supported backend can hold; larger ids cannot exist.
_MAX_ID = 2**63 - 1


def _storable(item_id: int) -> bool:
    return -_MAX_ID - 1 <= item_id <= _MAX_ID


class ItemRepository:
    """CRUD operations for Item.

    Every method works inside the caller's session and only flushes;
    committing is up to the caller.
    """

    def list_items(self, session: Session) -> list[Item]:
        stmt = select(Item).order_by(Item.id.asc())
        return list(session.scalars(stmt).all())

    def get_by_id(self, session: Session, item_id: int) -> Item | None:
        if not _storable(item_id):
            return None
        return session.get(Item, item_id)

    def create(self, session: Session, *, name: str, price: Decimal, category: str) -> Item:
        item = Item(name=name, price=price, category=category)
        session.add(item)
        session.flush()  # assign PK
        return item

    def replace(
        self,
        session: Session,
        item_id: int,
        *,
        name: str,
        price: Decimal,
        category: str,
    ) -> Item | None:
        if not _storable(item_id):
            return None

        item = session.get(Item, item_id)
        if item is None:
            return None

        item.name = name
        item.price = price
        item.category = category
        session.flush()
        return item

    def delete(self, session: Session, item_id: int) -> bool:
        if not _storable(item_id):
            return False

        item = session.get(Item, item_id)
        if item is None:
            return False

        session.delete(item)
        session.flush()
        return True
