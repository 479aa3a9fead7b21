"""Item routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request, url_for

from items_api.db import get_session
from items_api.schemas.item import ItemPayloadSchema, ItemSchema
from items_api.services.item_service import ItemService
from items_api.utils.responses import no_content, ok

items_bp = Blueprint("items", __name__)

_item_schema = ItemSchema()
_items_schema = ItemSchema(many=True)
_payload_schema = ItemPayloadSchema()


def _service() -> ItemService:
    return current_app.extensions["item_service"]


def _load_payload() -> dict:
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    return _payload_schema.load(payload)


@items_bp.get("/items")
def list_items():
    """List all items."""

    items = _service().list_items(get_session())
    return ok(_items_schema.dump(items))


@items_bp.get("/items/<int:item_id>")
def get_item(item_id: int):
    """Get a single item by id."""

    item = _service().get_item(get_session(), item_id)
    return ok(_item_schema.dump(item))


@items_bp.post("/items")
def create_item():
    """Create a new item; the store assigns its id."""

    data = _load_payload()
    session = get_session()
    item = _service().create_item(
        session,
        name=data["name"],
        price=data["price"],
        category=data["category"],
    )

    # Must commit before the response exists; failures go to the 500 handler.
    session.commit()

    location = url_for("items.get_item", item_id=item.id)
    return ok(_item_schema.dump(item), status_code=201, headers={"Location": location})


@items_bp.put("/items/<int:item_id>")
def replace_item(item_id: int):
    """Replace every field of an existing item."""

    data = _load_payload()
    session = get_session()
    _service().replace_item(
        session,
        item_id,
        name=data["name"],
        price=data["price"],
        category=data["category"],
        body_id=data.get("id"),
    )
    session.commit()
    return no_content()


@items_bp.delete("/items/<int:item_id>")
def delete_item(item_id: int):
    """Delete an item."""

    session = get_session()
    _service().delete_item(session, item_id)
    session.commit()
    return no_content()
