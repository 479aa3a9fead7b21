"""Interactive API documentation.

Serves a hand-maintained OpenAPI document for the item routes plus a
Swagger UI page that renders it.
"""

from __future__ import annotations

from flask import Blueprint, Response, url_for

from items_api.utils.responses import ok

docs_bp = Blueprint("docs", __name__)

SWAGGER_UI_VERSION = "5.17.14"

_ITEM_ID_PARAM = {
    "name": "item_id",
    "in": "path",
    "required": True,
    "schema": {"type": "integer"},
}


def _json_body(ref: str) -> dict:
    return {"content": {"application/json": {"schema": {"$ref": ref}}}}


def _error(description: str) -> dict:
    return {"description": description, **_json_body("#/components/schemas/Error")}


OPENAPI_SPEC: dict = {
    "openapi": "3.0.3",
    "info": {
        "title": "Items API",
        "version": "1.0.0",
        "description": "CRUD endpoints for a single Item resource.",
    },
    "paths": {
        "/items": {
            "get": {
                "summary": "List all items",
                "operationId": "listItems",
                "responses": {
                    "200": {
                        "description": "All items ordered by id",
                        "content": {
                            "application/json": {
                                "schema": {
                                    "type": "array",
                                    "items": {"$ref": "#/components/schemas/Item"},
                                }
                            }
                        },
                    }
                },
            },
            "post": {
                "summary": "Create an item",
                "operationId": "createItem",
                "requestBody": {"required": True, **_json_body("#/components/schemas/ItemInput")},
                "responses": {
                    "201": {
                        "description": "Created; Location points at the new item",
                        "headers": {"Location": {"schema": {"type": "string"}}},
                        **_json_body("#/components/schemas/Item"),
                    },
                    "400": _error("Body cannot be parsed into an item"),
                },
            },
        },
        "/items/{item_id}": {
            "parameters": [_ITEM_ID_PARAM],
            "get": {
                "summary": "Get an item by id",
                "operationId": "getItem",
                "responses": {
                    "200": {"description": "The item", **_json_body("#/components/schemas/Item")},
                    "404": _error("No item with this id"),
                },
            },
            "put": {
                "summary": "Replace an item",
                "operationId": "replaceItem",
                "requestBody": {"required": True, **_json_body("#/components/schemas/ItemInput")},
                "responses": {
                    "204": {"description": "Replaced"},
                    "400": _error("Malformed body, or body id differs from path id"),
                    "404": _error("No item with this id"),
                },
            },
            "delete": {
                "summary": "Delete an item",
                "operationId": "deleteItem",
                "responses": {
                    "204": {"description": "Deleted"},
                    "404": _error("No item with this id"),
                },
            },
        },
    },
    "components": {
        "schemas": {
            "Item": {
                "type": "object",
                "required": ["id", "name", "price", "category"],
                "properties": {
                    "id": {"type": "integer", "readOnly": True},
                    "name": {"type": "string"},
                    "price": {"type": "number"},
                    "category": {"type": "string"},
                },
            },
            "ItemInput": {
                "type": "object",
                "required": ["name", "price", "category"],
                "properties": {
                    "id": {"type": "integer", "nullable": True},
                    "name": {"type": "string"},
                    "price": {"type": "number"},
                    "category": {"type": "string"},
                },
            },
            "Error": {
                "type": "object",
                "properties": {
                    "error": {
                        "type": "object",
                        "properties": {
                            "code": {"type": "string"},
                            "message": {"type": "string"},
                            "details": {},
                        },
                    }
                },
            },
        }
    },
}


@docs_bp.get("/openapi.json")
def openapi_spec():
    return ok(OPENAPI_SPEC)


@docs_bp.get("/docs")
def swagger_ui() -> Response:
    cdn = f"https://cdn.jsdelivr.net/npm/swagger-ui-dist@{SWAGGER_UI_VERSION}"
    html = f"""<!doctype html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>Items API docs</title>
    <link rel="stylesheet" href="{cdn}/swagger-ui.css">
</head>
<body>
    <div id="swagger-ui"></div>
    <script src="{cdn}/swagger-ui-bundle.js"></script>
    <script>
        window.ui = SwaggerUIBundle({{url: "{url_for('docs.openapi_spec')}", dom_id: "#swagger-ui"}});
    </script>
</body>
</html>"""

    return Response(html, mimetype="text/html")
