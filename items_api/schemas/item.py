"""Marshmallow schemas for Item."""

from __future__ import annotations

from marshmallow import Schema, fields


class StrictInt(fields.Int):
    """Integer field that also refuses JSON booleans."""

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool):
            raise self.make_error("invalid")
        return super()._deserialize(value, attr, data, **kwargs)


class ItemSchema(Schema):
    """Serialize Item."""

    id = fields.Int(required=True)
    name = fields.Str(required=True)
    # Emitted as a JSON number with every digit by the app's JSON provider.
    price = fields.Decimal(required=True, as_string=False)
    category = fields.Str(required=True)


class ItemPayloadSchema(Schema):
    """Validate a create/replace Item payload.

    ``id`` is optional: ignored on create, compared with the path on replace.
    """

    id = StrictInt(allow_none=True, load_default=None, strict=True)
    name = fields.Str(required=True)
    price = fields.Decimal(required=True)
    category = fields.Str(required=True)
