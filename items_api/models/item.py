"""Item ORM model."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String, Text
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator, TypeEngine

from items_api.models.base import Base


class ExactDecimal(TypeDecorator):
    """NUMERIC that keeps every digit of a Decimal.

    SQLite has no exact numeric storage, so there the value is kept as text.
    """

    impl = Numeric
    cache_ok = True

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine:
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String())
        return dialect.type_descriptor(Numeric())

    def process_bind_param(self, value, dialect: Dialect):
        if value is not None and dialect.name == "sqlite":
            return str(value)
        return value

    def process_result_value(self, value, dialect: Dialect):
        if value is not None and dialect.name == "sqlite":
            return Decimal(value)
        return value


class Item(Base):
    """The single persisted resource."""

    __tablename__ = "items"
    # Ids are never handed out twice, even after the highest row is deleted.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(ExactDecimal, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Item id={self.id} name={self.name!r}>"
