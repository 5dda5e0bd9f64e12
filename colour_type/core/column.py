"""SQLAlchemy column type for Colour values.

Colours are stored as their packed integer (Colour.to_decimal()), so any
Integer column can hold them. A NULL column reads back as black.

Example:
    class Swatch(Base):
        __tablename__ = 'swatches'

        id: Mapped[int] = mapped_column(Integer, primary_key=True)
        colour: Mapped[Colour] = mapped_column(ColourColumn)
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import Integer
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from colour_type.core.colour import Colour


class ColourColumn(TypeDecorator):
    """Binds anything Colour.parse accepts; loads Colour instances."""

    impl = Integer
    cache_ok = True

    @property
    def python_type(self) -> type:
        return Colour

    def marshal(self, value: Any) -> Colour:
        """Turn user/request input into a Colour."""
        return Colour.parse(value)

    def process_bind_param(self, value: Any, dialect: Dialect) -> int | None:
        if value is None:
            return None
        return Colour.parse(value).to_decimal()

    def process_result_value(self, value: Any, dialect: Dialect) -> Colour:
        # Rows written outside this type may hold text or reals
        if value is None or isinstance(value, (int, float)):
            return Colour(0 if value is None else value)
        return Colour.parse(value)
