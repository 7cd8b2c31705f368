from __future__ import annotations

import json
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

import pyarrow as pa
from pydantic import BaseModel


class CustomEncoder(json.JSONEncoder):
    def default(self, o):
        # Handle datetime
        if isinstance(o, (datetime, date)):
            return o.isoformat()

        # Handle pydantic models
        elif isinstance(o, BaseModel):
            return o.model_dump(mode="json")

        elif isinstance(o, Enum):
            return o.value

        # Handle bytes
        elif isinstance(o, bytes):
            try:
                return o.decode("ascii")
            except UnicodeDecodeError:
                return o.hex()

        # Handle other types by falling back to the parent method
        return super().default(o)


def round_half_away(value: float, places: int = 2) -> float:
    """Round to `places` decimals, halves away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


class ArrowConverter:
    @staticmethod
    def _get_arrow_type(python_type):
        """Get the corresponding Arrow type for a given Python type."""
        if python_type is int:
            return pa.int64()
        if python_type is str:
            return pa.string()
        if python_type is float:
            return pa.float64()
        if python_type is bool:
            return pa.bool_()
        if python_type is datetime:
            return pa.timestamp("us")
        if python_type is date:
            return pa.date32()
        if python_type is bytes:
            return pa.binary()
        if isinstance(python_type, type) and issubclass(python_type, BaseModel):
            # Handle nested Pydantic models by converting them to struct type
            return pa.struct(
                [
                    pa.field(name, ArrowConverter._get_arrow_type(field.annotation))
                    for name, field in python_type.model_fields.items()
                ]
            )
        return pa.string()

    @classmethod
    def to_list(cls, model: type[BaseModel]) -> list[pa.Field]:
        """Convert Pydantic model to a list of Arrow fields."""
        return [
            pa.field(name, cls._get_arrow_type(field.annotation))
            for name, field in model.model_fields.items()
        ]

    @classmethod
    def to_arrow_schema(cls, model: type[BaseModel], *prefix: pa.Field) -> pa.Schema:
        """Convert Pydantic model to Arrow schema, with optional leading fields."""
        return pa.schema([*prefix, *cls.to_list(model)])
