"""Shared helpers for database models."""

from dataclasses import fields
from typing import Any, Dict, Type, TypeVar


T = TypeVar("T", bound="RowModel")


class RowModel:
    """Mixin for dataclasses that mirror a table row."""

    TABLE = ""

    @classmethod
    def from_row(cls: Type[T], row: Dict[str, Any]) -> T:
        """
        Build an instance from a row returned by the database service.

        Columns without a matching field are ignored.
        """
        names = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in row.items() if key in names})
