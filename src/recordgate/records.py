"""
Typed records.

A record is a dataclass of named, optional fields plus a distinguished
identifier. The identifier is None until a gateway creates the record, and
is fixed from then on.
"""

from dataclasses import dataclass, fields as dataclass_fields
from typing import Any, ClassVar, List, Optional

from recordgate.errors import InvalidStateError


@dataclass
class Record:
    id: Optional[str] = None

    # Per-entity metadata, set by subclasses
    table: ClassVar[str] = ""
    key_prefix: ClassVar[str] = "000"
    display_field: ClassVar[str] = ""

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id":
            current = getattr(self, "id", None)
            if current is not None and value != current:
                raise InvalidStateError(
                    f"{type(self).__name__} {current} already has an identifier"
                )
        super().__setattr__(name, value)

    def has_id(self) -> bool:
        return self.id is not None

    @classmethod
    def column_names(cls) -> List[str]:
        """Names of every field except the identifier, in declaration order."""
        return [f.name for f in dataclass_fields(cls) if f.name != "id"]

    def fields(self) -> dict:
        return {name: getattr(self, name) for name in self.column_names()}

    @property
    def display_value(self) -> Optional[str]:
        return getattr(self, self.display_field)

    @classmethod
    def from_row(cls, row: dict) -> "Record":
        """Build a record from a database row keyed by column name."""
        values = {name: row.get(name) for name in cls.column_names()}
        record_id = row.get("id")
        return cls(id=None if record_id is None else str(record_id), **values)
