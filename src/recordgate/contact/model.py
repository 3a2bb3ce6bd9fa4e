from dataclasses import dataclass
from typing import Optional

from recordgate.records import Record


@dataclass
class Contact(Record):
    account_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    table = "contacts"
    key_prefix = "003"
    display_field = "last_name"

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)
