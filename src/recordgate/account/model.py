from dataclasses import dataclass
from typing import Optional

from recordgate.records import Record


@dataclass
class Account(Record):
    name: Optional[str] = None
    industry: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None

    table = "accounts"
    key_prefix = "001"
    display_field = "name"
