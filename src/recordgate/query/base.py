from typing import List, Optional, Protocol, TypeVar

from recordgate.errors import QueryError
from recordgate.records import Record

R = TypeVar("R", bound=Record)


class EntityQueries(Protocol[R]):
    """Read operations every entity accessor provides."""

    def list(self, limit: int) -> List[R]:
        """Up to `limit` records. Callers must not rely on the order."""
        ...

    def search(self, term: str) -> List[R]:
        """Records whose display field contains `term`, capped by configuration."""
        ...

    def get(self, record_id: str) -> Optional[R]:
        ...


def check_limit(limit: int) -> None:
    if limit < 0:
        raise QueryError(f"limit must be zero or more, got {limit}")


def contains(value: Optional[str], term: str, case_sensitive: bool) -> bool:
    """Substring test used by in-memory search. None never matches."""
    if value is None:
        return False
    if case_sensitive:
        return term in value
    return term.casefold() in value.casefold()


def like_pattern(term: str) -> str:
    """LIKE pattern matching `term` anywhere, with wildcards in it escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
