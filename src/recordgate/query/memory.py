from typing import Any, Callable, Generic, List, Optional, Type

from recordgate.config import config
from recordgate.errors import QueryError
from recordgate.mutation.gateway import GatewayBacked
from recordgate.mutation.memory import InMemoryMutationGateway
from recordgate.query.base import R, check_limit, contains


class InMemoryAccessor(GatewayBacked, Generic[R]):
    """
    Entity accessor over an InMemoryMutationGateway's store.

    Only records of `record_type` are visible, so several accessors can
    share one gateway. Set `fail_queries` to make every read raise
    QueryError until it is cleared again; mutations are unaffected.
    """

    record_type: Type[R]

    def __init__(
        self,
        gateway: InMemoryMutationGateway,
        search_limit: Optional[int] = None,
        case_sensitive: Optional[bool] = None,
    ):
        super().__init__(gateway)
        self.search_limit = config.search_limit if search_limit is None else search_limit
        self.case_sensitive = (
            config.search_case_sensitive if case_sensitive is None else case_sensitive
        )
        self.fail_queries = False

    def list(self, limit: int) -> List[R]:
        self._check_failure()
        check_limit(limit)
        return self._records()[:limit]

    def search(self, term: str) -> List[R]:
        self._check_failure()
        matches = self._select(
            lambda record: contains(record.display_value, term, self.case_sensitive)
        )
        return matches[: self.search_limit]

    def get(self, record_id: str) -> Optional[R]:
        self._check_failure()
        record = self.gateway.get(record_id)
        return record if isinstance(record, self.record_type) else None

    def _filter_by(self, field: str, value: Any, limit: int) -> List[R]:
        """Records whose `field` equals `value`, at most `limit` of them."""
        self._check_failure()
        check_limit(limit)
        return self._select(lambda record: getattr(record, field) == value)[:limit]

    def _check_failure(self) -> None:
        if self.fail_queries:
            raise QueryError(f"Simulated query failure for {self.record_type.__name__}")

    def _records(self) -> List[R]:
        return self.gateway.records(self.record_type)

    def _select(self, predicate: Callable[[R], bool]) -> List[R]:
        return [record for record in self._records() if predicate(record)]
