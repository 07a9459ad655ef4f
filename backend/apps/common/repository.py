from itertools import islice
from typing import Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class InMemoryTable(Generic[T]):
    """
    Insertion-ordered collection of records keyed by an integer id.

    Ids come from a counter that only moves forward, so an id is never handed
    out twice even after the record holding it is deleted. Records are built
    through ``factory`` which receives ``id`` plus the stored fields.
    """

    def __init__(self, factory: Callable[..., T]):
        self.factory = factory
        self._rows: Dict[int, T] = {}
        self._next_id = 1

    def get(self, pk: int) -> Optional[T]:
        return self._rows.get(pk)

    def exists(self, pk: int) -> bool:
        return pk in self._rows

    def list(self) -> List[T]:
        return list(self._rows.values())

    def count(self) -> int:
        return len(self._rows)

    def slice(self, start: int, end: int) -> List[T]:
        if start < 0 or end <= start or start >= len(self._rows):
            return []
        end = min(end, len(self._rows))
        return list(islice(self._rows.values(), start, end))

    def create(self, **data) -> T:
        row = self.factory(id=self._next_id, **data)
        self._rows[self._next_id] = row
        self._next_id += 1
        return row

    def replace(self, pk: int, **data) -> T:
        if pk not in self._rows:
            raise KeyError(pk)
        # Re-assigning an existing key keeps its insertion position.
        row = self.factory(id=pk, **data)
        self._rows[pk] = row
        return row

    def delete(self, pk: int) -> None:
        del self._rows[pk]

    def delete_where(self, predicate: Callable[[T], bool]) -> List[int]:
        doomed = [pk for pk, row in self._rows.items() if predicate(row)]
        for pk in doomed:
            del self._rows[pk]
        return doomed
