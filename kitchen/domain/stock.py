import logging
from typing import Iterator

from kitchen.domain.catalogue import DEFAULT_UNIT, NOT_APPLICABLE
from kitchen.domain.models import IngredientEntry, StockSnapshot


logger = logging.getLogger(__name__)


class Stock:
    """Ordered ingredients recorded by one user.

    Entries are never edited in place. Remove and add again to change one.
    Duplicate names are kept as separate entries.
    """

    def __init__(self, entries: list[IngredientEntry] | None = None) -> None:
        self._entries: list[IngredientEntry] = [] if entries is None else list(entries)

    def add(
        self,
        name: str,
        amount: str = "",
        unit: str = DEFAULT_UNIT,
    ) -> IngredientEntry | None:
        name = name.strip()
        if not name:
            return None

        if unit == NOT_APPLICABLE:
            quantity = ""
        else:
            amount = amount.strip()
            if not amount:
                logger.debug("Rejected %s, an amount is required for %s", name, unit)
                return None
            quantity = f"{amount} {unit}".strip()

        entry = IngredientEntry(name=name, quantity=quantity)
        self._entries.append(entry)
        return entry

    def remove(self, id: str) -> None:
        self._entries = [e for e in self._entries if e.id != id]

    def list(self) -> StockSnapshot:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[IngredientEntry]:
        return iter(self.list())
