from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, TypeAlias
import uuid


def new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class IngredientEntry:
    name: str
    quantity: str = ""
    id: str = field(default_factory=new_id)

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "quantity": self.quantity}


StockSnapshot: TypeAlias = tuple[IngredientEntry, ...]


@dataclass(frozen=True)
class GenerationRequest:
    """The stock as it was when the user asked for a recipe."""

    ingredients: StockSnapshot = ()

    @classmethod
    def from_entries(cls, entries: Iterable[IngredientEntry]) -> "GenerationRequest":
        return cls(ingredients=tuple(entries))

    @classmethod
    def from_payload(cls, items: Iterable[dict[str, Any]]) -> "GenerationRequest":
        entries: list[IngredientEntry] = []
        for item in items:
            quantity = item.get("quantity") or ""
            entry_id = item.get("id") or new_id()
            entries.append(
                IngredientEntry(name=item["name"], quantity=quantity, id=entry_id)
            )
        return cls.from_entries(entries)

    def __len__(self) -> int:
        return len(self.ingredients)


class ErrorKind(Enum):
    empty_stock = "empty_stock"
    missing_credential = "missing_credential"
    provider = "provider"


STATUS_CODES = {
    ErrorKind.empty_stock: 400,
    ErrorKind.missing_credential: 500,
    ErrorKind.provider: 502,
}


@dataclass(frozen=True)
class Recipe:
    html: str

    def to_dict(self) -> dict[str, str]:
        return {"recipe": self.html}


@dataclass(frozen=True)
class GenerationError:
    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, "code": self.kind.value}


GenerationResult: TypeAlias = Recipe | GenerationError
