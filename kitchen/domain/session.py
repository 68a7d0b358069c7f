from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
import time
from typing import Protocol

from kitchen.domain.errors import GenerationInProgress
from kitchen.domain.models import (
    GenerationRequest,
    GenerationResult,
    Recipe,
    new_id,
)
from kitchen.domain.stock import Stock


logger = logging.getLogger(__name__)


class RecipeGenerator(Protocol):
    async def generate(self, request: GenerationRequest) -> GenerationResult:
        ...


class Status(Enum):
    idle = "idle"
    pending = "pending"
    succeeded = "succeeded"
    failed = "failed"


@dataclass
class KitchenSession:
    id: str = field(default_factory=new_id)
    stock: Stock = field(default_factory=Stock)
    status: Status = Status.idle
    request: GenerationRequest | None = None
    result: GenerationResult | None = None
    updated_at: float = field(default_factory=time.time)

    @property
    def pending(self) -> bool:
        return self.status is Status.pending

    async def submit(self, service: RecipeGenerator) -> GenerationResult:
        # No await between the check and the state change, so two submits
        # on the same loop can never both get through.
        if self.pending:
            raise GenerationInProgress(f"Session {self.id} is already cooking.")
        request = GenerationRequest.from_entries(self.stock)
        self.status = Status.pending
        self.request = request
        self.result = None

        try:
            result = await service.generate(request)
        except BaseException:
            self.status = Status.idle
            raise

        self.result = result
        self.status = Status.succeeded if isinstance(result, Recipe) else Status.failed
        self.updated_at = time.time()
        return result


class InMemorySessionStore:
    def __init__(self, ttl_seconds: int = 1800) -> None:
        self.ttl_seconds = ttl_seconds
        self._data: dict[str, KitchenSession] = {}

    def get(self, session_id: str | None) -> KitchenSession | None:
        if session_id is None:
            return None
        return self._data.get(session_id)

    def get_or_create(self, session_id: str | None = None) -> KitchenSession:
        self._gc()
        st = self.get(session_id)
        if st is None:
            # Unknown ids from old cookies get a fresh session id.
            st = KitchenSession()
            self._data[st.id] = st
            logger.debug("New kitchen session %s", st.id)
        st.updated_at = time.time()
        return st

    def __len__(self) -> int:
        return len(self._data)

    def _gc(self) -> None:
        now = time.time()
        expired = [
            k
            for k, v in self._data.items()
            if not v.pending and now - v.updated_at > self.ttl_seconds
        ]
        for k in expired:
            self._data.pop(k, None)
