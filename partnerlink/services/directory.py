"""Directory sessions — one ``DirectoryEngine`` per open directory view.

The manual favorites order is session state only: it lives in process memory
inside the registry and disappears when the session is closed or evicted.

Rule: No FastAPI here. Routers call these services, services call the engine.
"""

from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from collections.abc import Sequence
from typing import TYPE_CHECKING

from partnerlink.core.config import settings
from partnerlink.core.exceptions import NotFoundError
from partnerlink.ranking import Criteria, DirectoryEngine, VendorRecord

if TYPE_CHECKING:
    from partnerlink.services.vendor import VendorService

logger = logging.getLogger(__name__)


class DirectorySessionRegistry:
    """Bounded, insertion-ordered map of session id → engine.

    Opening a session beyond ``limit`` evicts the least recently used one.
    """

    def __init__(self, limit: int):
        self._limit = limit
        self._engines: OrderedDict[str, DirectoryEngine] = OrderedDict()

    def __len__(self) -> int:
        return len(self._engines)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._engines

    def open(self, criteria: Criteria | None = None) -> tuple[str, DirectoryEngine]:
        session_id = str(uuid.uuid4())
        engine = DirectoryEngine(criteria)
        self._engines[session_id] = engine
        while len(self._engines) > self._limit:
            evicted, _ = self._engines.popitem(last=False)
            logger.info("Evicted directory session %s (limit %d)", evicted, self._limit)
        logger.debug("Opened directory session %s", session_id)
        return session_id, engine

    def get(self, session_id: str) -> DirectoryEngine:
        engine = self._engines.get(session_id)
        if engine is None:
            raise NotFoundError("Directory session", session_id)
        self._engines.move_to_end(session_id)
        return engine

    def close(self, session_id: str) -> None:
        if self._engines.pop(session_id, None) is None:
            raise NotFoundError("Directory session", session_id)
        logger.debug("Closed directory session %s", session_id)

    def invalidate_all(self) -> None:
        """Bump every engine's revision after the record store changed."""
        for engine in self._engines.values():
            engine.invalidate()

    def clear(self) -> None:
        self._engines.clear()


directory_sessions = DirectorySessionRegistry(settings.directory_session_limit)


class DirectoryService:
    def __init__(self, sessions: DirectorySessionRegistry):
        self._sessions = sessions

    def open_session(self, criteria: Criteria | None = None) -> tuple[str, DirectoryEngine]:
        return self._sessions.open(criteria)

    def get_session(self, session_id: str) -> DirectoryEngine:
        return self._sessions.get(session_id)

    def close_session(self, session_id: str) -> None:
        self._sessions.close(session_id)

    def set_criteria(self, session_id: str, criteria: Criteria) -> DirectoryEngine:
        engine = self._sessions.get(session_id)
        engine.set_criteria(criteria)
        return engine

    def clear_special_filter(self, session_id: str) -> DirectoryEngine:
        engine = self._sessions.get(session_id)
        engine.set_criteria(engine.criteria.without_special_filter())
        return engine

    async def get_ordered_view(
        self, session_id: str, vendors: VendorService
    ) -> list[VendorRecord]:
        """Recompute the session view from the current master set."""
        engine = self._sessions.get(session_id)
        records = await vendors.get_all_records()
        return engine.get_ordered_view(records)

    def drop(
        self,
        session_id: str,
        dragged_id: str | None,
        target_id: str | None,
        visible_ids: Sequence[str],
    ) -> DirectoryEngine:
        engine = self._sessions.get(session_id)
        before = engine.revision
        engine.on_drop(dragged_id, target_id, visible_ids)
        if engine.revision == before:
            logger.info(
                "Drop %s -> %s left session %s unchanged", dragged_id, target_id, session_id
            )
        return engine
