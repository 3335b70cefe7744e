"""Directory session schemas (criteria state, drop events)."""


from pydantic import Field

from partnerlink.ranking import Criteria, DirectoryEngine
from partnerlink.schemas.common import CamelModel

class DirectorySessionOut(CamelModel):
    session_id: str
    criteria: Criteria
    manual_order: list[str]
    revision: int

    @classmethod
    def from_engine(cls, session_id: str, engine: DirectoryEngine) -> "DirectorySessionOut":
        return cls(
            session_id=session_id,
            criteria=engine.criteria,
            manual_order=list(engine.manual_order),
            revision=engine.revision,
        )

class DropRequest(CamelModel):
    """A drag-and-drop drop event from the favorites view.

    ``visible_ids`` is the display order the client rendered when the drop
    happened.
    """

    dragged_id: str | None = None
    target_id: str | None = None
    visible_ids: list[str] = Field(default_factory=list)
