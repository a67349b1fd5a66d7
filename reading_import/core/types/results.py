# reading_import/core/types/results.py

"""Result types for best-effort side calls"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict


class SideEffectResult(BaseModel):
    """Outcome of a call whose failure must not abort a batch"""

    model_config = ConfigDict(frozen=True)

    ok: bool
    entry_id: int
    error: str | None = None

    @classmethod
    def success(cls, entry_id: int) -> "SideEffectResult":
        """Successful call for an entry"""
        return cls(ok=True, entry_id=entry_id)

    @classmethod
    def failure(cls, entry_id: int, error: Exception | str) -> "SideEffectResult":
        """Failed call with its error message"""
        return cls(ok=False, entry_id=entry_id, error=str(error))
