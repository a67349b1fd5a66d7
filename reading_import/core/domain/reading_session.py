# reading_import/core/domain/reading_session.py

"""Reading session and progress models owned by the session collaborator"""

# Standard library imports
from datetime import date
from datetime import datetime

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from reading_import.core.domain.enums import SessionStatus


class ReadingSession(BaseModel):
    """One attempt at reading a catalog entry"""

    model_config = ConfigDict()

    id: int
    entry_id: int
    session_number: int = Field(..., ge=1)
    status: SessionStatus
    started_date: date | None = None
    completed_date: date | None = None
    review: str | None = None
    is_active: bool = True
    created_at: datetime


class ProgressEntry(BaseModel):
    """Single progress log for a session"""

    model_config = ConfigDict()

    id: int
    entry_id: int
    session_id: int
    current_page: int = Field(0, ge=0)
    percentage: float = Field(0.0, ge=0.0, le=100.0)
    progress_date: date
    note: str | None = None


class SessionDates(BaseModel):
    """Start and completion dates for a new session"""

    model_config = ConfigDict(frozen=True)

    started_date: date | None = None
    completed_date: date | None = None
