"""Exercise and log response schemas."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ExerciseResponse(BaseModel):
    """Response for an exercise added to a user's log."""
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., description="Owner of the log")
    description: str = Field(..., description="What was done")
    duration: int = Field(..., description="Duration in minutes")
    date: str = Field(..., description="Calendar date, e.g. 'Sun Jan 15 2023'")
    id: str = Field(..., alias="_id", description="User identifier")


class LogEntry(BaseModel):
    """Exercise as shown in a log listing."""
    description: str
    duration: int
    date: str


class LogResponse(BaseModel):
    """Filtered exercise log of a user."""
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., description="Owner of the log")
    id: str = Field(..., alias="_id", description="User identifier")
    count: int = Field(..., description="Number of entries in log")
    log: List[LogEntry] = Field(default_factory=list, description="Entries in stored order")
