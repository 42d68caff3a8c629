"""User collection schema."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class Exercise(BaseModel):
    """Exercise entry embedded in a user's log."""
    description: str = Field(..., description="What was done")
    duration: int = Field(..., gt=0, description="Duration in minutes")
    date: datetime = Field(..., description="When the exercise took place")


class User(BaseModel):
    """User collection model."""
    username: str = Field(..., min_length=1, description="Unique username")
    log: List[Exercise] = Field(default_factory=list, description="Exercises in insertion order")
