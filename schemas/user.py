"""User response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Response for a newly registered user."""
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., description="Registered username")
    id: str = Field(..., alias="_id", description="Store-assigned user identifier")


class UserSummary(BaseModel):
    """Entry of the user listing."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Store-assigned user identifier")
    username: str = Field(..., description="Username")
