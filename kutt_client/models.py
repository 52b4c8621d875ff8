"""Pydantic models for the Kutt v2 links API."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime


class CreateLinkRequest(BaseModel):
    """Request body for creating a shortened link.

    Optional fields that are unset or empty are left out of the serialized
    body entirely; the server rejects an explicit empty value.
    """

    target: str = Field(..., description="URL the link redirects to")
    reuse: bool = Field(False, description="Return an existing link for the same target")
    password: Optional[str] = Field(None, description="Password protecting the link")
    custom_url: Optional[str] = Field(
        None,
        serialization_alias="customurl",
        description="Custom slug for the link",
    )
    domain: Optional[str] = Field(None, description="Custom domain for the link")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("password", "custom_url", "domain", mode="before")
    @classmethod
    def empty_as_missing(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty string the same as a missing value."""
        if v == "":
            return None
        return v

    def to_json(self) -> str:
        """Serialize using wire field names, omitting absent fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class Link(BaseModel):
    """A shortened link as returned by the server."""

    id: str = Field(..., description="Unique ID of the link")
    target: Optional[str] = Field(None, description="Where the link redirects to")
    is_password_required: bool = Field(
        False, alias="password", description="Whether a password is required"
    )
    is_banned: bool = Field(False, alias="banned", description="Whether the link is banned")
    address: Optional[str] = Field(None, description="Slug portion of the link")
    link: Optional[str] = Field(None, description="The full shortened link")
    domain: Optional[str] = Field(None, description="Custom domain, if set")
    visit_count: int = Field(0, ge=0, description="Number of visits")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Error body returned with a non-success status."""

    error: str = Field(..., description="Error message")
