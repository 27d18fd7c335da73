"""Pydantic schemas for the profile correction endpoint."""

from pydantic import BaseModel, Field, field_validator


class ProfileUpdateRequest(BaseModel):
    """Form submitted by the admin page."""

    roll_number: str = Field(alias="rollNumber", min_length=1)
    leetcode_url: str = Field(alias="leetcodeUrl", min_length=1)
    password: str = ""

    class Config:
        populate_by_name = True
        str_strip_whitespace = True

    @field_validator("leetcode_url")
    @classmethod
    def single_line(cls, value: str) -> str:
        if len(value.splitlines()) > 1:
            raise ValueError("URL must be a single line")
        return value


class ProfileUpdateResponse(BaseModel):
    """Response describing an applied profile update."""

    status: str
    dataset: str
    name: str
    total_solved: int | None = None  # None when no numeric result was fetched
    message: str

    class Config:
        from_attributes = True
