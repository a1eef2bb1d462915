"""Documentation entry model."""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchEntry(BaseModel):
    """A documentation unit to be searched."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique, stable entry identifier")
    title: str = Field(..., description="Short display title")
    content: str = Field(..., description="Body text")
    path: str = Field(..., description="Destination link for navigation")
    category: str = Field(..., description="Classification label")
    keywords: Tuple[str, ...] = Field(default=(), description="Explicit search terms")

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Reject blank identifiers."""
        if not v.strip():
            raise ValueError("Entry id cannot be blank")
        return v

    @field_validator("keywords")
    @classmethod
    def validate_keywords(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Drop repeated keywords, keeping the first occurrence."""
        seen: List[str] = []
        for keyword in v:
            if not keyword or not keyword.strip():
                raise ValueError("Keyword cannot be empty")
            if keyword not in seen:
                seen.append(keyword)
        return tuple(seen)
