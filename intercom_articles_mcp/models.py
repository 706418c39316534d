"""Pydantic input models for every tool.

The JSON schema advertised for a tool is generated from its model, and the
same model validates the arguments, so the two cannot disagree.
"""

import math
from typing import Annotated, Any, ClassVar, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, ValidationInfo, field_validator

ArticleState = Literal["draft", "published"]

# Intercom ids are numeric strings; models that use this also coerce numbers.
ResourceId = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# ─── Translations ────────────────────────────────────────────────────────────


class ArticleTranslation(BaseModel):
    """Article content for one locale, as sent on create."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., description="Translated title")
    body: str = Field(..., description="Translated content in HTML")
    description: Optional[str] = Field(default=None, description="Translated description")
    author_id: int = Field(..., description="Author ID for translation")
    state: Optional[ArticleState] = Field(default=None, description="Translation state")


class ArticleTranslationUpdate(BaseModel):
    """Partial article content for one locale. Only provided fields are updated."""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(default=None, description="Updated translated title")
    body: Optional[str] = Field(default=None, description="Updated translated content in HTML")
    description: Optional[str] = Field(default=None, description="Updated translated description")
    state: Optional[ArticleState] = Field(default=None, description="Updated translation state")


class CollectionTranslation(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, description="Translated collection name")
    description: Optional[str] = Field(default=None, description="Translated collection description")


# ─── Pagination ──────────────────────────────────────────────────────────────


class _PageInput(BaseModel):
    """Pagination arguments. Out-of-range values are clamped, not rejected."""
    model_config = ConfigDict(extra="forbid")

    MAX_PER_PAGE: ClassVar[int] = 50

    page: int = Field(default=1, description="Page number (default: 1)")
    per_page: int = Field(default=10, description="Results per page")

    @field_validator("page", "per_page", mode="before")
    @classmethod
    def _floor(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None:
            return cls.model_fields[info.field_name].default
        if isinstance(v, float) and math.isfinite(v):
            return math.floor(v)
        return v

    @field_validator("page")
    @classmethod
    def _clamp_page(cls, v: int) -> int:
        return max(1, v)

    @field_validator("per_page")
    @classmethod
    def _clamp_per_page(cls, v: int) -> int:
        return min(cls.MAX_PER_PAGE, max(1, v))


# ─── Article Inputs ──────────────────────────────────────────────────────────


class GetArticleInput(BaseModel):
    """Input for retrieving a single article."""
    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    id: ResourceId = Field(..., description='The article ID (e.g., "123456")')


class ListArticlesInput(_PageInput):
    """Input for listing articles."""

    MAX_PER_PAGE: ClassVar[int] = 50

    per_page: int = Field(default=10, description="Number of articles per page (default: 10, max: 50)")


class CreateArticleInput(BaseModel):
    """Input for creating a Help Center article."""
    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    title: str = Field(..., description="Article title (required)")
    body: str = Field(..., description="Article content in HTML format (required)")
    author_id: int = Field(
        ...,
        description="Author ID - must be a valid Intercom team member ID (required)",
    )
    description: Optional[str] = Field(default=None, description="Article description (optional)")
    state: Optional[ArticleState] = Field(
        default=None, description="Article state (optional, default: draft)"
    )
    parent_id: Optional[str] = Field(
        default=None, description="Parent ID - collection or section ID (optional)"
    )
    parent_type: Optional[Literal["collection"]] = Field(
        default=None, description="Parent type (optional, default: collection)"
    )
    translated_content: Optional[Dict[str, ArticleTranslation]] = Field(
        default=None,
        description='Multilingual content. Key is locale code (e.g., "zh-TW"), value is translation object',
    )


class UpdateArticleInput(BaseModel):
    """Input for a partial article update."""
    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    id: ResourceId = Field(..., description="Article ID (required)")
    title: Optional[str] = Field(default=None, description="Updated article title (optional)")
    body: Optional[str] = Field(
        default=None, description="Updated article content in HTML format (optional)"
    )
    description: Optional[str] = Field(
        default=None, description="Updated article description (optional)"
    )
    state: Optional[ArticleState] = Field(default=None, description="Updated article state (optional)")
    author_id: Optional[int] = Field(default=None, description="Updated author ID (optional)")
    translated_content: Optional[Dict[str, ArticleTranslationUpdate]] = Field(
        default=None,
        description="Updated multilingual content. Only provided fields will be updated.",
    )


# ─── Collection Inputs ───────────────────────────────────────────────────────


class ListCollectionsInput(_PageInput):
    """Input for listing Help Center collections."""

    MAX_PER_PAGE: ClassVar[int] = 150

    per_page: int = Field(
        default=50, description="Number of collections per page (default: 50, max: 150)"
    )


class GetCollectionInput(BaseModel):
    """Input for retrieving a single collection."""
    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    id: ResourceId = Field(..., description='The collection ID (e.g., "123456")')


class UpdateCollectionInput(BaseModel):
    """Input for a partial collection update.

    Unlike article updates, a field counts as provided whenever the caller
    sends it, even as an empty string or null.
    """
    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    id: ResourceId = Field(..., description="Collection ID (required)")
    name: Optional[str] = Field(
        default=None, description="Updated collection name (optional, updates default language)"
    )
    description: Optional[str] = Field(
        default=None,
        description="Updated collection description (optional, updates default language)",
    )
    parent_id: Optional[str] = Field(
        default=None, description="Updated parent collection ID (optional, null for top-level)"
    )
    translated_content: Optional[Dict[str, CollectionTranslation]] = Field(
        default=None,
        description='Updated multilingual content. Key is locale code (e.g., "zh-TW"), value is translation object',
    )


class DeleteCollectionInput(BaseModel):
    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    id: ResourceId = Field(..., description="Collection ID to delete (required)")
