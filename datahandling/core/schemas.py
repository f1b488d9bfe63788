"""Canonical data models and request/response schemas for the toolkit."""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, ConfigDict, field_validator


# ============================================================================
# Core Data Model
# ============================================================================

# Ordered (position_in_result, removed_length) pairs produced by normalization.
RemovalMap = List[Tuple[int, int]]


class MatchSpan(BaseModel):
    """
    A located match expressed in coordinates of the original, unnormalized text.

    Attributes:
        offset: 0-indexed start character in the original text
        length: Number of original characters covered by the match
    """
    model_config = ConfigDict(frozen=True)

    offset: int = Field(..., ge=0, description="Start offset in the original text")
    length: int = Field(..., ge=0, description="Length in the original text")

    @property
    def end(self) -> int:
        """Exclusive end offset in the original text."""
        return self.offset + self.length

    def extract(self, text: str) -> str:
        """Return the slice of `text` covered by this span."""
        return text[self.offset:self.end]

    def as_tuple(self) -> Tuple[int, int]:
        return (self.offset, self.length)


# ============================================================================
# API Request/Response Models
# ============================================================================

class NormalizeRequest(BaseModel):
    """Request model for alphanumeric normalization."""
    text: str = Field(..., description="Raw text to normalize")
    extra_allowed_chars: str = Field(
        default="",
        description="Additional characters preserved through normalization"
    )


class NormalizeResponse(BaseModel):
    """Response model for alphanumeric normalization."""
    normalized: str
    removal_map: RemovalMap = Field(
        default_factory=list,
        description="(position_in_result, removed_length) pairs"
    )


class LocateRequest(BaseModel):
    """Request model for locating a needle in a haystack."""
    haystack: str = Field(..., description="Original text to search in")
    needle: str = Field(..., description="Text to look for")
    expand_boundaries: bool = Field(
        default=False,
        description="Include adjacent non-alphanumeric filler in the span"
    )


class LocateResponse(BaseModel):
    """Response model for a locate operation."""
    found: bool
    span: Optional[MatchSpan] = None
    matched_text: Optional[str] = None


class PathMergeRequest(BaseModel):
    """Request model for merging path fragments."""
    fragments: List[str] = Field(default_factory=list, description="Ordered path fragments")
    normalize: bool = Field(default=True, description="Collapse ./.. segments after merging")
    directory: bool = Field(default=False, description="Guarantee a trailing separator")


class PathNormalizeRequest(BaseModel):
    """Request model for normalizing a single path or URI."""
    path: str


class RelativePathRequest(BaseModel):
    """Request model for expressing a path relative to a root directory."""
    path: str
    root_directory: str

    @field_validator("root_directory")
    @classmethod
    def validate_root_directory(cls, v: str) -> str:
        """Ensure a root directory is given."""
        if not v.strip():
            raise ValueError("root_directory must not be empty")
        return v


class PathResponse(BaseModel):
    """Response model for path operations."""
    path: str
    scheme: str = Field(default="", description="URI scheme that was preserved, if any")


class FilterMatchRequest(BaseModel):
    """Request model for wildcard filter matching."""
    filter: str = Field(..., description="Filter using * and ? wildcards")
    values: List[str] = Field(default_factory=list)


class FilterMatchResponse(BaseModel):
    """Response model for wildcard filter matching."""
    filter: str
    pattern: str
    matches: List[str] = Field(default_factory=list)


class SanitizeRequest(BaseModel):
    """Request model for string sanitization."""
    value: str
    allow_formatting: bool = Field(
        default=False,
        description="Keep bold/italic/line break tags"
    )


class SanitizeResponse(BaseModel):
    """Response model for string sanitization."""
    value: Optional[str] = None


class UrlPartsRequest(BaseModel):
    """Request model for SEO url part sanitization."""
    parts: List[str] = Field(..., min_length=1)


class ExplodeRequest(BaseModel):
    """Request model for splitting a delimited string."""
    value: str
    characters: Optional[str] = Field(
        default=None,
        description="Delimiter characters; configured default when omitted"
    )


class ExplodeResponse(BaseModel):
    """Response model for a split string."""
    elements: List[str] = Field(default_factory=list)


class ImplodeRequest(BaseModel):
    """Request model for joining values into a delimited string."""
    values: List[Optional[str]] = Field(default_factory=list)
    separator: Optional[str] = Field(
        default=None,
        description="Separator; configured default when omitted"
    )
