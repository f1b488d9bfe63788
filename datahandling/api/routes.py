"""API route handlers for the Data Handling toolkit."""

from fastapi import APIRouter, HTTPException, status

from datahandling.config import settings
from datahandling.core.schemas import (
    NormalizeRequest,
    NormalizeResponse,
    LocateRequest,
    LocateResponse,
    PathMergeRequest,
    PathNormalizeRequest,
    RelativePathRequest,
    PathResponse,
    FilterMatchRequest,
    FilterMatchResponse,
    SanitizeRequest,
    SanitizeResponse,
    UrlPartsRequest,
    ExplodeRequest,
    ExplodeResponse,
    ImplodeRequest
)
from datahandling.pipeline.filters import filter_to_pattern, filter_values
from datahandling.pipeline.path_merger import (
    as_directory,
    make_relative,
    merge_paths,
    normalize_path,
    strip_scheme
)
from datahandling.pipeline.sanitizers import (
    explode,
    implode,
    sanitize_string,
    sanitize_text,
    sanitize_url_parts
)
from datahandling.utils.logger import setup_logger, log_operation_event
from datahandling.utils.text_normalizer import locate, normalize_alphanumeric

logger = setup_logger(__name__)

# Create router
router = APIRouter(prefix=settings.api_v1_prefix, tags=["data-handling"])


def _check_size(*values: str) -> None:
    """Reject inputs larger than the configured bound."""
    total = sum(len(value) for value in values)
    if total > settings.max_input_chars:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Input exceeds maximum of {settings.max_input_chars} characters"
        )


# ============================================================================
# Text Endpoints
# ============================================================================

@router.post(
    "/normalize",
    response_model=NormalizeResponse,
    summary="Normalize text to lowercase alphanumerics"
)
async def normalize_text(request: NormalizeRequest) -> NormalizeResponse:
    """
    Normalize text and return the map of removed runs.

    Args:
        request: Text and optional extra allowed characters

    Returns:
        NormalizeResponse with normalized text and removal map
    """
    _check_size(request.text)

    normalized, removal_map = normalize_alphanumeric(
        request.text,
        extra_allowed_chars=request.extra_allowed_chars
    )
    return NormalizeResponse(normalized=normalized, removal_map=removal_map)


@router.post(
    "/locate",
    response_model=LocateResponse,
    summary="Locate a needle in the original text"
)
async def locate_text(request: LocateRequest) -> LocateResponse:
    """
    Find the needle by its alphanumeric characters only.

    Returns:
        LocateResponse with the span in original coordinates, if found
    """
    _check_size(request.haystack, request.needle)

    span = locate(request.haystack, request.needle, request.expand_boundaries)
    log_operation_event(
        logger, "locate", "Completed",
        found=span is not None,
        expand=request.expand_boundaries
    )

    if span is None:
        return LocateResponse(found=False)

    return LocateResponse(
        found=True,
        span=span,
        matched_text=span.extract(request.haystack)
    )


@router.post(
    "/filters/match",
    response_model=FilterMatchResponse,
    summary="Match values against a wildcard filter"
)
async def match_filter(request: FilterMatchRequest) -> FilterMatchResponse:
    """Return the values matching a * / ? wildcard filter."""
    _check_size(request.filter, *request.values)

    return FilterMatchResponse(
        filter=request.filter,
        pattern=filter_to_pattern(request.filter).pattern,
        matches=filter_values(request.values, request.filter)
    )


# ============================================================================
# Path Endpoints
# ============================================================================

@router.post(
    "/paths/merge",
    response_model=PathResponse,
    summary="Merge path fragments"
)
async def merge_path_fragments(request: PathMergeRequest) -> PathResponse:
    """
    Merge path fragments, optionally normalizing the result.

    Args:
        request: Fragments and formatting flags

    Returns:
        PathResponse with the merged path
    """
    _check_size(*request.fragments)

    path = merge_paths(request.fragments)
    if request.normalize:
        path = normalize_path(path)
    if request.directory:
        path = as_directory(path)

    return PathResponse(path=path, scheme=strip_scheme(path)[1])


@router.post(
    "/paths/normalize",
    response_model=PathResponse,
    summary="Normalize a path or URI"
)
async def normalize_path_string(request: PathNormalizeRequest) -> PathResponse:
    """Collapse ./.. segments and duplicate separators of a path or URI."""
    _check_size(request.path)

    path = normalize_path(request.path)
    return PathResponse(path=path, scheme=strip_scheme(path)[1])


@router.post(
    "/paths/relative",
    response_model=PathResponse,
    summary="Express a path relative to a root directory"
)
async def relative_path(request: RelativePathRequest) -> PathResponse:
    """
    Strip the root directory from a path.

    Raises:
        NotUnderRootError: Path is outside the root (handled as 400)
    """
    _check_size(request.path, request.root_directory)

    return PathResponse(path=make_relative(request.path, request.root_directory))


# ============================================================================
# Sanitizer Endpoints
# ============================================================================

@router.post(
    "/sanitize/string",
    response_model=SanitizeResponse,
    summary="Strip tags and line breaks from a string"
)
async def sanitize_string_value(request: SanitizeRequest) -> SanitizeResponse:
    """Sanitize a string, optionally keeping basic formatting tags."""
    _check_size(request.value)

    if request.allow_formatting:
        return SanitizeResponse(value=sanitize_text(request.value))
    return SanitizeResponse(value=sanitize_string(request.value))


@router.post(
    "/sanitize/url-parts",
    response_model=SanitizeResponse,
    summary="SEO-ify url parts"
)
async def sanitize_url_part_values(request: UrlPartsRequest) -> SanitizeResponse:
    """Turn url parts into a slash-separated slug."""
    _check_size(*request.parts)

    return SanitizeResponse(value=sanitize_url_parts(request.parts))


@router.post(
    "/sanitize/explode",
    response_model=ExplodeResponse,
    summary="Split a delimited string"
)
async def explode_value(request: ExplodeRequest) -> ExplodeResponse:
    """Split a string on delimiter characters, sanitizing every element."""
    _check_size(request.value)

    characters = request.characters
    if characters is None:
        characters = settings.explode_characters

    return ExplodeResponse(elements=explode(request.value, characters))


@router.post(
    "/sanitize/implode",
    response_model=SanitizeResponse,
    summary="Join values into a delimited string"
)
async def implode_values(request: ImplodeRequest) -> SanitizeResponse:
    """Sanitize values, drop empty ones and join the rest."""
    _check_size(*(value or "" for value in request.values))

    separator = request.separator
    if separator is None:
        separator = settings.implode_separator

    return SanitizeResponse(value=implode(request.values, separator))
