"""Decode failed API responses into DetailedError."""

import httpx
import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from honeycomb_client.domain.errors import DetailedError, ErrorTypeDetail

logger = structlog.get_logger()

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"
REQUEST_ID_HEADER = "Request-Id"


def _null_as_empty(value: object) -> object:
    return "" if value is None else value


class _TypeDetailBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: str = ""
    field: str = ""
    description: str = ""

    _nulls = field_validator("code", "field", "description", mode="before")(_null_as_empty)

    def to_detail(self) -> ErrorTypeDetail:
        return ErrorTypeDetail(code=self.code, field=self.field, description=self.description)


class _ProblemDetailBody(BaseModel):
    """RFC7807 error body.

    A JSON null decodes like an absent member.
    """

    model_config = ConfigDict(extra="ignore")

    status: int = 0
    error: str = ""
    request_id: str = ""
    type: str = ""
    title: str = ""
    type_detail: list[_TypeDetailBody] | None = None

    _nulls = field_validator("error", "request_id", "type", "title", mode="before")(_null_as_empty)

    @field_validator("status", mode="before")
    @classmethod
    def _null_status(cls, value: object) -> object:
        return 0 if value is None else value


class _JSONAPIErrorSource(BaseModel):
    pointer: str = ""
    parameter: str = ""
    header: str = ""

    _nulls = field_validator("pointer", "parameter", "header", mode="before")(_null_as_empty)


class _JSONAPIError(BaseModel):
    code: str = ""
    title: str = ""
    detail: str = ""
    source: _JSONAPIErrorSource | None = None

    _nulls = field_validator("code", "title", "detail", mode="before")(_null_as_empty)


class _JSONAPIErrorsBody(BaseModel):
    errors: list[_JSONAPIError] = Field(default_factory=list)


def decode_error(response: httpx.Response) -> DetailedError:
    """Decode a non-2xx response into a DetailedError.

    Never fails: a body that cannot be parsed yields an error carrying the
    HTTP status and status line.
    """
    request_id = response.headers.get(REQUEST_ID_HEADER, "")
    content_type = response.headers.get("Content-Type", "").split(";")[0].strip()

    if content_type == JSONAPI_MEDIA_TYPE:
        return _decode_jsonapi(response, request_id)

    try:
        body = _ProblemDetailBody.model_validate_json(response.content)
    except ValidationError:
        logger.debug("error_body_unparseable", status_code=response.status_code, request_id=request_id)
        return _fallback(response, request_id)

    return DetailedError(
        # never trust a silent body over the transport
        status=body.status or response.status_code,
        message=body.error,
        request_id=body.request_id or request_id,
        type=body.type,
        title=body.title,
        details=tuple(detail.to_detail() for detail in body.type_detail or ()),
    )


def _fallback(response: httpx.Response, request_id: str) -> DetailedError:
    return DetailedError(
        status=response.status_code,
        message=f"{response.status_code} {response.reason_phrase}".strip(),
        request_id=request_id,
    )


def _decode_jsonapi(response: httpx.Response, request_id: str) -> DetailedError:
    try:
        payload = _JSONAPIErrorsBody.model_validate_json(response.content)
    except ValidationError:
        return _fallback(response, request_id)
    if not payload.errors:
        return _fallback(response, request_id)

    first = payload.errors[0]
    if len(payload.errors) == 1:
        return DetailedError(
            status=response.status_code,
            request_id=request_id,
            type=first.code,
            title=first.title,
            details=(ErrorTypeDetail(description=first.title, field=_source_field(first.source)),),
        )

    return DetailedError(
        status=response.status_code,
        request_id=request_id,
        title=first.title,
        details=tuple(
            ErrorTypeDetail(description=e.detail, field=_source_field(e.source)) for e in payload.errors
        ),
    )


def _source_field(source: _JSONAPIErrorSource | None) -> str:
    """Render the source of a JSON:API error, only one member is ever populated."""
    if source is None:
        return ""
    if source.pointer:
        return source.pointer
    if source.parameter:
        return f"parameter {source.parameter}"
    if source.header:
        return f"{source.header} header"
    return ""
