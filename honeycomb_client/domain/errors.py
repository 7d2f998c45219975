"""Domain errors."""

from dataclasses import dataclass, field

NOT_FOUND = 404


class HoneycombError(Exception):
    """Base client error."""


class ConfigurationError(HoneycombError):
    """Client configuration is missing or invalid."""


class SerializationError(HoneycombError):
    """Request body could not be encoded or response body could not be decoded."""


class DatasetExistsError(HoneycombError):
    """Dataset already exists."""


class InvalidQuerySpecError(HoneycombError):
    """Query specification failed local validation."""


class InvalidFilterValueError(HoneycombError, ValueError):
    """Filter value does not match the variant its operator requires."""


@dataclass(frozen=True)
class ErrorTypeDetail:
    """Field-level detail of a problem-detail error."""

    code: str = ""
    field: str = ""
    description: str = ""

    def __str__(self) -> str:
        response = ""
        if self.code:
            response += self.code
            if self.field or self.description:
                response += " "

        if self.field:
            response += self.field
            if self.description:
                response += " - "

        if self.description:
            response += self.description

        return response


@dataclass(eq=False)
class DetailedError(HoneycombError):
    """RFC7807 'problem detail' error returned by the API.

    Attributes:
        status: HTTP status code of the failed response, always populated.
        message: Top-level error message.
        request_id: ID of the request that caused the error, if known.
        type: URI identifying the kind of problem.
        title: Human-readable summary of the problem type.
        details: Ordered field-level details.
    """

    status: int = 0
    message: str = ""
    request_id: str = ""
    type: str = ""
    title: str = ""
    details: tuple[ErrorTypeDetail, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        Exception.__init__(self, self.status, self.message)

    def __str__(self) -> str:
        if self.details:
            return "\n".join(str(detail) for detail in self.details)
        return self.message

    @property
    def is_not_found(self) -> bool:
        """True if the error is an HTTP 404."""
        return self.status == NOT_FOUND


def is_not_found(error: BaseException | None) -> bool:
    """Return True if error is a not-found DetailedError.

    Safe to call with None or with any other exception.
    """
    if error is None or not isinstance(error, DetailedError):
        return False
    return error.is_not_found
