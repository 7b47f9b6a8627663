"""Interface layer errors.

Domain failures reach the HTTP boundary as ``DomainError`` subclasses and
are translated here, by ``kind``, in one place.
"""

import logfire
from fastapi import HTTPException, status

from pinbook.domain.error import DomainError, ErrorKind, PartialVoteFailureError

STATUS_BY_KIND: dict[ErrorKind, int] = {
    # Ingestion: the submitted URL is the problem
    ErrorKind.FETCH_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNSUPPORTED_FORMAT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DECODE_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorKind.STORAGE_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    # Voting
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.SELF_VOTE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ALREADY_VOTED: status.HTTP_409_CONFLICT,
    ErrorKind.PARTIAL_VOTE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    # Pagination
    ErrorKind.INVALID_PAGE: status.HTTP_422_UNPROCESSABLE_ENTITY,
    # Ownership
    ErrorKind.NOT_AUTHORIZED: status.HTTP_403_FORBIDDEN,
}

_unmapped = set(ErrorKind) - STATUS_BY_KIND.keys()
if _unmapped:
    raise RuntimeError(f"No HTTP status for error kinds: {sorted(_unmapped)}")


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error."""
    return STATUS_BY_KIND[error.kind]


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error into the HTTP response for it.

    Server-side failures are logged with their details but answered with a
    generic message.
    """
    code = status_for(error)

    if code >= 500:
        logfire.error(
            "Request failed",
            kind=error.kind.value,
            error=str(error),
            applied=error.applied
            if isinstance(error, PartialVoteFailureError)
            else None,
        )
        return HTTPException(
            status_code=code,
            detail={"kind": error.kind.value, "message": "Internal error"},
        )

    logfire.warn("Request rejected", kind=error.kind.value, error=str(error))
    return HTTPException(
        status_code=code,
        detail={"kind": error.kind.value, "message": str(error)},
    )
