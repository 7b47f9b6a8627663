"""Domain layer errors.

Every failure the core can report is one of the variants named by
``ErrorKind``. Callers dispatch on ``error.kind`` rather than on the
exception class hierarchy.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds reported by the core."""

    # Ingestion
    FETCH_FAILED = "fetch_failed"
    UNSUPPORTED_FORMAT = "unsupported_format"
    DECODE_FAILED = "decode_failed"
    STORAGE_FAILED = "storage_failed"

    # Voting
    NOT_FOUND = "not_found"
    SELF_VOTE = "self_vote"
    ALREADY_VOTED = "already_voted"
    PARTIAL_VOTE_FAILURE = "partial_vote_failure"

    # Pagination
    INVALID_PAGE = "invalid_page"

    # Ownership
    NOT_AUTHORIZED = "not_authorized"


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind


# ----------------------------------------------------------------------------
# Ingestion
# ----------------------------------------------------------------------------


class IngestError(DomainError):
    """Base class for image ingestion failures."""

    def __init__(self, source_url: str | None, message: str):
        self.source_url = source_url
        super().__init__(message)


class FetchFailedError(IngestError):
    """The remote image could not be fetched."""

    kind = ErrorKind.FETCH_FAILED

    def __init__(self, source_url: str, reason: str):
        self.reason = reason
        super().__init__(source_url, f"Unable to fetch image {source_url}: {reason}")


class UnsupportedFormatError(IngestError):
    """The URL does not name a supported image type."""

    kind = ErrorKind.UNSUPPORTED_FORMAT

    def __init__(self, source_url: str, extension: str):
        self.extension = extension
        super().__init__(
            source_url,
            f"Not a valid image: unsupported extension {extension or '(none)'!r}",
        )


class DecodeFailedError(IngestError):
    """The fetched bytes are not a valid image of the expected format."""

    kind = ErrorKind.DECODE_FAILED

    def __init__(self, source_url: str, reason: str):
        self.reason = reason
        super().__init__(source_url, f"Unable to process image {source_url}: {reason}")


class StorageFailedError(IngestError):
    """An asset could not be written to or removed from the asset store."""

    kind = ErrorKind.STORAGE_FAILED

    def __init__(self, source_url: str | None, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(source_url, f"Asset storage failed for {filename}: {reason}")


# ----------------------------------------------------------------------------
# Lookup / ownership
# ----------------------------------------------------------------------------


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    kind = ErrorKind.NOT_AUTHORIZED

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


# ----------------------------------------------------------------------------
# Voting
# ----------------------------------------------------------------------------


class VoteError(DomainError):
    """Base class for vote rejections and failures."""

    def __init__(self, voter_id: str, post_id: str, message: str):
        self.voter_id = voter_id
        self.post_id = post_id
        super().__init__(message)


class SelfVoteError(VoteError):
    """A user tried to vote on their own post."""

    kind = ErrorKind.SELF_VOTE

    def __init__(self, voter_id: str, post_id: str):
        super().__init__(voter_id, post_id, f"Cannot vote on your own post {post_id}")


class AlreadyVotedError(VoteError):
    """The user has already voted on this post."""

    kind = ErrorKind.ALREADY_VOTED

    def __init__(self, voter_id: str, post_id: str):
        super().__init__(voter_id, post_id, f"Already voted on post {post_id}")


class PartialVoteFailureError(VoteError):
    """A vote was only partly applied and needs reconciliation.

    Attributes:
        applied: Names of the steps that did take effect
        failed_step: Name of the step that failed
    """

    kind = ErrorKind.PARTIAL_VOTE_FAILURE

    def __init__(
        self,
        voter_id: str,
        post_id: str,
        applied: list[str],
        failed_step: str,
        reason: str,
    ):
        self.applied = applied
        self.failed_step = failed_step
        self.reason = reason
        super().__init__(
            voter_id,
            post_id,
            f"Vote on post {post_id} by {voter_id} partially applied "
            f"(applied={applied}, failed={failed_step}): {reason}",
        )


# ----------------------------------------------------------------------------
# Pagination
# ----------------------------------------------------------------------------


class InvalidPageError(DomainError):
    """A page window was requested with out-of-range arguments."""

    kind = ErrorKind.INVALID_PAGE

    def __init__(self, message: str):
        super().__init__(message)
