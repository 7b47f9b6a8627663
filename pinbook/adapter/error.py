"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ImageProcessingError(AdapterError):
    """Image bytes could not be decoded or re-encoded."""

    pass
