"""Base class for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests swap out
Component = Literal["persistence", "fetcher", "storage"]


class ProviderBase(Provider):
    """Provider with the metadata ``get_provider`` selects on.

    A swappable component declares ``__mock_component__`` on its base
    class; each implementation subclasses that base and sets ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
