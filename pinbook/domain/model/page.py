"""Page window over an ordered listing."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PageWindow(BaseModel):
    """Offsets and boundary flags for one requested page."""

    model_config = ConfigDict(frozen=True)

    page: int
    skip: int = Field(ge=0)
    limit: int = Field(ge=1)
    is_first: bool
    is_last: bool


class Page(BaseModel, Generic[T]):
    """One page of results together with its window flags."""

    model_config = ConfigDict(frozen=True)

    items: list[T]
    total: int = Field(ge=0)
    page: int = Field(ge=1)
    is_first: bool
    is_last: bool
    skip: int = Field(default=0, ge=0, exclude=True)  # Internal only
