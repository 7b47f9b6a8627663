"""Domain model entities for Pinbook."""

from pinbook.domain.model.page import Page, PageWindow
from pinbook.domain.model.post import Author, Post
from pinbook.domain.model.user import User
from pinbook.domain.model.vote import Vote

__all__ = [
    "Author",
    "Page",
    "PageWindow",
    "Post",
    "User",
    "Vote",
]
