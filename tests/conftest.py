"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from io import BytesIO
from uuid import uuid4

from PIL import Image

from pinbook.domain.model import Post, User
from pinbook.domain.value import PostId, UserId, UserName, new_post_id


def make_image(fmt: str = "PNG", size: tuple[int, int] = (40, 30)) -> bytes:
    """Encode a solid colour test image.

    Args:
        fmt: Pillow codec name ("JPEG", "PNG", "GIF")
        size: (width, height)

    Returns:
        Encoded image bytes
    """
    image = Image.new("RGB", size, color=(200, 80, 40))
    buffer = BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


def make_user(name: str = "alice", **overrides) -> User:
    """Build a user with a fresh ID."""
    fields = {"id": UserId(uuid4()), "name": UserName(name)}
    fields.update(overrides)
    return User(**fields)


def make_post(
    author_id: UserId,
    title: str = "Test Post",
    post_id: PostId | None = None,
    age: timedelta = timedelta(0),
    **overrides,
) -> Post:
    """Build a post by ``author_id``.

    Args:
        author_id: Author of the post
        title: Post title
        post_id: Explicit ID (fresh if None)
        age: How long ago the post was created
        **overrides: Any other Post field
    """
    post_id = post_id or new_post_id()
    fields = {
        "id": post_id,
        "title": title,
        "url": f"https://images.example.com/{post_id.hex}.png",
        "image": f"{post_id.hex}.png",
        "author_id": author_id,
        "created_at": datetime.now(timezone.utc) - age,
    }
    fields.update(overrides)
    return Post(**fields)
