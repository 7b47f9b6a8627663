"""Submit post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from pinbook.domain.error import StorageFailedError
from pinbook.domain.model.post import Post
from pinbook.domain.service import ImageService, PostService, UserService
from pinbook.domain.value import UserId, new_post_id

from .common import AuthorInfo, PostItem


class SubmitPostRequest(BaseModel):
    """Submit post request."""

    title: str = Field(min_length=1, max_length=300)
    url: str = Field(min_length=1)  # Remote image, .jpg or .png
    comment: str = Field(default="", max_length=10000)
    author_id: str  # User ID from authenticated user


class SubmitPostResponse(PostItem):
    """Submit post response."""

    author: AuthorInfo


class SubmitPostUseCase:
    """Use case for sharing a new image link."""

    def __init__(
        self,
        image_service: ImageService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize submit post use case.

        Args:
            image_service: Image ingestion domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.image_service = image_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: SubmitPostRequest) -> SubmitPostResponse:
        """Execute submit post flow.

        Steps:
        1. Load the author (via UserService)
        2. Ingest the image under a fresh post ID (via ImageService)
        3. Save the post with score 1, removing the asset if that fails
        4. Credit the author's total score with the post's initial point

        Args:
            request: Submit post request

        Returns:
            The created post

        Raises:
            NotFoundError: If the author does not exist
            IngestError: If the image cannot be fetched, decoded or stored
        """
        author_id = UserId(UUID(request.author_id))
        author = await self.user_service.get_by_id(author_id)

        post_id = new_post_id()

        with logfire.span(
            "submit_post.execute",
            post_id=str(post_id),
            author_id=str(author_id),
            url=request.url,
        ):
            filename = await self.image_service.ingest(request.url, asset_id=post_id)

            post = Post(
                id=post_id,
                title=request.title,
                url=request.url,
                comment=request.comment,
                image=filename,
                score=1,
                author_id=author_id,
            )

            try:
                saved = await self.post_service.save_post(post)
            except Exception as e:
                logfire.error(
                    "Post insert failed, removing asset",
                    post_id=str(post_id),
                    filename=filename,
                    error=str(e),
                )
                await self._discard_asset(filename)
                raise

            if not await self.user_service.adjust_total_score(author_id, saved.score):
                logfire.error(
                    "Author total not raised, needs reconciliation",
                    post_id=str(saved.id),
                    author_id=str(author_id),
                    delta=saved.score,
                )

            logfire.info("Post submitted", post_id=str(saved.id), image=filename)

            return SubmitPostResponse(
                id=str(saved.id),
                title=saved.title,
                url=saved.url,
                comment=saved.comment,
                image=saved.image,
                score=saved.score,
                created_at=saved.created_at,
                author=AuthorInfo(id=str(author.id), name=author.name.root),
            )

    async def _discard_asset(self, filename: str) -> None:
        try:
            await self.image_service.remove_asset(filename)
        except StorageFailedError as e:
            # Keep the original failure; the orphan is logged for cleanup
            logfire.error("Orphaned asset", filename=filename, error=str(e))
