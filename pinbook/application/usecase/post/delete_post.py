"""Delete post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from pinbook.domain.error import NotAuthorizedError, NotFoundError
from pinbook.domain.service import ImageService, PostService, UserService
from pinbook.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: str  # User ID from authenticated user


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    image: str


class DeletePostUseCase:
    """Use case for an author removing their own post."""

    def __init__(
        self,
        image_service: ImageService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        self.image_service = image_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        The image is removed before the record, so a storage failure leaves
        the post intact and the request can simply be retried. The score the
        post held when its row was removed is taken back out of the author's
        total.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the requester is not the author
            StorageFailedError: If the image file cannot be removed
        """
        post_id = PostId(UUID(request.post_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "delete_post.execute", post_id=str(post_id), user_id=str(user_id)
        ):
            post = await self.post_service.get_post_by_id(post_id)
            if not post:
                raise NotFoundError("Post", str(post_id))

            if post.author_id != user_id:
                logfire.warn(
                    "Unauthorized delete attempt",
                    post_id=str(post_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("post", str(post_id), str(user_id))

            await self.image_service.remove_asset(post.image)

            removed_score = await self.post_service.delete_post(post_id)
            if removed_score is None:
                # Deleted concurrently; the other request already settled the score
                raise NotFoundError("Post", str(post_id))

            if not await self.user_service.adjust_total_score(
                post.author_id, -removed_score
            ):
                logfire.error(
                    "Author total not reduced, needs reconciliation",
                    post_id=str(post_id),
                    author_id=str(post.author_id),
                    delta=-removed_score,
                )

            return DeletePostResponse(post_id=str(post_id), image=post.image)
