"""Unit tests for GetCurrentUserUseCase."""

from datetime import timedelta
from uuid import uuid4

import pytest

from pinbook.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from pinbook.config import AuthSettings
from pinbook.domain.error import NotFoundError
from pinbook.domain.repository import UserRepository
from pinbook.util.jwt import JWTError, create_token
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCurrentUser:
    """Tests for resolving the token's user."""

    @pytest.mark.asyncio
    async def test_valid_token(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        user_repo = await unit_env.get(UserRepository)
        auth_settings = await unit_env.get(AuthSettings)
        post_id = uuid4()
        user = await user_repo.save(
            make_user("alice", total_score=2, votes=frozenset({post_id}))
        )
        token = create_token(
            str(user.id), "alice", auth_settings, expires_in=timedelta(hours=1)
        )

        response = await use_case.execute(GetCurrentUserRequest(token=token))

        assert response.user_id == str(user.id)
        assert response.total_score == 2
        assert response.votes == [str(post_id)]

    @pytest.mark.asyncio
    async def test_expired_token(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        auth_settings = await unit_env.get(AuthSettings)
        token = create_token(
            str(uuid4()), "alice", auth_settings, expires_in=timedelta(seconds=-5)
        )

        with pytest.raises(JWTError, match="expired"):
            await use_case.execute(GetCurrentUserRequest(token=token))

    @pytest.mark.asyncio
    async def test_wrong_secret(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        token = create_token(
            str(uuid4()),
            "alice",
            AuthSettings(jwt_secret="someone-else"),
            expires_in=timedelta(hours=1),
        )

        with pytest.raises(JWTError, match="Invalid token"):
            await use_case.execute(GetCurrentUserRequest(token=token))

    @pytest.mark.asyncio
    async def test_subject_not_a_uuid(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        auth_settings = await unit_env.get(AuthSettings)
        token = create_token("42", "alice", auth_settings, timedelta(hours=1))

        with pytest.raises(JWTError, match="Invalid token subject"):
            await use_case.execute(GetCurrentUserRequest(token=token))

    @pytest.mark.asyncio
    async def test_user_gone(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)
        auth_settings = await unit_env.get(AuthSettings)
        token = create_token(str(uuid4()), "ghost", auth_settings, timedelta(hours=1))

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCurrentUserRequest(token=token))
