"""Unit tests for the auth use cases."""

import pytest
from dishka import AsyncContainer

from board.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
    ResetPasswordRequest,
    ResetPasswordUseCase,
)
from board.domain.error import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    NotFoundError,
)
from board.domain.service import JWTService
from board.util.jwt import JWTError
from tests.conftest import register_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_returns_new_account(self, unit_env: AsyncContainer):
        # Arrange
        register_use_case = await unit_env.get(RegisterUseCase)

        # Act
        response = await register_use_case.execute(
            RegisterRequest(username="alice", password="secret123", name="Alice")
        )

        # Assert
        assert response.username == "alice"
        assert response.name == "Alice"
        assert response.user_id

    @pytest.mark.asyncio
    async def test_register_duplicate_username_fails(self, unit_env: AsyncContainer):
        """Registering a taken username raises DuplicateUsernameError."""
        # Arrange
        register_use_case = await unit_env.get(RegisterUseCase)
        await register_user(unit_env, "alice", "Alice")

        # Act & Assert
        with pytest.raises(DuplicateUsernameError):
            await register_use_case.execute(
                RegisterRequest(username="alice", password="another1", name="Al")
            )


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_issues_token_for_user(self, unit_env: AsyncContainer):
        """The issued token names the logged in user."""
        # Arrange
        login_use_case = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)
        user = await register_user(unit_env, "alice", "Alice")

        # Act
        response = await login_use_case.execute(
            LoginRequest(username="alice", password="secret123")
        )

        # Assert
        assert response.user_id == str(user.id)
        assert response.name == "Alice"
        payload = jwt_service.verify_token(response.token)
        assert payload.user_id == str(user.id)
        assert payload.username == "alice"

    @pytest.mark.asyncio
    async def test_login_with_wrong_password_fails(self, unit_env: AsyncContainer):
        login_use_case = await unit_env.get(LoginUseCase)
        await register_user(unit_env, "alice", "Alice")

        with pytest.raises(InvalidCredentialsError):
            await login_use_case.execute(
                LoginRequest(username="alice", password="not-it")
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", ["ab", "x" * 21, "has space"])
    async def test_login_with_malformed_username_fails_as_unknown(
        self, unit_env: AsyncContainer, username: str
    ):
        """Usernames no account could have get the uniform credentials error."""
        login_use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(InvalidCredentialsError):
            await login_use_case.execute(
                LoginRequest(username=username, password="secret123")
            )


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_token_resolves_to_user(self, unit_env: AsyncContainer):
        # Arrange
        use_case = await unit_env.get(GetCurrentUserUseCase)
        jwt_service = await unit_env.get(JWTService)
        user = await register_user(unit_env, "alice", "Alice")
        token = jwt_service.create_token(str(user.id), "alice")

        # Act
        response = await use_case.execute(GetCurrentUserRequest(token=token))

        # Assert
        assert response.user_id == str(user.id)
        assert response.name == "Alice"

    @pytest.mark.asyncio
    async def test_garbage_token_fails(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentUserRequest(token="not-a-jwt"))


class TestResetPasswordUseCase:
    """Tests for ResetPasswordUseCase."""

    @pytest.mark.asyncio
    async def test_reset_then_login_with_new_password(self, unit_env: AsyncContainer):
        # Arrange
        reset_use_case = await unit_env.get(ResetPasswordUseCase)
        login_use_case = await unit_env.get(LoginUseCase)
        await register_user(unit_env, "alice", "Alice")

        # Act
        await reset_use_case.execute(
            ResetPasswordRequest(username="alice", name="Alice", new_password="fresh1")
        )

        # Assert
        response = await login_use_case.execute(
            LoginRequest(username="alice", password="fresh1")
        )
        assert response.username == "alice"

    @pytest.mark.asyncio
    async def test_reset_with_name_mismatch_fails(self, unit_env: AsyncContainer):
        """The display name must match the account."""
        # Arrange
        reset_use_case = await unit_env.get(ResetPasswordUseCase)
        login_use_case = await unit_env.get(LoginUseCase)
        await register_user(unit_env, "alice", "Alice")

        # Act & Assert
        with pytest.raises(NotFoundError):
            await reset_use_case.execute(
                ResetPasswordRequest(username="alice", name="Bob", new_password="fresh1")
            )

        # Old password still valid
        await login_use_case.execute(LoginRequest(username="alice", password="secret123"))

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("username", "name"), [("ab", "Alice"), ("alice", "   "), ("alice", "x" * 21)]
    )
    async def test_reset_with_malformed_details_is_not_found(
        self, unit_env: AsyncContainer, username: str, name: str
    ):
        reset_use_case = await unit_env.get(ResetPasswordUseCase)
        await register_user(unit_env, "alice", "Alice")

        with pytest.raises(NotFoundError):
            await reset_use_case.execute(
                ResetPasswordRequest(username=username, name=name, new_password="fresh1")
            )
