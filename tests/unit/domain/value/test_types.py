"""Unit tests for value objects."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from board.domain.value import Actor, AuthorName, DisplayName, UserId, Username


class TestUsername:
    """Tests for Username validation."""

    @pytest.mark.parametrize("value", ["abc", "alice_01", "a.b-c", "x" * 20])
    def test_accepts_valid_usernames(self, value):
        assert Username(value).root == value

    @pytest.mark.parametrize("value", ["ab", "x" * 21, "has space", "", "émile"])
    def test_rejects_invalid_usernames(self, value):
        with pytest.raises(ValidationError):
            Username(value)


class TestDisplayName:
    """Tests for DisplayName validation."""

    def test_rejects_blank(self):
        with pytest.raises(ValidationError, match="blank"):
            DisplayName("   ")

    def test_rejects_too_long(self):
        with pytest.raises(ValidationError, match="1-20"):
            DisplayName("x" * 21)

    def test_str_returns_value(self):
        assert str(DisplayName("Alice")) == "Alice"


class TestAuthorName:
    """Tests for AuthorName validation."""

    def test_allows_up_to_fifty_characters(self):
        assert AuthorName("x" * 50).root == "x" * 50

    def test_rejects_longer_names(self):
        with pytest.raises(ValidationError):
            AuthorName("x" * 51)


class TestActor:
    """Tests for Actor ownership checks."""

    def test_can_modify_own_content(self):
        actor = Actor(user_id=UserId(uuid4()), display_name=DisplayName("Alice"))

        assert actor.can_modify(AuthorName("Alice"))
        assert actor.author == AuthorName("Alice")

    def test_cannot_modify_others_content(self):
        actor = Actor(user_id=UserId(uuid4()), display_name=DisplayName("Alice"))

        assert not actor.can_modify(AuthorName("alice"))
        assert not actor.can_modify(AuthorName("Bob"))
