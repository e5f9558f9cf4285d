"""Unit tests for TimestampedModel.revised."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from tests.conftest import make_post


class TestRevised:
    """Tests for validated entity edits."""

    def test_applies_changes_and_bumps_updated_at(self):
        created = datetime(2024, 1, 1, 12, 0, 0)
        post = make_post(title="Old", created_at=created)

        revised = post.revised(title="New")

        assert revised.title == "New"
        assert revised.id == post.id
        assert revised.author == post.author
        assert revised.created_at == created
        assert revised.updated_at > created
        assert post.title == "Old"

    def test_validates_new_values(self):
        post = make_post()

        with pytest.raises(ValidationError):
            post.revised(title="")

    def test_none_clears_optional_field(self):
        post = make_post(image_path="/posts/2024/01/a.png")

        assert post.revised(image_path=None).image_path is None
