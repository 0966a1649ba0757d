"""Tests for the Category entity."""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from ddd_kit_catalog.domain.category import Category
from ddd_kit_core.domain.identifiers import Uuid
from ddd_kit_core.primitives.exceptions import EntityValidationError
from ddd_kit_core.testing import assert_contains_error_messages


class TestCategoryConstructor:
    def test_default_values(self) -> None:
        category = Category(name="Movie")

        assert isinstance(category.category_id, Uuid)
        assert category.name == "Movie"
        assert category.description is None
        assert category.is_active is True
        assert isinstance(category.created_at, datetime)
        assert category.created_at.tzinfo == timezone.utc

    def test_all_values(self) -> None:
        created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        category = Category(
            name="Movie",
            description="Movie description",
            is_active=False,
            created_at=created_at,
        )

        assert category.name == "Movie"
        assert category.description == "Movie description"
        assert category.is_active is False
        assert category.created_at == created_at

    @pytest.mark.parametrize("category_id", [None, "omitted", Uuid()])
    def test_category_id_field(self, category_id: Uuid | str | None) -> None:
        if category_id == "omitted":
            category = Category(name="Movie")
        else:
            category = Category(name="Movie", category_id=category_id)

        assert isinstance(category.category_id, Uuid)
        if isinstance(category_id, Uuid):
            assert category.category_id is category_id

    def test_entity_id_is_category_id(self) -> None:
        category = Category(name="Movie")

        assert category.entity_id is category.category_id

    def test_equality_by_identity(self) -> None:
        uuid = Uuid()

        assert Category(category_id=uuid, name="Movie") == Category(
            category_id=uuid, name="Documentary", is_active=False
        )
        assert Category(name="Movie") != Category(name="Movie")


class TestCategoryCreate:
    def test_create(self) -> None:
        category = Category.create(name="Movie")

        assert isinstance(category.category_id, Uuid)
        assert category.name == "Movie"
        assert category.description is None
        assert category.is_active is True

    def test_create_with_description_and_is_active(self) -> None:
        category = Category.create(
            name="Movie", description="Movie description", is_active=False
        )

        assert category.description == "Movie description"
        assert category.is_active is False

    def test_create_validates_once(self) -> None:
        with patch.object(
            Category, "validate_fields", wraps=Category.validate_fields
        ) as spy:
            Category.create(name="Movie")

        spy.assert_called_once()


class TestCategoryCommands:
    def test_change_name(self) -> None:
        category = Category(name="Movie")

        category.change_name("Other name")

        assert category.name == "Other name"

    def test_change_description(self) -> None:
        category = Category(name="Movie")

        category.change_description("Some description")
        assert category.description == "Some description"

        category.change_description(None)
        assert category.description is None

    def test_activate(self) -> None:
        category = Category(name="Movie", is_active=False)

        category.activate()

        assert category.is_active is True

    def test_deactivate(self) -> None:
        category = Category(name="Movie")

        category.deactivate()

        assert category.is_active is False


class TestCategoryValidator:
    def test_create_rejects_invalid_name(self) -> None:
        assert_contains_error_messages(
            lambda: Category.create(name=None),  # type: ignore[arg-type]
            {"name": ["Input should be a valid string"]},
        )
        assert_contains_error_messages(
            lambda: Category.create(name=""),
            {"name": ["String should have at least 1 character"]},
        )
        assert_contains_error_messages(
            lambda: Category.create(name=5),  # type: ignore[arg-type]
            {"name": ["Input should be a valid string"]},
        )
        assert_contains_error_messages(
            lambda: Category.create(name="t" * 256),
            {"name": ["String should have at most 255 characters"]},
        )

    def test_create_accepts_name_at_max_length(self) -> None:
        assert Category.create(name="t" * 255).name == "t" * 255

    def test_create_rejects_invalid_description(self) -> None:
        assert_contains_error_messages(
            lambda: Category.create(name="Movie", description=5),  # type: ignore[arg-type]
            {"description": ["Input should be a valid string"]},
        )

    def test_create_rejects_invalid_is_active(self) -> None:
        assert_contains_error_messages(
            lambda: Category.create(name="Movie", is_active=2),  # type: ignore[arg-type]
            {"is_active": ["Input should be a valid boolean"]},
        )

    def test_create_collects_errors_for_every_field(self) -> None:
        with pytest.raises(EntityValidationError) as exc_info:
            Category.create(name="", description=1, is_active="yes")  # type: ignore[arg-type]

        assert set(exc_info.value.errors) == {"name", "description", "is_active"}

    @pytest.mark.parametrize(
        ("name", "message"),
        [
            (None, "Input should be a valid string"),
            ("", "String should have at least 1 character"),
            (5, "Input should be a valid string"),
            ("t" * 256, "String should have at most 255 characters"),
        ],
    )
    def test_change_name_rejects_invalid_name(self, name: object, message: str) -> None:
        category = Category.create(name="Movie")

        assert_contains_error_messages(
            lambda: category.change_name(name),  # type: ignore[arg-type]
            {"name": [message]},
        )
        assert category.name == "Movie"

    def test_change_description_rejects_invalid_description(self) -> None:
        category = Category.create(name="Movie", description="Original")

        assert_contains_error_messages(
            lambda: category.change_description(1),  # type: ignore[arg-type]
            {"description": ["Input should be a valid string"]},
        )
        assert category.description == "Original"

    def test_rebuilt_category_with_invalid_name_accepts_description_change(
        self,
    ) -> None:
        category = Category(name="")

        category.change_description("Some description")

        assert category.description == "Some description"
        assert_contains_error_messages(
            lambda: category.change_name(""),
            {"name": ["String should have at least 1 character"]},
        )
