"""Unit tests for name validation (todolists.validation)."""

import pytest

from todolists.models import TodoList
from todolists.validation import (
    DuplicateName,
    InvalidLength,
    ValidationError,
    validate_list_name,
    validate_todo_name,
)


class TestValidateListName:
    """Tests for validate_list_name."""

    @pytest.mark.parametrize("name", ["", "x" * 101, "y" * 250])
    def test_rejects_bad_length(self, name):
        error = validate_list_name(name, [])

        assert isinstance(error, InvalidLength)
        assert error.message == "List name must be between 1 and 100 characters."

    @pytest.mark.parametrize("name", ["a", "Groceries", "z" * 100])
    def test_accepts_valid_unique_name(self, name):
        existing = [TodoList(name="Chores"), TodoList(name="Errands")]

        assert validate_list_name(name, existing) is None

    def test_rejects_duplicate(self):
        existing = [TodoList(name="Chores")]

        error = validate_list_name("Chores", existing)

        assert isinstance(error, DuplicateName)
        assert error.message == "List name must be unique."

    def test_duplicate_check_is_case_sensitive(self):
        existing = [TodoList(name="Chores")]

        assert validate_list_name("chores", existing) is None

    def test_length_checked_before_uniqueness(self):
        existing = [TodoList(name="")]

        assert isinstance(validate_list_name("", existing), InvalidLength)

    def test_errors_share_base_class(self):
        assert issubclass(InvalidLength, ValidationError)
        assert issubclass(DuplicateName, ValidationError)


class TestValidateTodoName:
    """Tests for validate_todo_name."""

    @pytest.mark.parametrize("name", ["", "x" * 101])
    def test_rejects_bad_length(self, name):
        error = validate_todo_name(name)

        assert isinstance(error, InvalidLength)
        assert error.message == "Todo must be between 1 and 100 characters."

    @pytest.mark.parametrize("name", ["a", "Buy milk", "z" * 100])
    def test_accepts_valid_name(self, name):
        assert validate_todo_name(name) is None
