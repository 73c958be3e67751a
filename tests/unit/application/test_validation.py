"""Unit tests for the validation gateway."""

import pytest

from rede.application.dtos import (
    CreateUserInput,
    ListUsersParams,
    UpdateUserInput,
)
from rede.application.validation import InvalidInputError, validate
from rede.domain.user import Permissions, UserRole


def _rules(result) -> dict[str, str]:
    return {e.field: e.rule for e in result.errors}


class TestCreateContract:
    """Structural rules for registration payloads."""

    def test_valid_payload_produces_typed_value(self, create_payload):
        result = validate(create_payload, CreateUserInput)

        assert result.is_valid
        assert isinstance(result.value, CreateUserInput)
        assert result.value.ign == "Steve"

    def test_defaults_role_and_permissions(self, create_payload):
        data = validate(create_payload, CreateUserInput).unwrap()

        assert data.role == UserRole.MEMBER
        assert data.permissions.to_permissions() == Permissions()
        assert data.avatar_url is None
        assert data.discord == "steve#0001"

    def test_empty_payload_reports_every_required_field(self):
        result = validate({}, CreateUserInput)

        assert not result.is_valid
        assert _rules(result) == {
            "name": "missing",
            "surname": "missing",
            "ign": "missing",
            "email": "missing",
            "password": "missing",
        }

    def test_none_payload_is_treated_as_empty(self):
        result = validate(None, CreateUserInput)

        assert "name" in _rules(result)

    def test_non_object_body(self):
        result = validate(["not", "an", "object"], CreateUserInput)

        assert _rules(result) == {"body": "wrong_type"}

    @pytest.mark.parametrize(
        ("field", "value", "rule"),
        [
            ("name", 123, "wrong_type"),
            ("ign", "ab", "too_short"),
            ("discord", "ab", "too_short"),
            ("password", "12345", "too_short"),
            ("password", "x" * 73, "too_long"),
            ("email", "not-an-email", "bad_format"),
            ("avatarUrl", "not a url", "bad_format"),
            ("role", "admin", "not_in_enum"),
            ("permissions", "all", "wrong_type"),
        ],
    )
    def test_field_rules(self, create_payload, field, value, rule):
        create_payload[field] = value

        result = validate(create_payload, CreateUserInput)

        assert _rules(result) == {field: rule}

    def test_partial_permissions_rejected_on_create(self, create_payload):
        """Creation needs the full permission object when one is given."""
        create_payload["permissions"] = {"canEditPost": False}

        result = validate(create_payload, CreateUserInput)

        rules = _rules(result)
        assert "permissions.canEditPost" not in rules
        assert rules["permissions.canFixPost"] == "missing"
        assert len(rules) == 12

    def test_permission_flags_must_be_booleans(self, create_payload):
        create_payload["permissions"] = {
            **Permissions().to_storage(),
            "canEditUser": "true",
        }

        result = validate(create_payload, CreateUserInput)

        assert _rules(result) == {"permissions.canEditUser": "wrong_type"}

    def test_unknown_keys_are_dropped(self, create_payload):
        create_payload["nameWithSurname"] = "Forged Name"
        create_payload["isAdmin"] = True

        data = validate(create_payload, CreateUserInput).unwrap()

        assert not hasattr(data, "name_with_surname")
        assert not hasattr(data, "is_admin")

    def test_accepts_snake_case_field_names(self, create_payload):
        create_payload["avatar_url"] = "https://cdn.example.com/steve.png"

        data = validate(create_payload, CreateUserInput).unwrap()

        assert data.avatar_url == "https://cdn.example.com/steve.png"

    def test_urls_and_emails_are_kept_as_sent(self, create_payload):
        create_payload["avatarUrl"] = "https://CDN.example.com"
        create_payload["email"] = "Steve@EXAMPLE.COM"

        data = validate(create_payload, CreateUserInput).unwrap()

        assert data.avatar_url == "https://CDN.example.com"
        assert data.email == "Steve@EXAMPLE.COM"

    def test_display_name_email_rejected(self, create_payload):
        create_payload["email"] = "Steve <steve@example.com>"

        assert _rules(validate(create_payload, CreateUserInput)) == {
            "email": "bad_format",
        }

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("name", "n" * 256),
            ("surname", "s" * 256),
            ("ign", "i" * 256),
            ("discord", "d" * 256),
            ("email", "e" * 250 + "@example.com"),
            ("avatarUrl", "https://cdn.example.com/" + "a" * 2050),
        ],
    )
    def test_values_longer_than_columns_are_too_long(
        self,
        create_payload,
        field,
        value,
    ):
        create_payload[field] = value

        assert _rules(validate(create_payload, CreateUserInput)) == {field: "too_long"}


class TestUpdateContract:
    """Every field optional, same per-field rules."""

    def test_empty_update_is_valid(self):
        data = validate({}, UpdateUserInput).unwrap()

        assert data.model_dump(exclude_none=True) == {}

    def test_partial_permissions_allowed(self):
        data = validate({"permissions": {"canEditPost": False}}, UpdateUserInput).unwrap()

        assert data.permissions is not None
        assert data.permissions.supplied() == {"can_edit_post": False}

    @pytest.mark.parametrize(
        ("field", "value", "rule"),
        [
            ("discord", "ab", "too_short"),
            ("ign", "x", "too_short"),
            ("email", "steve@", "bad_format"),
            ("password", "123", "too_short"),
            ("role", "owner", "not_in_enum"),
        ],
    )
    def test_same_rules_as_create(self, field, value, rule):
        result = validate({field: value}, UpdateUserInput)

        assert _rules(result) == {field: rule}

    def test_null_means_not_supplied(self):
        data = validate({"name": None, "permissions": None}, UpdateUserInput).unwrap()

        assert data.name is None
        assert data.permissions is None


class TestListParams:
    def test_defaults(self):
        params = validate({}, ListUsersParams).unwrap()

        assert params.limit == 10
        assert params.page == 1
        assert params.offset == 0

    def test_query_strings_are_parsed(self):
        params = validate({"page": "2", "limit": "10"}, ListUsersParams).unwrap()

        assert params.offset == 10
        assert params.limit == 10

    def test_large_limit_is_accepted(self):
        params = validate({"page": "1", "limit": "200"}, ListUsersParams).unwrap()

        assert params.limit == 200

    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            ({"limit": "0"}, {"limit": "too_small"}),
            ({"page": "0"}, {"page": "too_small"}),
            ({"page": "two"}, {"page": "wrong_type"}),
        ],
    )
    def test_invalid_values(self, query, expected):
        assert _rules(validate(query, ListUsersParams)) == expected


class TestUnwrap:
    def test_unwrap_raises_with_field_errors(self):
        result = validate({"ign": "ab"}, CreateUserInput)

        with pytest.raises(InvalidInputError) as exc_info:
            result.unwrap()

        fields = {e.field for e in exc_info.value.errors}
        assert {"ign", "name", "email"} <= fields
        assert exc_info.value.details["errors"]
