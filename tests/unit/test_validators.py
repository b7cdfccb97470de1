"""Unit tests for data store input validators."""

from unittest.mock import patch

import pytest

from config import Settings
from sinklog.core.exceptions import DataStoreInputError
from sinklog.validators import check_key, check_name_and_scope


class TestCheckNameAndScope:
    """Tests for check_name_and_scope function."""

    def test_valid_name_and_scope(self) -> None:
        check_name_and_scope("PlayerData", "global", key_length_limit=50)

    def test_all_scopes_with_empty_scope(self) -> None:
        check_name_and_scope("PlayerData", "", all_scopes=True, key_length_limit=50)

    @pytest.mark.parametrize(
        ("name", "scope", "all_scopes", "message"),
        [
            ("PlayerData", "global", True, "should be an empty string"),
            ("PlayerData", "", False, "scope can't be empty"),
            ("PlayerData", "s" * 51, False, "scope is too long"),
            ("", "global", False, "name can't be empty"),
            ("n" * 51, "global", False, "name is too long"),
            ("n" * 51, "", True, "name is too long"),
        ],
    )
    def test_invalid_inputs(self, name: str, scope: str, all_scopes: bool, message: str) -> None:
        with pytest.raises(DataStoreInputError, match=message):
            check_name_and_scope(name, scope, all_scopes=all_scopes, key_length_limit=50)

    def test_limit_is_inclusive(self) -> None:
        check_name_and_scope("n" * 50, "s" * 50, key_length_limit=50)

    def test_limit_defaults_to_setting(self) -> None:
        """Test the limit is read from settings when not given."""
        with patch(
            "sinklog.validators.get_settings",
            return_value=Settings(_env_file=None, datastore_key_length_limit=3),
        ):
            with pytest.raises(DataStoreInputError, match="name is too long"):
                check_name_and_scope("abcd", "abc")


class TestCheckKey:
    """Tests for check_key function."""

    def test_valid_key(self) -> None:
        assert check_key("coins", key_length_limit=50) == (True, None)

    def test_empty_key(self) -> None:
        assert check_key("", key_length_limit=50) == (False, "Key name can't be empty")

    def test_too_long_key(self) -> None:
        assert check_key("k" * 51, key_length_limit=50) == (False, "Key name is too long")

    def test_default_limit(self) -> None:
        with patch(
            "sinklog.validators.get_settings",
            return_value=Settings(_env_file=None),
        ):
            assert check_key("k" * 50) == (True, None)
            assert check_key("k" * 51) == (False, "Key name is too long")
