"""Validation utilities for data store names, scopes and keys."""

from config import get_settings
from sinklog.core.exceptions import DataStoreInputError


def _resolve_limit(key_length_limit: int | None) -> int:
    if key_length_limit is not None:
        return key_length_limit
    return get_settings().datastore_key_length_limit


def check_name_and_scope(
    name: str,
    scope: str,
    all_scopes: bool = False,
    key_length_limit: int | None = None,
) -> None:
    """Validate a data store name and scope.

    Args:
        name: Data store name
        scope: Data store scope; must be empty when ``all_scopes`` is set
        all_scopes: Whether the data store spans every scope
        key_length_limit: Maximum length (defaults to the
            ``datastore_key_length_limit`` setting)

    Raises:
        DataStoreInputError: If the name or scope is empty or too long

    Examples:
        >>> check_name_and_scope("PlayerData", "global")
        >>> check_name_and_scope("PlayerData", "", all_scopes=True)
    """
    limit = _resolve_limit(key_length_limit)

    if all_scopes and len(scope) > 0:
        raise DataStoreInputError(
            "DataStore scope should be an empty string when all_scopes is set"
        )
    if len(scope) == 0 and not all_scopes:
        raise DataStoreInputError("DataStore scope can't be empty string")
    if len(scope) > limit and not all_scopes:
        raise DataStoreInputError("DataStore scope is too long")
    if len(name) == 0:
        raise DataStoreInputError("DataStore name can't be empty string")
    if len(name) > limit:
        raise DataStoreInputError("DataStore name is too long")


def check_key(key: str, key_length_limit: int | None = None) -> tuple[bool, str | None]:
    """Validate a data store key.

    Returns:
        Tuple of (is_valid, error_message); error_message is None for a
        valid key rather than an empty string

    Examples:
        >>> check_key("coins", key_length_limit=50)
        (True, None)
        >>> check_key("", key_length_limit=50)
        (False, "Key name can't be empty")
    """
    if len(key) == 0:
        return False, "Key name can't be empty"
    if len(key) > _resolve_limit(key_length_limit):
        return False, "Key name is too long"
    return True, None
