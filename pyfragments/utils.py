"""Utilities."""

from typing import Optional

import keyring

KEYRING_SYSTEM = "pyfragments://bearer-token"


def underscore_to_camelcase(word: str, initial_capital: bool = False) -> str:
    """Transform a word from underscores to camelcase."""
    words = [x.capitalize() or "_" for x in word.split("_")]
    if not initial_capital:
        words[0] = words[0].lower()

    return "".join(words)


def token_exists_in_keyring(username: str) -> bool:
    """Return true if a bearer token for a username exists in the keyring."""
    if not username:
        return False

    return get_token_from_keyring(username) is not None


def get_token_from_keyring(username: str) -> Optional[str]:
    """Get the bearer token stored for a username."""
    return keyring.get_password(KEYRING_SYSTEM, username)


def store_token_in_keyring(username: str, token: str) -> None:
    """Store the bearer token of a username."""
    return keyring.set_password(KEYRING_SYSTEM, username, token)


def delete_token_in_keyring(username: str) -> None:
    """Delete the bearer token of a username."""
    return keyring.delete_password(KEYRING_SYSTEM, username)
