"""Credential and client helpers for the pyfragments CLI."""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console

from pyfragments.auth import BearerTokenAuth
from pyfragments.config import ClientConfig
from pyfragments.services.fragments import FragmentClient
from pyfragments.utils import (
    delete_token_in_keyring,
    get_token_from_keyring,
    store_token_in_keyring,
    token_exists_in_keyring,
)

console = Console()

# State storage
config_dir = os.path.expanduser("~/.config/pyfragments")
session_path = os.path.join(config_dir, "session.json")
config_path = os.path.join(config_dir, "config.json")


def _ensure_config_dir() -> None:
    Path(config_dir).mkdir(parents=True, exist_ok=True)


def load_config() -> Dict[str, Any]:
    """Load configuration from file."""
    try:
        if os.path.exists(config_path):
            with open(config_path, "r", encoding="utf-8") as f:
                return json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        console.print(f"[yellow]Warning:[/yellow] Could not load config file: {exc}")
    return {}


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file."""
    try:
        _ensure_config_dir()
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        # Ensure file has restrictive permissions
        os.chmod(config_path, 0o600)
    except OSError as exc:
        console.print(f"[yellow]Warning:[/yellow] Could not save config file: {exc}")


def load_session_username() -> Optional[str]:
    try:
        with open(session_path, "r", encoding="utf-8") as f:
            return json.load(f).get("username")
    except (json.JSONDecodeError, OSError):
        return None


def save_session(username: str, token: str) -> None:
    """Remember the active username and keep its token in the keyring."""
    _ensure_config_dir()
    with open(session_path, "w", encoding="utf-8") as f:
        json.dump({"username": username}, f)
    os.chmod(session_path, 0o600)
    store_token_in_keyring(username, token)


def remove_session(username: Optional[str]) -> None:
    """Forget the stored token and session file."""
    if username and token_exists_in_keyring(username):
        delete_token_in_keyring(username)
    if os.path.exists(session_path):
        os.remove(session_path)


def _get_username(provided_username: Optional[str] = None) -> Optional[str]:
    # command line arg > session file > config file
    return (
        provided_username
        or load_session_username()
        or load_config().get("username")
    )


def resolve_token(
    token: Optional[str] = None, username: Optional[str] = None
) -> Optional[str]:
    """Token from option > PYFRAGMENTS_TOKEN > keyring entry of the username."""
    if token:
        return token
    env_token = os.getenv("PYFRAGMENTS_TOKEN")
    if env_token:
        return env_token
    resolved_username = _get_username(username)
    if resolved_username:
        return get_token_from_keyring(resolved_username)
    return None


def get_auth(token: Optional[str] = None) -> BearerTokenAuth:
    """Bearer credentials for the current user, or exit if there are none."""
    resolved = resolve_token(token)
    if not resolved:
        console.print(
            "[bold red]Error:[/bold red] Not logged in. "
            "Run 'pyfragments auth login' or set PYFRAGMENTS_TOKEN."
        )
        raise typer.Exit(1)
    return BearerTokenAuth(resolved)


def get_client(api_url: Optional[str] = None) -> FragmentClient:
    """FragmentClient for the API URL from option > environment > config file."""
    base_url = api_url or os.getenv("PYFRAGMENTS_API_URL") or load_config().get("api_url")
    return FragmentClient(ClientConfig.from_env(base_url))
