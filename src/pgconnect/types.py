"""Shared types for the pgconnect package."""

from typing import Any

Row = tuple[Any, ...]
Params = tuple | list
