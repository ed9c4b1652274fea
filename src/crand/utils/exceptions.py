"""Custom exceptions for crand."""

from __future__ import annotations


class CrandError(Exception):
    """Base exception for crand."""


class ConfigError(CrandError):
    """Invalid configuration."""


class StateError(CrandError):
    """Raw engine state that cannot be restored."""


class ContractError(CrandError, TypeError):
    """Object does not model the uniform random bit generator contract."""
