"""Application-level exception types for genchat."""

from __future__ import annotations


class GenchatError(Exception):
    """Base exception for genchat."""


class ConfigurationError(GenchatError):
    """Base exception for configuration and startup validation errors."""


class ApiKeyNotConfiguredError(ConfigurationError):
    """Raised when the API key is missing from the environment."""


class ChannelError(GenchatError):
    """Base exception for conversation channel failures."""


class ChannelOpenError(ChannelError):
    """Raised when the conversation channel cannot be opened."""


class ChannelReplyError(ChannelError):
    """Raised when the model reply carries an error or no text."""
