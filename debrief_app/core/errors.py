"""Exceptions that abort a debrief before any report is produced."""

from __future__ import annotations


class DebriefError(RuntimeError):
    """Base class for fatal debrief errors."""


class ConfigError(DebriefError):
    """Required configuration is missing or invalid."""


class PayloadError(DebriefError):
    """The inbound trigger payload could not be parsed."""


class JiraClientError(DebriefError):
    """The Jira client could not be constructed."""
