"""Exceptions raised by generate-license."""
from __future__ import annotations


class GenerateLicenseError(Exception):
    """Base class for errors reported to the user."""


class TemplateError(GenerateLicenseError):
    """Raised when a license template is malformed or lacks required metadata."""


class DuplicateTemplateError(TemplateError):
    """Raised when two templates claim the same SPDX id."""


class TaskError(GenerateLicenseError):
    """Raised for unknown tasks or dependency cycles."""


class ChoiceError(GenerateLicenseError):
    """Raised when no license matches the requested selection."""


class PromptCancelled(GenerateLicenseError):
    """Raised when the user aborts an interactive prompt."""
