"""
Data models for acf-builder.

This module contains Pydantic models for:
- Definition checks (issues found before a field is finalized)
"""

from acf_builder.models.validation_result import (
    DefinitionCheck,
    FieldIssue,
)

__all__ = [
    "DefinitionCheck",
    "FieldIssue",
]
