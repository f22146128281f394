"""
Definition check models.

These models represent the outcome of FieldDescriptor.check().
"""

from typing import Any

from pydantic import BaseModel, Field


class FieldIssue(BaseModel):
    """Problem with a single descriptor attribute."""

    attribute: str = Field(..., description="Name of the attribute with the issue")
    issue_type: str = Field(..., description="Kind of issue: missing, prefix, format, range")
    message: str = Field(..., description="Human-readable explanation")
    received: Any | None = Field(default=None, description="Offending value")


class DefinitionCheck(BaseModel):
    """Result of checking a field definition before it is finalized."""

    field_class: str = Field(..., description="Descriptor class that was checked")
    issues: list[FieldIssue] = Field(
        default_factory=list, description="List of definition issues"
    )

    @property
    def is_valid(self) -> bool:
        """True when no issues were found."""
        return not self.issues

    @property
    def issue_count(self) -> int:
        """Get the number of issues."""
        return len(self.issues)

    def get_attribute_issues(self, attribute: str) -> list[FieldIssue]:
        """Get all issues for a specific attribute."""
        return [i for i in self.issues if i.attribute == attribute]

    def to_issue_dict(self) -> dict[str, list[str]]:
        """Convert issues to a dict mapping attribute names to messages."""
        result: dict[str, list[str]] = {}
        for issue in self.issues:
            result.setdefault(issue.attribute, []).append(issue.message)
        return result
