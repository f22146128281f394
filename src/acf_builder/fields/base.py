"""
Base field descriptor.

A descriptor is a mutable bag of named attributes that is filled through
chained setters and finalized into a plain record by build(). The record
is what the host plugin expects for a locally registered field.
"""

import copy
import logging
import re
from typing import Any, Optional

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from acf_builder.config import get_config
from acf_builder.errors import FieldDefinitionError
from acf_builder.host import HostRegistrar, get_default_host
from acf_builder.models.validation_result import DefinitionCheck, FieldIssue
from acf_builder.naming import generate_name, generate_unique_prefix

logger = logging.getLogger("acf-builder")

# Every finalized key starts with this
KEY_LITERAL = "field_"

VALID_NAME = re.compile(r"^[a-z0-9_]+$")


class FieldWrapper(BaseModel):
    """HTML attributes given to the element wrapping the field."""

    width: str = Field(default="", description="Width, e.g. '50' for 50%")
    class_: str = Field(default="", alias="class", description="CSS class names")
    id: str = Field(default="", description="Element id")

    model_config = {"populate_by_name": True}


class FieldDescriptor(BaseModel):
    """
    Builder for a single host field definition.

    Every declared model field is part of the output record, in declaration
    order. Subclasses add their own attributes after the base ones.

    Example:
        >>> record = (
        ...     FieldDescriptor()
        ...     .set_prefix("group_home")
        ...     .set_label("Hero Title")
        ...     .set_required(1)
        ...     .build()
        ... )
        >>> record["name"]
        'hero_title'
    """

    key: str = Field(default="", description="Unique identifier, starts with 'field_'")
    label: str = Field(default="", description="Visible when editing the field value")
    name: str = Field(default="", description="Used to save and load data")
    type: str = Field(
        default_factory=lambda: get_config().default_type,
        description="Field kind (text, textarea, image, ...)",
    )
    parent: str = Field(default="", description="Field group key")
    instructions: str = Field(default="", description="Instructions shown to authors")
    required: int = Field(default=0, description="1 if a value is required")
    conditional_logic: Any = Field(
        default=0, description="Show/hide rules, passed through untouched"
    )
    wrapper: FieldWrapper = Field(default_factory=FieldWrapper)
    default_value: str = Field(default="", description="Used until a value is saved")

    # Seeds key generation only; never part of the record
    _prefix: str = PrivateAttr(default="")

    model_config = {"validate_assignment": True}

    @field_validator("key")
    @classmethod
    def key_has_literal(cls, value: str) -> str:
        if value and not value.startswith(KEY_LITERAL):
            raise ValueError(f"key must start with '{KEY_LITERAL}', got {value!r}")
        return value

    @property
    def prefix(self) -> str:
        return self._prefix

    def set_prefix(self, prefix: str) -> "FieldDescriptor":
        self._prefix = prefix
        return self

    def set_key(self, key: str) -> "FieldDescriptor":
        """Set the key; the field_ literal is prepended."""
        self.key = KEY_LITERAL + key
        return self

    def set_label(self, label: str) -> "FieldDescriptor":
        self.label = label
        return self

    def set_name(self, name: str) -> "FieldDescriptor":
        self.name = name
        return self

    def set_type(self, type: str) -> "FieldDescriptor":
        self.type = type
        return self

    def set_parent(self, parent: str) -> "FieldDescriptor":
        self.parent = parent
        return self

    def set_instructions(self, instructions: str) -> "FieldDescriptor":
        self.instructions = instructions
        return self

    def set_required(self, required: int) -> "FieldDescriptor":
        self.required = required
        return self

    def set_conditional_logic(self, conditional_logic: Any) -> "FieldDescriptor":
        self.conditional_logic = conditional_logic
        return self

    def set_wrapper(self, width: str, class_: str, id_: str) -> "FieldDescriptor":
        """Replace the whole wrapper record."""
        self.wrapper = FieldWrapper(width=width, class_=class_, id=id_)
        return self

    def set_default_value(self, default_value: str) -> "FieldDescriptor":
        self.default_value = default_value
        return self

    def generate_name(self, label: str) -> str:
        return generate_name(label)

    def generate_unique_prefix(self, prefix: str, label: str) -> str:
        return generate_unique_prefix(prefix, label)

    def check(self) -> DefinitionCheck:
        """
        Report definition issues without changing anything.

        Returns:
            DefinitionCheck listing every issue found.
        """
        issues: list[FieldIssue] = []

        if not self.label and (not self.key or not self.name):
            issues.append(FieldIssue(
                attribute="label",
                issue_type="missing",
                message="label is empty but key or name must be derived from it",
            ))
        if self.name and not VALID_NAME.match(self.name):
            issues.append(FieldIssue(
                attribute="name",
                issue_type="format",
                message="name may only contain lower-case letters, digits and underscores",
                received=self.name,
            ))
        if self.required not in (0, 1):
            issues.append(FieldIssue(
                attribute="required",
                issue_type="range",
                message="required must be 0 or 1",
                received=self.required,
            ))

        return DefinitionCheck(field_class=type(self).__name__, issues=issues)

    def build(self) -> dict[str, Any]:
        """
        Finalize the descriptor into a host field record.

        Derives key and name when they are empty, then emits every
        attribute whose value is not None in declaration order.

        Returns:
            Ordered dict of attribute name to value.

        Raises:
            FieldDefinitionError: In strict mode, when check() finds issues.
        """
        config = get_config()

        if config.strict:
            result = self.check()
            if not result.is_valid:
                raise FieldDefinitionError(result)

        if not self.key:
            unique = self.generate_unique_prefix(self._prefix, self.label)
            self.key = f"{KEY_LITERAL}{self.type}_{unique}"
            logger.debug(f"Derived key {self.key} for label {self.label!r}")

        if not self.name:
            self.name = self.generate_name(self.label)
            logger.debug(f"Derived name {self.name} for label {self.label!r}")

        record: dict[str, Any] = {}
        for attribute in type(self).model_fields:
            value = getattr(self, attribute)
            if value is None:
                continue
            if isinstance(value, BaseModel):
                record[attribute] = value.model_dump(by_alias=True)
            else:
                record[attribute] = copy.deepcopy(value)

        return record

    def register(self, host: Optional[HostRegistrar] = None) -> None:
        """
        Build the record and hand it to the host.

        Args:
            host: Registration callable. Falls back to the default host;
                when neither is available registration is skipped.
        """
        record = self.build()

        if host is None:
            host = get_default_host()
        if host is None:
            logger.debug(f"No host available, skipping registration of {record['key']}")
            return

        logger.info(f"Registering field {record['key']} ({record['type']})")
        host(record)
