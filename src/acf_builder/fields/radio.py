"""Radio button field."""

from typing import Literal

from pydantic import Field

from acf_builder.fields.base import FieldDescriptor


class RadioField(FieldDescriptor):
    """
    Single choice from a list of radio buttons.

    ``choices`` maps the stored value to its label, e.g. {"red": "Red"}.
    """

    type: str = "radio"

    choices: dict[str, str] = Field(default_factory=dict, description="value -> label")
    other_choice: int = Field(default=0, description="Allow a custom text choice")
    save_other_choice: int = Field(
        default=0, description="Append custom values to choices (DB fields only)"
    )
    layout: Literal["vertical", "horizontal"] = Field(default="vertical")
