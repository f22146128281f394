"""Gallery field: a set of image attachments with upload restrictions."""

from typing import Literal

from pydantic import Field

from acf_builder.fields.base import FieldDescriptor


class GalleryField(FieldDescriptor):
    """Image gallery. Size bounds accept a unit suffix, e.g. '256KB'."""

    type: str = "gallery"

    min: int = Field(default=0, description="Minimum attachments selected")
    max: int = Field(default=0, description="Maximum attachments selected")
    preview_size: str = Field(default="thumbnail", description="Image size shown when editing")
    library: Literal["all", "uploadedTo"] = Field(
        default="all", description="Restrict the image library"
    )
    min_width: int = Field(default=0, description="Minimum upload width in px")
    min_height: int = Field(default=0, description="Minimum upload height in px")
    min_size: int | str = Field(default=0, description="Minimum file size in MB")
    max_width: int = Field(default=0, description="Maximum upload width in px")
    max_height: int = Field(default=0, description="Maximum upload height in px")
    max_size: int | str = Field(default=0, description="Maximum file size in MB")
    mime_types: str = Field(default="", description="Comma separated allowed extensions")
