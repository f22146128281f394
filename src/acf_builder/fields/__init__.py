from acf_builder.fields.base import FieldDescriptor, FieldWrapper
from acf_builder.fields.gallery import GalleryField
from acf_builder.fields.radio import RadioField

__all__ = [
    "FieldDescriptor",
    "FieldWrapper",
    "GalleryField",
    "RadioField",
]
