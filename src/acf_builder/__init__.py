"""
acf-builder: declarative field definitions for form plugin hosts.

Build field records with chained setters and register them with
the host when one is available.

Simple Usage:
    from acf_builder import RadioField

    record = (
        RadioField()
        .set_prefix("group_contact")
        .set_label("Preferred Colour")
        .build()
    )
    # record["key"]  -> "field_radio_<md5>"
    # record["name"] -> "preferred_colour"

Registration:
    from acf_builder import set_default_host

    set_default_host(acf_add_local_field)   # any callable taking the record
    RadioField().set_label("Size").register()

    # Or pass the host explicitly
    RadioField().set_label("Size").register(host=acf_add_local_field)

Without a host, register() builds the record and does nothing else.
"""

from acf_builder.config import (
    BuilderConfig,
    get_config,
    reset_config,
    update_config,
)
from acf_builder.errors import FieldDefinitionError
from acf_builder.fields import (
    FieldDescriptor,
    FieldWrapper,
    GalleryField,
    RadioField,
)
from acf_builder.host import (
    HostRegistrar,
    get_default_host,
    set_default_host,
)
from acf_builder.models import (
    DefinitionCheck,
    FieldIssue,
)
from acf_builder.naming import (
    generate_name,
    generate_unique_prefix,
)

__all__ = [
    # Descriptors
    "FieldDescriptor",
    "FieldWrapper",
    "GalleryField",
    "RadioField",
    # Naming
    "generate_name",
    "generate_unique_prefix",
    # Host
    "HostRegistrar",
    "get_default_host",
    "set_default_host",
    # Checks
    "DefinitionCheck",
    "FieldIssue",
    "FieldDefinitionError",
    # Config
    "BuilderConfig",
    "get_config",
    "reset_config",
    "update_config",
]

__version__ = "0.1.0"
