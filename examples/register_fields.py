#!/usr/bin/env python3
"""
Field Registration Example

Builds a few field definitions for a "Contact" group and registers
them with a stand-in host that prints each record as JSON.

Usage:
    python examples/register_fields.py
"""

import json
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from acf_builder import (
    FieldDescriptor,
    GalleryField,
    RadioField,
    set_default_host,
    update_config,
)


def print_host(record: dict) -> None:
    """Stand-in for the plugin's local field registration."""
    print(json.dumps(record, indent=2))


def main():
    """Main entry point."""
    logging.basicConfig(level=logging.INFO)
    update_config(log_level="info")
    set_default_host(print_host)

    group = "group_contact"

    FieldDescriptor().set_prefix(group).set_parent(group).set_label("Full Name").set_required(1).register()

    (
        RadioField(choices={"email": "Email", "phone": "Phone"}, layout="horizontal")
        .set_prefix(group)
        .set_parent(group)
        .set_label("Preferred Contact")
        .set_default_value("email")
        .set_wrapper("50", "contact-method", "")
        .register()
    )

    (
        GalleryField(max=6, max_size="2MB", mime_types="jpg,png")
        .set_prefix(group)
        .set_parent(group)
        .set_label("Site Photos")
        .set_instructions("Up to six photos of the site.")
        .register()
    )


if __name__ == "__main__":
    main()
