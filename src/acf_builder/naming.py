"""
Name and key derivation helpers.

Both functions are pure: identical inputs always give identical outputs.
"""

import hashlib
import re
import string

from acf_builder.config import get_config

# Any run of characters that cannot appear in a storage name
_NAME_SEPARATOR = re.compile(r"[^A-Za-z0-9]+")

# Lower-cases A-Z only, leaving other letters untouched
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def generate_name(label: str) -> str:
    """
    Derive a storage name from a human-readable label.

    Each run of non-alphanumeric characters collapses to a single
    underscore and the result is lower-cased.

    Example:
        >>> generate_name("My Field!")
        'my_field_'
    """
    return _NAME_SEPARATOR.sub("_", label).lower()


def generate_unique_prefix(prefix: str, label: str, algorithm: str | None = None) -> str:
    """
    Hash a prefix and label into a fixed-width hex digest.

    Args:
        prefix: Caller-chosen discriminator (usually the owning group).
        label: Field label; ASCII letters lower-cased, spaces turned to underscores.
        algorithm: hashlib algorithm name. Defaults to the configured one.

    Returns:
        Hex digest of ``prefix + normalized_label``.
    """
    algorithm = algorithm or get_config().hash_algorithm
    seed = prefix + label.translate(_ASCII_LOWER).replace(" ", "_")
    return hashlib.new(algorithm, seed.encode("utf-8")).hexdigest()
