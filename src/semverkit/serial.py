# SPDX-License-Identifier: MIT
"""Stable serialization identifiers derived from package versions."""

from __future__ import annotations

import hashlib
import sys

from .lookup import MetadataVersionSource, get_version

# Keep identifiers within a signed 64-bit range
_SERIAL_MODULUS = 2**63 - 1


def serial(cls: type) -> int:
    """Compute a serialization identifier for ``cls``.

    The identifier combines the semantic version of the class's top-level
    package with its qualified name, so it changes whenever the package
    version changes and is identical across interpreter runs.

    Raises:
        LookupError: If the owning package declares no valid version
    """
    package_name = cls.__module__.partition(".")[0]
    version = get_version(MetadataVersionSource.from_module(sys.modules[package_name]))
    if version is None:
        raise LookupError(f"Package {package_name!r} has no semantic version")

    qualified_name = f"{cls.__module__}.{cls.__qualname__}"
    name_digest = int.from_bytes(hashlib.sha256(qualified_name.encode("utf-8")).digest()[:8], "big")
    return (hash(version) * name_digest) % _SERIAL_MODULUS
