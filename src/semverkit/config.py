# SPDX-License-Identifier: MIT
"""Configuration for package version lookup."""

from dataclasses import dataclass


@dataclass
class LookupConfig:
    """Controls how ``get_version`` resolves a version from package metadata.

    Attributes:
        strict_fallback: Raise instead of returning None when the fallback
            specification version is present but malformed
        annotation_attribute: Module attribute holding the declared version
    """

    strict_fallback: bool = False
    annotation_attribute: str = "__version__"
