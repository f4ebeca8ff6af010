# SPDX-License-Identifier: MIT
"""Resolve a package's semantic version from its metadata.

Unlike ``parse_version``, lookup is lenient about its fallback: a package
whose only version information is a malformed specification version is
reported as having no version.

Example:
    >>> import semverkit
    >>> from semverkit.lookup import MetadataVersionSource, get_version
    >>> str(get_version(MetadataVersionSource.from_module(semverkit)))
    '0.1.0'
"""

from __future__ import annotations

import importlib.metadata
import logging
from types import ModuleType
from typing import Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field

from .config import LookupConfig
from .semver import Version, VersionFormatError, parse_version

logger = logging.getLogger(__name__)


class VersionSource(Protocol):
    """Anything exposing a declared version and a fallback version string."""

    @property
    def annotation(self) -> Optional[str]: ...

    @property
    def specification_version(self) -> Optional[str]: ...


class MetadataVersionSource(BaseModel):
    """Version strings supplied by the host's package metadata.

    Values are kept verbatim; the declared annotation is parsed strictly.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    annotation: str | None = Field(
        default=None,
        description="Version declared by the package itself (e.g., __version__)",
    )
    specification_version: str | None = Field(
        default=None,
        description="Fallback version from installed distribution metadata",
    )

    @classmethod
    def from_module(
        cls,
        module: ModuleType,
        distribution: str | None = None,
        config: LookupConfig | None = None,
    ) -> MetadataVersionSource:
        """Collect version strings for ``module``.

        Args:
            module: The imported module or package
            distribution: Installed distribution name; defaults to the
                module's top-level package name
            config: Lookup configuration naming the annotation attribute

        Returns:
            A source whose fields are None where nothing was found
        """
        config = config or LookupConfig()

        annotation = getattr(module, config.annotation_attribute, None)
        if not isinstance(annotation, str):
            annotation = None

        dist_name = distribution or module.__name__.partition(".")[0]
        try:
            specification_version = importlib.metadata.version(dist_name)
        except importlib.metadata.PackageNotFoundError:
            specification_version = None

        return cls(annotation=annotation, specification_version=specification_version)


def get_version(source: VersionSource, config: LookupConfig | None = None) -> Version | None:
    """Resolve the semantic version described by ``source``.

    The declared annotation wins and is parsed strictly. Otherwise the
    specification version is parsed, and a malformed one yields None
    unless ``config.strict_fallback`` is set.

    Args:
        source: Object exposing ``annotation`` and ``specification_version``
        config: Lookup configuration

    Returns:
        The Version, or None if no valid version is present

    Raises:
        VersionFormatError: If the annotation is malformed, or the fallback
            is malformed and ``strict_fallback`` is enabled
    """
    config = config or LookupConfig()

    if source.annotation is not None:
        return parse_version(source.annotation)

    fallback = source.specification_version
    if fallback is None:
        logger.debug("No version annotation or specification version found")
        return None

    try:
        return parse_version(fallback)
    except VersionFormatError:
        if config.strict_fallback:
            raise
        logger.debug("Ignoring malformed specification version %r", fallback)
        return None
