"""Descriptive package metadata exposed on every emitter."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from importlib import metadata

from bareemitter.version import __version__

DISTRIBUTION = __name__.split(".")[0]

# Used when the package runs from a source checkout without being installed
FALLBACK_AUTHOR = "BareEmitter contributors"
FALLBACK_DESCRIPTION = "A minimal synchronous event emitter."
FALLBACK_LICENSE = "MIT"


@dataclass(frozen=True)
class PackageInfo:
    author: str
    version: str
    description: str
    license: str


@lru_cache(maxsize=None)
def get_package_info(distribution: str = DISTRIBUTION) -> PackageInfo:
    """Read author, version, description and license from the installed distribution.

    Args:
        distribution (str): Name of the distribution on the index. Defaults to this package.

    Returns:
        PackageInfo: The metadata, every field a string. Missing fields fall back
            to the constants shipped with the package.
    """
    try:
        meta = metadata.metadata(distribution)
    except metadata.PackageNotFoundError:
        logging.debug(f"Distribution {distribution} not installed, using bundled metadata")
        return PackageInfo(
            author=FALLBACK_AUTHOR,
            version=__version__,
            description=FALLBACK_DESCRIPTION,
            license=FALLBACK_LICENSE,
        )

    return PackageInfo(
        author=meta.get("Author") or meta.get("Author-email") or FALLBACK_AUTHOR,
        version=meta.get("Version") or __version__,
        description=meta.get("Summary") or FALLBACK_DESCRIPTION,
        license=meta.get("License-Expression") or meta.get("License") or FALLBACK_LICENSE,
    )
