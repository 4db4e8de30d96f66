"""Utilities for retrieving the application version string."""

import os
from functools import lru_cache
from importlib import metadata

from utils.files import resource_path

DISTRIBUTION_NAME = "city-overview"


@lru_cache(maxsize=None)
def get_version() -> str:
    """Version of the installed distribution, else the VERSION file, else "unknown"."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        pass

    path = resource_path("VERSION")
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as handle:
            content = handle.read().strip()
        if content:
            return content
    return "unknown"
