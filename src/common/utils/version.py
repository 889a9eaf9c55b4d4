import os
from importlib.metadata import PackageNotFoundError, version

# distribution name from pyproject.toml
DISTRIBUTION = "audit-querygen"
VERSION_ENV = "QUERYGEN_APP_VERSION"
DEV_VERSION = "0.0.0-dev"


def get_version(distribution: str = DISTRIBUTION) -> str:
    """
    Report the running version: an explicit QUERYGEN_APP_VERSION wins, then
    the installed distribution metadata, then the development placeholder.
    """
    override = os.environ.get(VERSION_ENV)
    if override:
        return override
    try:
        return version(distribution)
    except PackageNotFoundError:
        return DEV_VERSION
