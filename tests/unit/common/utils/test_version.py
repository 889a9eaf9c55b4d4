import os
from unittest.mock import patch

from common.utils.version import DEV_VERSION, get_version


@patch.dict(os.environ, {"QUERYGEN_APP_VERSION": "9.9.9"})
def test_get_version_from_environment():
    assert get_version() == "9.9.9"


@patch.dict(os.environ, {}, clear=True)
def test_get_version_unknown_distribution():
    assert get_version("no-such-distribution-querygen") == DEV_VERSION


@patch.dict(os.environ, {}, clear=True)
def test_get_version_from_metadata():
    # either the installed distribution version or the development fallback
    assert get_version()
