"""Default values used when constructing metadata records.

These are plain provider functions, called once per construction, so that
tests can control them through the environment.
"""
from __future__ import annotations

import getpass
import os
from typing import Callable, Optional

from packaging.version import Version
from pydantic import AnyUrl

from pkgmeta.constants import MAINTAINER_ENV_VAR, PLACEHOLDER_URL


def url() -> AnyUrl:
    """Return the placeholder url used when a url is required.

    Returns:
        A new url pointing to `https://example.com/MUST_BE_CHANGED`.
    """
    return AnyUrl(PLACEHOLDER_URL)


def empty_version() -> Version:
    """Return the version used when no version has been set (0.0.0)."""
    return Version("0.0.0")


def _current_user() -> str:
    try:
        return getpass.getuser()
    except OSError:
        # No login name available (e.g. containers without a passwd entry)
        return "unknown"


def maintainer(
    environ: Optional[dict[str, str]] = None,
    get_user: Callable[[], str] = _current_user,
) -> list[str]:
    """Return the default maintainers of a package.

    Uses the `PKGMETA_MAINTAINER` environment variable when it is set,
    otherwise the name of the current operating system user.

    Args:
        environ: Environment mapping to read. Defaults to `os.environ`.
        get_user: Provider of the operating system user name.

    Returns:
        A list containing the single default maintainer.
    """
    env = os.environ if environ is None else environ
    value = env.get(MAINTAINER_ENV_VAR)
    if value is not None:
        return [value]
    return [get_user()]
