"""Semantic version string for the current build."""

from __future__ import annotations

from typing import Optional

from binutil import config

VERSION_MAJOR = 1
VERSION_MINOR = 0
VERSION_PATCH = 0
VERSION_RELEASE_LEVEL = "alpha"
VERSION_RELEASE_NUMBER = 1


def version(
    git_version: Optional[str] = None,
    build_date: Optional[str] = None,
) -> str:
    """Return the semantic version, e.g. ``1.0.0-alpha.1 (revision abc123 built on 2024-01-02)``.

    Args:
        git_version: Short commit hash; defaults to config.GIT_VERSION.
        build_date: Build date; defaults to config.BUILD_DATE.
    """
    if git_version is None:
        git_version = config.GIT_VERSION
    if build_date is None:
        build_date = config.BUILD_DATE

    if VERSION_PATCH > 0 or VERSION_RELEASE_LEVEL:
        core = "{}.{}.{}".format(VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH)
    else:
        core = "{}.{}".format(VERSION_MAJOR, VERSION_MINOR)

    if VERSION_RELEASE_LEVEL:
        if VERSION_RELEASE_NUMBER > 0:
            core = "{}-{}.{}".format(core, VERSION_RELEASE_LEVEL, VERSION_RELEASE_NUMBER)
        else:
            core = "{}-{}".format(core, VERSION_RELEASE_LEVEL)

    if git_version:
        if build_date:
            core = "{} (revision {} built on {})".format(core, git_version, build_date)
        else:
            core = "{} ({})".format(core, git_version)

    return core
