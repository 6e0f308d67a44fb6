"""Action inputs, read once from the environment and validated up front."""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from release_tagger.errors import InvalidScheme, UnsupportedBumpType
from release_tagger.tags import is_null_string, strip_ref


class Scheme(Enum):
    CONTINUOUS = "continuous"
    SEMANTIC = "semantic"


class BumpType(Enum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PREMAJOR = "premajor"
    PRERELEASE = "prerelease"


DEFAULT_PRERELEASE_SUFFIX = "beta"


def parse_scheme(value):
    try:
        return Scheme(value)
    except ValueError:
        raise InvalidScheme(value) from None


def resolve_bump_type(scheme, value):
    """Map a raw bump type to a BumpType, or None for the scheme's default.

    The continuous scheme treats anything it does not know as its default;
    the semantic scheme rejects it.
    """
    if isinstance(value, BumpType):
        return value
    if is_null_string(value):
        return None
    try:
        return BumpType(value)
    except ValueError:
        if scheme is Scheme.SEMANTIC:
            raise UnsupportedBumpType(value, [bump.value for bump in BumpType]) from None
        return None


def read_input(name, environ=None):
    """Return the action input *name*, or an empty string when it is unset.

    GitHub exposes ``with:`` inputs as ``INPUT_<NAME>`` environment variables.
    """
    if environ is None:
        environ = os.environ
    value = environ.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()
    return "" if is_null_string(value) else value


@dataclass(frozen=True)
class ReleaseConfig:
    scheme: Scheme
    bump: Optional[BumpType] = None
    prerelease: bool = False
    prerelease_suffix: str = DEFAULT_PRERELEASE_SUFFIX
    tag_name: Optional[str] = None
    release_name: Optional[str] = None
    body: str = ""
    draft: bool = False
    repository: Optional[str] = None
    token: Optional[str] = None


def load_config(environ=None) -> ReleaseConfig:
    """Build a ReleaseConfig from the action inputs in *environ*.

    Raises InvalidScheme or UnsupportedBumpType before anything touches the
    network.
    """
    if environ is None:
        environ = os.environ

    scheme = parse_scheme(read_input("tag_schema", environ))
    bump = read_input("auto_increment_type", environ) or read_input("version_type", environ)
    tag_name = read_input("tag_name", environ)
    release_name = read_input("release_name", environ)

    return ReleaseConfig(
        scheme=scheme,
        bump=resolve_bump_type(scheme, bump),
        prerelease=read_input("prerelease", environ) == "true",
        prerelease_suffix=read_input("prerelease_suffix", environ) or DEFAULT_PRERELEASE_SUFFIX,
        tag_name=strip_ref(tag_name) if tag_name else None,
        release_name=strip_ref(release_name) if release_name else None,
        body=environ.get("INPUT_BODY", ""),
        draft=read_input("draft", environ) == "true",
        repository=environ.get("GITHUB_REPOSITORY") or None,
        token=environ.get("GITHUB_TOKEN") or None,
    )
