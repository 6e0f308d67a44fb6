"""Compute the next release tag for a repository and create the release."""

from release_tagger.bump import next_tag
from release_tagger.config import BumpType, ReleaseConfig, Scheme, load_config
from release_tagger.errors import (
    IncrementFailure,
    InvalidScheme,
    ReleaseError,
    UnparseableTag,
    UnsupportedBumpType,
)
from release_tagger.tags import parse_tag, select_previous_tag

__all__ = [
    "BumpType",
    "IncrementFailure",
    "InvalidScheme",
    "ReleaseConfig",
    "ReleaseError",
    "Scheme",
    "UnparseableTag",
    "UnsupportedBumpType",
    "load_config",
    "next_tag",
    "parse_tag",
    "select_previous_tag",
]
