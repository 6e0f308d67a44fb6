"""Compute the next tag from the previous one.

Increments follow npm semver's ``inc``: a plain bump of a prerelease releases
it instead of bumping again (``1.0.0-beta.2`` + major is ``1.0.0``), and a
``prerelease`` bump of a release starts a prerelease of the next patch.
"""

from release_tagger.config import (
    DEFAULT_PRERELEASE_SUFFIX,
    BumpType,
    Scheme,
    parse_scheme,
    resolve_bump_type,
)
from release_tagger.errors import IncrementFailure, UnparseableTag
from release_tagger.tags import ParsedVersion, Unparsed, parse_tag, split_prerelease

INITIAL_TAGS = {
    Scheme.CONTINUOUS: "v1",
    Scheme.SEMANTIC: "v1.0.0",
}

DEFAULT_BUMPS = {
    Scheme.CONTINUOUS: BumpType.MAJOR,
    Scheme.SEMANTIC: BumpType.PATCH,
}


def initial_tag(scheme, prerelease=False, prerelease_suffix=DEFAULT_PRERELEASE_SUFFIX):
    tag = INITIAL_TAGS[scheme]
    if prerelease:
        return f"{tag}-{prerelease_suffix or DEFAULT_PRERELEASE_SUFFIX}.0"
    return tag


def prerelease_name(version, prerelease_suffix=None):
    if version.prerelease:
        return str(version.prerelease[0])
    return prerelease_suffix or DEFAULT_PRERELEASE_SUFFIX


def resolve_continuous_bump(version, requested):
    if requested is BumpType.PRERELEASE:
        return BumpType.PRERELEASE if version.prerelease else BumpType.PREMAJOR
    if requested is BumpType.PREMAJOR:
        return BumpType.PREMAJOR
    return DEFAULT_BUMPS[Scheme.CONTINUOUS]


def _join(parts):
    return ".".join(str(part) for part in parts)


def _bump_major(version, identifier):
    if version.minor or version.patch or not version.prerelease:
        return version.bump_major()
    return version.finalize_version()


def _bump_minor(version, identifier):
    if version.patch or not version.prerelease:
        return version.bump_minor()
    return version.finalize_version()


def _bump_patch(version, identifier):
    if not version.prerelease:
        return version.bump_patch()
    return version.finalize_version()


def _bump_premajor(version, identifier):
    return version.bump_major().replace(prerelease=f"{identifier}.0")


def _bump_prerelease(version, identifier):
    if not version.prerelease:
        return version.bump_patch().replace(prerelease=f"{identifier}.0")

    parts = list(split_prerelease(version.prerelease))
    for index in reversed(range(len(parts))):
        if isinstance(parts[index], int):
            parts[index] += 1
            break
    else:
        parts.append(0)

    # a different name, or a name without a counter, starts over
    if str(parts[0]) != identifier or len(parts) < 2 or not isinstance(parts[1], int):
        parts = [identifier, 0]
    return version.replace(prerelease=_join(parts))


INCREMENTS = {
    BumpType.MAJOR: _bump_major,
    BumpType.MINOR: _bump_minor,
    BumpType.PATCH: _bump_patch,
    BumpType.PREMAJOR: _bump_premajor,
    BumpType.PRERELEASE: _bump_prerelease,
}


def increment(version: ParsedVersion, bump: BumpType, identifier: str) -> ParsedVersion:
    """Return *version* bumped by *bump*, keeping its prefix.

    Raises IncrementFailure when the underlying semver arithmetic fails.
    """
    step = INCREMENTS[bump]
    try:
        bumped = step(version.to_semver(), identifier)
    except Exception as error:
        raise IncrementFailure(error) from error
    return ParsedVersion.from_semver(bumped, version.prefix)


def next_continuous(version, requested, identifier):
    bumped = increment(version, resolve_continuous_bump(version, requested), identifier)
    if bumped.prerelease:
        return f"{bumped.prefix}{bumped.major}-{_join(bumped.prerelease)}"
    return f"{bumped.prefix}{bumped.major}"


def next_semantic(version, requested, identifier):
    return str(increment(version, requested or DEFAULT_BUMPS[Scheme.SEMANTIC], identifier))


def next_tag(
    previous,
    scheme,
    bump=None,
    prerelease=False,
    prerelease_suffix=DEFAULT_PRERELEASE_SUFFIX,
):
    """Compute the tag that follows *previous* under *scheme*.

    *previous* is None when the repository has no tags yet; *prerelease* and
    *prerelease_suffix* then decide whether the first tag is a prerelease.
    *bump* may be a BumpType or its string value. Raises UnparseableTag,
    UnsupportedBumpType or IncrementFailure.
    """
    scheme = parse_scheme(scheme)
    if previous is None:
        return initial_tag(scheme, prerelease, prerelease_suffix)

    parsed = parse_tag(previous)
    if isinstance(parsed, Unparsed):
        raise UnparseableTag(previous)

    bump = resolve_bump_type(scheme, bump)
    identifier = prerelease_name(parsed.version, prerelease_suffix)
    if scheme is Scheme.CONTINUOUS:
        return next_continuous(parsed.version, bump, identifier)
    return next_semantic(parsed.version, bump, identifier)
