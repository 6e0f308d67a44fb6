"""Tag parsing and selection of the most recent tag.

Tags are parsed on a best-effort basis: the first numeric triple found in the
part before the first ``-`` becomes the version core, and the rest of the tag
becomes the prerelease. Tags that cannot be coerced stay ``Unparsed`` and are
only ever compared as plain strings.
"""

import functools
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import semver

REF_PREFIX = "refs/tags/"

# Same shape as npm semver's coerce: up to three numbers, not preceded by a digit
COERCE_PATTERN = re.compile(r"(?:^|[^\d])(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?:$|[^\d])")

NULL_STRINGS = ("null", "undefined")


def is_null_string(value):
    return not value or value in NULL_STRINGS


def strip_ref(tag):
    if tag.startswith(REF_PREFIX):
        return tag[len(REF_PREFIX):]
    return tag


@dataclass(frozen=True)
class ParsedVersion:
    major: int
    minor: int
    patch: int
    prerelease: Tuple[Union[str, int], ...] = ()
    prefix: str = ""

    def to_semver(self):
        prerelease = ".".join(str(part) for part in self.prerelease) or None
        return semver.Version(self.major, self.minor, self.patch, prerelease=prerelease)

    @classmethod
    def from_semver(cls, version, prefix=""):
        return cls(
            version.major,
            version.minor,
            version.patch,
            split_prerelease(version.prerelease),
            prefix,
        )

    def __str__(self):
        core = f"{self.prefix}{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            return f"{core}-{'.'.join(str(part) for part in self.prerelease)}"
        return core


@dataclass(frozen=True)
class Parsed:
    raw: str
    version: ParsedVersion


@dataclass(frozen=True)
class Unparsed:
    raw: str


ParseResult = Union[Parsed, Unparsed]


def split_prerelease(prerelease):
    if not prerelease:
        return ()
    return tuple(int(part) if part.isdigit() else part for part in prerelease.split("."))


def coerce(text):
    """Return the (major, minor, patch) triple found in *text*, or None."""
    match = COERCE_PATTERN.search(text)
    if match is None:
        return None
    return tuple(int(group or 0) for group in match.groups())


def parse_tag(tag: str) -> ParseResult:
    version_part, _, pre = tag.partition("-")
    numbers = coerce(version_part)
    if numbers is None:
        return Unparsed(tag)

    prerelease = ()
    if not is_null_string(pre):
        try:
            prerelease = split_prerelease(semver.Version.parse(f"0.0.0-{pre}").prerelease)
        except ValueError:
            return Unparsed(tag)

    prefix = "v" if tag.startswith("v") else ""
    return Parsed(tag, ParsedVersion(*numbers, prerelease=prerelease, prefix=prefix))


def _compare_strings(a, b):
    return (a > b) - (a < b)


def compare_parsed(a: ParseResult, b: ParseResult) -> int:
    if isinstance(a, Parsed) and isinstance(b, Parsed):
        result = a.version.to_semver().compare(b.version.to_semver())
        if result != 0:
            return result
    return _compare_strings(a.raw, b.raw)


def compare_tags(a: str, b: str) -> int:
    """Order two tags by semver precedence, or as strings when either is not a version."""
    return compare_parsed(parse_tag(a), parse_tag(b))


def select_previous_tag(tags) -> Optional[str]:
    """Return the most recent tag of *tags*, or None when there are none.

    Mixing semver and string comparison is not transitive, so the highest
    version and the highest non-version are picked separately and only
    those two are compared as strings.
    """
    parsed = [parse_tag(tag) for tag in tags]
    versions = [result for result in parsed if isinstance(result, Parsed)]
    others = [result for result in parsed if isinstance(result, Unparsed)]

    candidates = []
    if versions:
        candidates.append(max(versions, key=functools.cmp_to_key(compare_parsed)))
    if others:
        candidates.append(max(others, key=lambda result: result.raw))
    if not candidates:
        return None
    return max(candidates, key=lambda result: result.raw).raw
