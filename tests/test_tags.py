import itertools

import pytest

from release_tagger.tags import (
    Parsed,
    ParsedVersion,
    Unparsed,
    compare_tags,
    parse_tag,
    select_previous_tag,
    strip_ref,
)


class TestParseTag:
    def test_plain_version_with_prefix(self):
        result = parse_tag("v1.2.3")

        assert result == Parsed("v1.2.3", ParsedVersion(1, 2, 3, (), "v"))

    def test_prerelease_components(self):
        result = parse_tag("v1.2.0-beta.3")

        assert isinstance(result, Parsed)
        assert result.version.prerelease == ("beta", 3)

    def test_missing_fields_are_coerced_to_zero(self):
        result = parse_tag("v2")

        assert result.version == ParsedVersion(2, 0, 0, (), "v")

    def test_no_prefix(self):
        assert parse_tag("1.0.0").version.prefix == ""

    def test_numbers_are_found_inside_text(self):
        result = parse_tag("release1.4")

        assert result.version == ParsedVersion(1, 4, 0, (), "")

    @pytest.mark.parametrize("tag", ["$@#", "abc-def", "build-123", "zzz", ""])
    def test_unparseable(self, tag):
        assert parse_tag(tag) == Unparsed(tag)

    def test_invalid_prerelease_is_unparseable(self):
        assert isinstance(parse_tag("v1.0.0-be$ta"), Unparsed)

    @pytest.mark.parametrize("tag", ["v1.0.0-null", "v1.0.0-undefined", "v1.0.0-"])
    def test_null_prerelease_is_ignored(self, tag):
        assert parse_tag(tag).version.prerelease == ()


def test_strip_ref():
    assert strip_ref("refs/tags/v1.0.0") == "v1.0.0"
    assert strip_ref("v1.0.0") == "v1.0.0"


class TestCompareTags:
    def test_numeric_not_lexicographic(self):
        assert compare_tags("v1.275.0", "v1.99.0") > 0

    def test_prerelease_orders_before_release(self):
        assert compare_tags("v1.0.0-beta.0", "v1.0.0") < 0

    def test_prerelease_components(self):
        assert compare_tags("v1.0.0-beta.10", "v1.0.0-beta.9") > 0
        assert compare_tags("v1.0.0-beta", "v1.0.0-alpha") > 0
        assert compare_tags("v1.0.0-beta", "v1.0.0-beta.1") < 0

    def test_unparsed_falls_back_to_strings(self):
        assert compare_tags("zzz", "aaa") > 0
        assert compare_tags("abc-def", "v2.0.0") < 0

    def test_equal_versions_fall_back_to_strings(self):
        assert compare_tags("v1.0.0", "1.0.0") > 0
        assert compare_tags("v1.0.0", "v1.0.0") == 0


class TestSelectPreviousTag:
    def test_empty(self):
        assert select_previous_tag([]) is None

    def test_single(self):
        assert select_previous_tag(["v1.0.0"]) == "v1.0.0"

    def test_semantic_ordering(self):
        tags = ["v1.2.0", "v1.275.0", "v1.99.0", "v1.1.0"]

        assert select_previous_tag(tags) == "v1.275.0"

    def test_prerelease_ordering(self):
        assert select_previous_tag(["v1.0.0-alpha", "v1.0.0-beta"]) == "v1.0.0-beta"

    def test_release_beats_its_prerelease(self):
        assert select_previous_tag(["v2.0.0", "v2.0.0-rc.1"]) == "v2.0.0"

    def test_non_semantic_only(self):
        assert select_previous_tag(["aaa", "zzz"]) == "zzz"
        assert select_previous_tag(["build-123", "build-456"]) == "build-456"

    def test_mixed(self):
        assert select_previous_tag(["abc-def", "v2.0.0"]) == "v2.0.0"

    @pytest.mark.parametrize(
        "tags",
        [
            ["v1.2.0", "v1.275.0", "v1.99.0", "v1.1.0"],
            ["v1.0.0", "1.0.0", "v1.0.0-rc.1"],
            ["build-123", "build-456", "aaa"],
            ["v1.10.0", "v1.9.0", "v1.8.0-be$ta"],
            ["v2.0.0-rc.1", "v2.0.0", "abc-def", "v10.0.0-beta.2", "v1.5.0-x$y"],
        ],
    )
    def test_independent_of_input_order(self, tags):
        results = {select_previous_tag(list(order)) for order in itertools.permutations(tags)}

        assert len(results) == 1

    def test_mixed_set_compares_group_maxima_as_strings(self):
        # v1.10.0 beats v1.9.0 as versions, then loses to the non-version as a string
        assert select_previous_tag(["v1.9.0", "v1.10.0", "v1.8.0-be$ta"]) == "v1.8.0-be$ta"
        assert select_previous_tag(["v1.8.0-be$ta", "v1.10.0", "v1.9.0"]) == "v1.8.0-be$ta"

    def test_highest_version_wins_over_lower_string(self):
        assert select_previous_tag(["v1.1.0", "v1.10.0", "abc", "v1.9.0"]) == "v1.10.0"

    @pytest.mark.parametrize("tag", ["", "-", "\x00", "v", "1" * 40, "v1.0.0-", "..-..", "v1.0.0+build"])
    def test_never_raises(self, tag):
        assert select_previous_tag([tag, "v1.0.0"]) in (tag, "v1.0.0")
