import pytest

from release_tagger.client import ReleaseInfo


class FakeClient:
    def __init__(self, tags=(), error=None):
        self.tags = list(tags)
        self.error = error
        self.list_calls = 0
        self.releases = []

    def list_tags(self):
        self.list_calls += 1
        return list(self.tags)

    def create_release(self, tag, name, body="", draft=False, prerelease=False):
        if self.error is not None:
            raise self.error
        self.releases.append(
            {"tag_name": tag, "name": name, "body": body, "draft": draft, "prerelease": prerelease}
        )
        return ReleaseInfo("releaseId", "htmlUrl", "uploadUrl")


class FakeOutputs:
    def __init__(self):
        self.values = []

    def set(self, name, value):
        self.values.append((name, value))


@pytest.fixture
def outputs():
    return FakeOutputs()
