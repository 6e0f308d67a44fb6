"""GitHub access: listing tag refs and creating the release."""

from dataclasses import dataclass

from github import Auth, Github

from release_tagger.tags import strip_ref


@dataclass(frozen=True)
class ReleaseInfo:
    id: int
    html_url: str
    upload_url: str


class GitHubClient:
    """Wraps one repository of the GitHub API.

    Parameters
    ----------
    repository:
        Full repository name in ``owner/repo`` format.
    token:
        Token passed through to the API, or None for anonymous access.
    """

    def __init__(self, repository, token=None, github=None):
        if github is None:
            github = Github(auth=Auth.Token(token)) if token else Github()
        self.repo = github.get_repo(repository)

    def list_tags(self):
        """Return every tag name of the repository, in reverse ref-name order."""
        refs = list(self.repo.get_git_matching_refs("tags"))
        return [strip_ref(ref.ref) for ref in reversed(refs)]

    def create_release(self, tag, name, body="", draft=False, prerelease=False):
        release = self.repo.create_git_release(tag, name, body, draft=draft, prerelease=prerelease)
        return ReleaseInfo(release.id, release.html_url, release.upload_url)
