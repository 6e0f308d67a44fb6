"""Action entry point: resolve the tag, create the release, set step outputs."""

import os
import sys
from dataclasses import dataclass
from typing import Optional

from release_tagger.bump import next_tag
from release_tagger.client import GitHubClient
from release_tagger.config import load_config
from release_tagger.errors import ReleaseError
from release_tagger.tags import select_previous_tag


@dataclass(frozen=True)
class Resolution:
    tag: str
    previous_tag: Optional[str] = None


class StepOutputs:
    """Writes step outputs to the GITHUB_OUTPUT file, or as workflow commands without one."""

    def __init__(self, path=None):
        self.path = path

    def set(self, name, value):
        if self.path:
            with open(self.path, "a", encoding="utf-8") as fh:
                fh.write(f"{name}={value}\n")
        else:
            print(f"::set-output name={name}::{value}")


def resolve_tag(config, list_tags, on_previous=None) -> Resolution:
    """Return the tag to release, computing it from the existing tags unless one is given.

    *list_tags* is only called when the tag has to be computed. *on_previous*
    is called with the previous tag, when there is one, before the next tag is
    computed.
    """
    if config.tag_name:
        return Resolution(config.tag_name)

    tags = list_tags()
    print(f"Existing tags: {', '.join(tags)}", file=sys.stderr)
    previous = select_previous_tag(tags)
    if previous is not None:
        print(f"Computing the next tag based on: {previous}", file=sys.stderr)
        if on_previous is not None:
            on_previous(previous)

    tag = next_tag(
        previous,
        config.scheme,
        config.bump,
        prerelease=config.prerelease,
        prerelease_suffix=config.prerelease_suffix,
    )
    return Resolution(tag, previous)


def run(config, client, outputs):
    resolution = resolve_tag(
        config,
        client.list_tags,
        on_previous=lambda previous: outputs.set("previous_tag", previous),
    )
    print(f"Calculated next tag: {resolution.tag}", file=sys.stderr)

    release = client.create_release(
        resolution.tag,
        config.release_name or resolution.tag,
        body=config.body,
        draft=config.draft,
        prerelease=config.prerelease,
    )

    outputs.set("current_tag", resolution.tag)
    outputs.set("id", release.id)
    outputs.set("html_url", release.html_url)
    outputs.set("upload_url", release.upload_url)
    return release


def main(environ=None):
    if environ is None:
        environ = os.environ

    try:
        config = load_config(environ)
        if not config.repository:
            raise ReleaseError("GITHUB_REPOSITORY is not set")
        client = GitHubClient(config.repository, config.token)
        run(config, client, StepOutputs(environ.get("GITHUB_OUTPUT")))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
