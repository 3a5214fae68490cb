"""Reading the registry of repositories to mirror."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_HOSTED_URLS = {
    "github": "https://github.com/{owner}/{name}.git",
    "gitlab": "https://gitlab.com/{owner}/{name}.git",
    "bitbucket": "https://bitbucket.org/{owner}/{name}.git",
    "gitea": "https://gitea.com/{owner}/{name}.git",
    "azure": "https://dev.azure.com/{owner}/{name}/_git/{name}",
}

_CODECOMMIT_URL = "https://git-codecommit.{region}.amazonaws.com/v1/repos/{name}"


class RegistryError(ValueError):
    """A registry line or file could not be read."""


@dataclass(frozen=True)
class Repository:
    """A repository to mirror and the URL it is fetched from."""

    provider: str = ""
    owner: str = ""
    name: str = ""
    url: str = ""


def _url_for(provider: str, owner: str, name: str) -> str:
    if provider == "codecommit":
        aws_parts = owner.split("-")
        region = aws_parts[1] if len(aws_parts) == 2 else owner
        return _CODECOMMIT_URL.format(region=region, name=name)
    try:
        template = _HOSTED_URLS[provider]
    except KeyError:
        raise RegistryError(f"unsupported provider: {provider}") from None
    return template.format(owner=owner, name=name)


def parse_repository_line(line: str) -> Repository:
    """Parse a ``provider:owner/repo[.git]`` line."""
    provider, sep, repo_path = line.partition(":")
    if not sep:
        raise RegistryError("invalid format: expected 'provider:owner/repo.git'")

    path_parts = repo_path.removesuffix(".git").split("/")
    if len(path_parts) != 2:
        raise RegistryError("invalid repository path: expected 'owner/repo'")
    owner, name = path_parts

    return Repository(
        provider=provider,
        owner=owner,
        name=name,
        url=_url_for(provider, owner, name),
    )


def read_registry(filename: str | os.PathLike) -> list[Repository]:
    """Read all valid repositories from a registry file.

    Blank lines and lines starting with ``#`` are skipped; lines that cannot
    be parsed are logged and skipped.
    """
    try:
        handle = open(filename, encoding="utf-8", errors="replace")
    except OSError as exc:
        raise RegistryError(f"failed to open {filename}: {exc}") from exc

    repos = []
    with handle:
        try:
            for raw in handle:
                line = raw.strip()
                if not line or line.startswith("#"):
                    continue
                try:
                    repos.append(parse_repository_line(line))
                except RegistryError as exc:
                    logger.warning("Failed to parse line '%s': %s", line, exc)
        except OSError as exc:
            raise RegistryError(f"error reading file: {exc}") from exc
    return repos