"""Shared fixtures for playlist source tests.

The URL predicates and string helpers are supplied by the embedding player
in production; these fakes follow the same contracts.
"""

import re

import pytest

from playlist_source import SourceCollaborators

YOUTUBE_URL = re.compile(r"^(https?:)?//(www\.|m\.)?(youtube\.com|youtu\.be)/", re.IGNORECASE)


def fake_is_youtube(url):
    return bool(YOUTUBE_URL.match(url))


def fake_is_rtmp(url):
    return url.startswith("rtmp")


def fake_extension(path):
    if not path or path.startswith("data:"):
        return ""
    path = path.split("?", 1)[0].split("#", 1)[0]
    name = path.rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()


@pytest.fixture
def collaborators():
    """Collaborators backed by the fakes above."""
    return SourceCollaborators(
        is_youtube=fake_is_youtube,
        is_rtmp=fake_is_rtmp,
        trim=str.strip,
        extension=fake_extension,
    )


@pytest.fixture
def recording_collaborators():
    """Collaborators that record every call made to them."""
    calls = []

    def record(name, func):
        def wrapper(value):
            calls.append((name, value))
            return func(value)
        return wrapper

    recorded = SourceCollaborators(
        is_youtube=record("is_youtube", fake_is_youtube),
        is_rtmp=record("is_rtmp", fake_is_rtmp),
        trim=record("trim", str.strip),
        extension=record("extension", fake_extension),
    )
    return recorded, calls
