"""Source type tokens for playlist sources.

This module is the single place that knows what a source ``type`` can look
like: the MIME type pattern callers may pass instead of a short token, the
alias table that folds extensions and MIME subtypes into the canonical
tokens the playback engines select on, and the set of tokens the engines
are known to handle.
"""

import re
from typing import Mapping

from playlist_source.core.config import DEFAULT_TYPE_ALIASES

# "<anything without a slash>/<optional x- prefix><subtype>", whole string.
# The x- prefix sits outside the capture group, so "video/x-flv" gives "flv"
# while "video/xyz" keeps its leading x.
MIME_TYPE_PATTERN = re.compile(r"[^/]+/(?:x-)?([^/]+)")

# Canonical type tokens by source kind
KNOWN_TYPES = {
    "Streaming": [
        "hls",  # HTTP Live Streaming
        "dash",  # MPEG-DASH
        "rtmp",  # Real-Time Messaging Protocol
        "youtube",  # YouTube embed
    ],
    "Video": [
        "mp4",  # MPEG-4
        "m4v",  # MPEG-4 video
        "webm",  # WebM
        "mov",  # QuickTime
        "flv",  # Flash Video
        "f4v",  # Flash MP4 Video
        "ogv",  # Ogg video
        "mkv",  # Matroska
        "3gp",  # 3GPP
    ],
    "Audio": [
        "aac",  # Advanced Audio Coding (incl. m4a)
        "mp3",  # MPEG Audio Layer III
        "mpeg",  # audio/mpeg
        "oga",  # Ogg audio
        "ogg",  # Ogg Vorbis
        "vorbis",  # Vorbis
        "wav",  # Waveform Audio
        "f4a",  # Flash MP4 Audio
    ],
}


def detect_mime_type(value: str) -> str | None:
    """
    Extract the subtype token from a full MIME type.

    Args:
        value: A source type, either a short token or a MIME type

    Returns:
        The subtype with any leading "x-" removed, or None if the value is
        not a MIME type

    Example:
        >>> detect_mime_type("application/x-mpegURL")
        'mpegURL'
        >>> detect_mime_type("mp4") is None
        True
    """
    match = MIME_TYPE_PATTERN.fullmatch(value)
    if match is None:
        return None
    return match.group(1)


def canonicalize_type(source_type: str, aliases: Mapping[str, str] | None = None) -> str:
    """
    Map an extension or MIME subtype to its canonical playback type.

    Matching is exact and case-sensitive; unknown values are returned
    unchanged.

    Args:
        source_type: Type token after MIME detection and classification
        aliases: Alias table (defaults to DEFAULT_TYPE_ALIASES)

    Returns:
        The canonical type token

    Example:
        >>> canonicalize_type("m3u8")
        'hls'
        >>> canonicalize_type("webm")
        'webm'
    """
    if aliases is None:
        aliases = DEFAULT_TYPE_ALIASES
    return aliases.get(source_type, source_type)


def get_all_known_types():
    """
    Get flat list of all canonical type tokens across all kinds.

    Returns:
        List of type tokens
    """
    return [source_type for types in KNOWN_TYPES.values() for source_type in types]


def get_types_by_kind(kind):
    """
    Get type tokens for a specific source kind.

    Args:
        kind: One of "Streaming", "Video", or "Audio"

    Returns:
        List of type tokens for the kind, or empty list if kind not found
    """
    return KNOWN_TYPES.get(kind, [])


def is_known_type(source_type):
    """
    Check if a type token is one the playback engines handle.

    Example:
        >>> is_known_type("hls")
        True
        >>> is_known_type("mpegURL")
        False
    """
    return source_type in get_all_known_types()


def get_kind_for_type(source_type):
    """
    Determine the source kind for a type token.

    Returns:
        Kind ("Streaming", "Video", or "Audio") or None if unknown

    Example:
        >>> get_kind_for_type("dash")
        'Streaming'
        >>> get_kind_for_type("aac")
        'Audio'
    """
    for kind, types in KNOWN_TYPES.items():
        if source_type in types:
            return kind
    return None
