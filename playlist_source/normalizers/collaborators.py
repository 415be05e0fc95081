"""String and URL predicates consumed by the source normalizer.

The normalizer does not decide for itself what a YouTube or RTMP URL looks
like, how whitespace is trimmed, or how an extension is extracted from a
URL. The embedding player supplies those as pure functions.
"""

from dataclasses import dataclass
from typing import Callable

UrlPredicate = Callable[[str], bool]
StringTransform = Callable[[str], str]


@dataclass(frozen=True)
class SourceCollaborators:
    """Pure functions the normalizer delegates to.

    Attributes:
        is_youtube: True if the URL is a YouTube source
        is_rtmp: True if the URL is an RTMP stream
        trim: Removes leading/trailing whitespace
        extension: Lowercase file extension of a path or URL, "" if none
    """

    is_youtube: UrlPredicate
    is_rtmp: UrlPredicate
    trim: StringTransform
    extension: StringTransform
