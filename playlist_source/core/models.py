"""Data models for playlist item sources.

RawSourceConfig is the loosely typed descriptor a playlist author supplies;
NormalizedSource is the immutable record handed to the playback pipeline.
Both convert to and from the camelCase wire shape used in playlist JSON.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

# Python attribute name -> wire key
WIRE_FIELD_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "file": "file",
        "type": "type",
        "default": "default",
        "label": "label",
        "mime_type": "mimeType",
        "drm": "drm",
        "width": "width",
        "height": "height",
        "with_credentials": "withCredentials",
        "live_sync_duration": "liveSyncDuration",
        "media_types": "mediaTypes",
        "on_xhr_open": "onXhrOpen",
        "aestoken": "aestoken",
        "androidhls": "androidhls",
        "hlsjsdefault": "hlsjsdefault",
        "safarihlsjs": "safarihlsjs",
    }
)

ATTRIBUTE_NAMES: Mapping[str, str] = MappingProxyType(
    {wire: attr for attr, wire in WIRE_FIELD_NAMES.items()}
)


class SourceRejection(Enum):
    """Reason a source descriptor was rejected."""
    MISSING_FILE = "missing_file"
    UNDETERMINED_TYPE = "undetermined_type"


def is_present(value: Any) -> bool:
    """Return True unless the value is None or the empty string.

    False, 0 and empty containers are meaningful and count as present.
    """
    if value is None:
        return False
    return not (isinstance(value, str) and value == "")


def split_wire_fields(data: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split a wire mapping into known attributes and passthrough extras."""
    known: dict[str, Any] = {}
    extras: dict[str, Any] = {}
    for key, value in data.items():
        attr = ATTRIBUTE_NAMES.get(key)
        if attr is not None:
            known[attr] = value
        else:
            extras[key] = value
    return known, extras


@dataclass
class RawSourceConfig:
    """A playlist item source as supplied by the caller.

    Every field is optional at the type level; ``file`` is the only one the
    normalizer requires. Keys that are not part of the known field set are
    carried in ``extras`` and passed through untouched.
    """

    file: Any = None
    type: Any = None
    default: Any = None
    label: Any = None
    mime_type: Any = None
    drm: Any = None
    width: Any = None
    height: Any = None
    with_credentials: Any = None
    live_sync_duration: Any = None
    media_types: Any = None
    on_xhr_open: Any = None
    aestoken: Any = None
    androidhls: Any = None
    hlsjsdefault: Any = None
    safarihlsjs: Any = None
    extras: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RawSourceConfig":
        """Create a RawSourceConfig from a wire-shaped mapping."""
        known, extras = split_wire_fields(data)
        return cls(**known, extras=extras)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire shape, leaving out unset (None) fields."""
        result: dict[str, Any] = {}
        for attr, wire in WIRE_FIELD_NAMES.items():
            value = getattr(self, attr)
            if value is not None:
                result[wire] = value
        for key, value in self.extras.items():
            if value is not None:
                result[key] = value
        return result


@dataclass(frozen=True)
class NormalizedSource:
    """A validated, canonical playlist item source.

    ``type`` is always a non-empty canonical token and ``default`` is always
    a bool. Optional fields hold None when absent; no field ever holds the
    empty string, so a file that trims to nothing is left out like any
    other empty field.
    """

    type: str
    file: str | None = None
    default: bool = False
    label: Any = None
    mime_type: str | None = None
    drm: Any = None
    width: Any = None
    height: Any = None
    with_credentials: Any = None
    live_sync_duration: Any = None
    media_types: Any = None
    on_xhr_open: Any = None
    aestoken: Any = None
    androidhls: Any = None
    hlsjsdefault: Any = None
    safarihlsjs: Any = None
    extras: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def build(cls, values: Mapping[str, Any], extras: Mapping[str, Any]) -> "NormalizedSource":
        """Construct a NormalizedSource from derived attribute values.

        Only present values are included, so empty strings never reach the
        record.
        """
        allowed = {f.name for f in fields(cls)} - {"extras"}
        kept = {
            name: value
            for name, value in values.items()
            if name in allowed and is_present(value)
        }
        kept_extras = {key: value for key, value in extras.items() if is_present(value)}
        return cls(**kept, extras=MappingProxyType(kept_extras))

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire shape consumed by the playback pipeline."""
        result: dict[str, Any] = {}
        for attr, wire in WIRE_FIELD_NAMES.items():
            value = getattr(self, attr)
            if is_present(value):
                result[wire] = value
        result.update(self.extras)
        return result
