"""Model classes for wpatui."""

from wpatui.model.network import Network, ScanEntry
from wpatui.model.serializers import (
    MalformedValue,
    escape_value,
    parse_entry,
    parse_section,
    serialize_entry,
    unescape_value,
)
from wpatui.model.registry import NetworkRegistry
from wpatui.model.document import ConfigDocument, ConfigLoadError, LoadResult, load_document

__all__ = [
    "Network",
    "ScanEntry",
    "MalformedValue",
    "escape_value",
    "unescape_value",
    "serialize_entry",
    "parse_entry",
    "parse_section",
    "NetworkRegistry",
    "ConfigDocument",
    "ConfigLoadError",
    "LoadResult",
    "load_document",
]
