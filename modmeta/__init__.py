from .errors import (
    ArchiveOpenError,
    DescriptorReadError,
    EntryNotFoundError,
    ModMetadataError,
    UnsupportedVersionError,
)
from .models import DescriptorShape, LocatedDescriptor, ModMetadata
from .resolver import ModMetadataResolver
from .servermeta import get_default_server_meta

__all__ = [
    "ArchiveOpenError",
    "DescriptorReadError",
    "DescriptorShape",
    "EntryNotFoundError",
    "LocatedDescriptor",
    "ModMetadata",
    "ModMetadataError",
    "ModMetadataResolver",
    "UnsupportedVersionError",
    "get_default_server_meta",
]
