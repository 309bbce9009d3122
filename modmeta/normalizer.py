"""Turns a located descriptor into a single ``ModMetadata`` record."""
import logging
import re
from typing import Any, Optional, Tuple

from .errors import DescriptorReadError
from .models import DescriptorShape, LocatedDescriptor, ModMetadata
from .utils import strip_extension

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "0.0.0"
OPTIFINE_ID = "optifine"

_OPTIFINE_RELEASE = re.compile(r"^optifine_(\d\S*)$", re.IGNORECASE)


def sanitize_version(value: str) -> str:
    # Unexpanded build placeholders: @VERSION@, ${version}, -SNAPSHOT
    if "@" in value or "$" in value or "SNAPSHOT" in value:
        return DEFAULT_VERSION
    return value


def default_metadata(name: str) -> ModMetadata:
    return ModMetadata(id=strip_extension(name).lower(), name=name, version=DEFAULT_VERSION)


def _split_optifine_info(info: str) -> Tuple[str, Optional[str]]:
    tokens = info.split()
    if tokens:
        match = _OPTIFINE_RELEASE.match(tokens[0])
        if match:
            # "OptiFine_1.12.2_HD_U_F5 changes:"
            return tokens[0], match.group(1)
    if len(tokens) > 1:
        # "OptiFine 1.12.2_HD_U_F5"
        return info, tokens[1]
    return info, None


def parse_optifine_changelog(raw: bytes, name: str) -> ModMetadata:
    text = raw.decode("utf-8", errors="replace")
    info = text.split("\n", 1)[0].strip()
    display_name, version = _split_optifine_info(info)
    if not version:
        raise DescriptorReadError(f"Failed to read OptiFine version from changelog of {name}.")
    version = sanitize_version(version)
    platform_version = version.split("_", 1)[0] if "_" in version else None
    return ModMetadata(
        id=OPTIFINE_ID,
        name=display_name,
        version=version,
        platform_version=platform_version,
    )


def _first_record(shape: DescriptorShape, payload: Any) -> Any:
    # Assuming the main mod is the first entry.
    if shape is DescriptorShape.VERSIONED_LIST:
        return payload["modList"][0]
    if shape is DescriptorShape.RECORD_LIST:
        return payload[0]
    return payload


def _record_to_metadata(record: Any) -> Optional[ModMetadata]:
    if not isinstance(record, dict):
        return None
    modid, display_name, version = record.get("modid"), record.get("name"), record.get("version")
    if not isinstance(modid, str) or not isinstance(display_name, str) or not isinstance(version, str):
        return None
    if not modid or not display_name:
        return None
    return ModMetadata(id=modid.lower(), name=display_name, version=sanitize_version(version))


def normalize(located: LocatedDescriptor, name: str) -> ModMetadata:
    """Build the metadata record for ``name`` from its located descriptor.

    Standard descriptors never fail here: anything absent or malformed falls
    back to a record synthesized from the archive name. Only the OptiFine
    special case can raise ``DescriptorReadError``.
    """
    shape = located.shape
    if shape is DescriptorShape.OPTIFINE_CHANGELOG:
        return parse_optifine_changelog(located.raw or b"", name)

    if shape is not DescriptorShape.ABSENT:
        try:
            record = _first_record(shape, located.payload)
        except (KeyError, IndexError, TypeError):
            record = None
        metadata = _record_to_metadata(record)
        if metadata is not None:
            logger.debug("Resolved %s as %s %s (%s)", name, metadata.id, metadata.version, shape.value)
            return metadata
        logger.warning("ForgeMod %s contains an invalid mcmod.info file.", name)

    return default_metadata(name)
