"""Descriptor locators: find which metadata descriptor a mod archive carries.

A locator is a strategy selected by Minecraft version. Each one knows the
fixed entry names used by its Forge generation and the mods that need
special handling.
"""
import json
import logging
from typing import Any, Callable, List, Optional, Protocol, Tuple, Union

from .errors import DescriptorReadError, EntryNotFoundError, UnsupportedVersionError
from .models import DescriptorShape, LocatedDescriptor
from .utils import MinecraftVersion, is_version_acceptable

logger = logging.getLogger(__name__)

MCMOD_INFO = "mcmod.info"
OPTIFINE_CHANGELOG = "changelog.txt"


class DescriptorArchive(Protocol):
    def read_entry(self, entry: str) -> bytes: ...


def _is_versioned_list(value: Any) -> bool:
    return isinstance(value, dict) and "modListVersion" in value


# Evaluated in order, first match wins.
_SHAPE_PREDICATES: List[Tuple[DescriptorShape, Callable[[Any], bool]]] = [
    (DescriptorShape.VERSIONED_LIST, _is_versioned_list),
    (DescriptorShape.RECORD_LIST, lambda value: isinstance(value, list)),
    (DescriptorShape.SINGLE_RECORD, lambda value: isinstance(value, dict)),
]


def classify_descriptor(value: Any) -> DescriptorShape:
    for shape, predicate in _SHAPE_PREDICATES:
        if predicate(value):
            return shape
    return DescriptorShape.ABSENT


class ForgeModLocator17:
    """Locates ``mcmod.info`` descriptors used by Forge for Minecraft 1.7 - 1.12."""

    acceptable_minors = (7, 8, 9, 10, 11, 12)
    descriptor_entry = MCMOD_INFO

    def is_applicable(self, ver: Union[MinecraftVersion, str], library_version: Optional[str] = None) -> bool:
        if isinstance(ver, str):
            try:
                ver = MinecraftVersion.from_string(ver)
            except ValueError:
                return False
        return is_version_acceptable(ver, self.acceptable_minors)

    def locate(self, archive: DescriptorArchive, name: str) -> LocatedDescriptor:
        # OptiFine loads as a Forge mod but ships no mcmod.info.
        if "optifine" in name.lower():
            try:
                raw = archive.read_entry(OPTIFINE_CHANGELOG)
            except EntryNotFoundError as e:
                raise DescriptorReadError(f"Failed to read OptiFine changelog from {name}.") from e
            return LocatedDescriptor(DescriptorShape.OPTIFINE_CHANGELOG, raw)

        try:
            raw = archive.read_entry(self.descriptor_entry)
        except EntryNotFoundError:
            logger.warning("ForgeMod %s does not contain %s file.", name, self.descriptor_entry)
            return LocatedDescriptor(DescriptorShape.ABSENT)

        try:
            payload = json.loads(raw.decode("utf-8-sig"))
        except (ValueError, RecursionError) as e:
            logger.warning("ForgeMod %s contains an invalid %s file: %s", name, self.descriptor_entry, e)
            return LocatedDescriptor(DescriptorShape.ABSENT, raw)

        shape = classify_descriptor(payload)
        if shape is DescriptorShape.ABSENT:
            logger.warning("ForgeMod %s contains an unrecognized %s file.", name, self.descriptor_entry)
            return LocatedDescriptor(DescriptorShape.ABSENT, raw)
        return LocatedDescriptor(shape, raw, payload)


LOCATORS: List[ForgeModLocator17] = [ForgeModLocator17()]


def select_locator(ver: Union[MinecraftVersion, str], library_version: Optional[str] = None) -> ForgeModLocator17:
    for locator in LOCATORS:
        if locator.is_applicable(ver, library_version):
            return locator
    raise UnsupportedVersionError(str(ver))
