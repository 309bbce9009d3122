from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class DescriptorShape(Enum):
    SINGLE_RECORD = "single_record"
    RECORD_LIST = "record_list"
    VERSIONED_LIST = "versioned_list"
    OPTIFINE_CHANGELOG = "optifine_changelog"
    ABSENT = "absent"


@dataclass(frozen=True)
class ModMetadata:
    id: str
    name: str
    version: str
    platform_version: Optional[str] = None


@dataclass(frozen=True)
class LocatedDescriptor:
    shape: DescriptorShape
    raw: Optional[bytes] = None
    payload: Any = None  # decoded JSON for the mcmod.info shapes
