import asyncio
import logging
from typing import Callable, Optional, Union

from .archive import ModArchive, open_archive
from .cache import MetadataCache
from .locator import ForgeModLocator17, select_locator
from .models import ModMetadata
from .normalizer import normalize
from .utils import MinecraftVersion, capitalize

logger = logging.getLogger(__name__)

MAVEN_GROUP = "generated.forgemod"
DEFAULT_EXTENSION = "jar"


class ModMetadataResolver:
    """Resolves and caches Forge mod metadata for one batch of archives."""

    def __init__(
        self,
        locator: Optional[ForgeModLocator17] = None,
        opener: Callable[[str], ModArchive] = open_archive,
        cache: Optional[MetadataCache] = None,
    ) -> None:
        self.locator = locator or ForgeModLocator17()
        self._opener = opener
        self.cache = cache if cache is not None else MetadataCache()

    @classmethod
    def for_version(
        cls,
        ver: Union[MinecraftVersion, str],
        library_version: Optional[str] = None,
        opener: Callable[[str], ModArchive] = open_archive,
    ) -> "ModMetadataResolver":
        return cls(select_locator(ver, library_version), opener)

    def is_applicable_to_version(self, ver: Union[MinecraftVersion, str], library_version: Optional[str] = None) -> bool:
        return self.locator.is_applicable(ver, library_version)

    async def resolve_metadata(self, name: str, path: str) -> ModMetadata:
        """Return metadata for the archive called ``name``.

        The archive at ``path`` is only opened the first time ``name`` is
        requested. Raises ``ArchiveOpenError`` if it is not a readable zip
        and ``DescriptorReadError`` if a special-cased mod is missing its
        metadata entry.
        """
        return await self.cache.resolve(name, lambda: asyncio.to_thread(self._read_metadata, name, path))

    def _read_metadata(self, name: str, path: str) -> ModMetadata:
        with self._opener(path) as archive:
            located = self.locator.locate(archive, name)
            return normalize(located, name)

    async def get_module_id(self, name: str, path: str) -> str:
        metadata = await self.resolve_metadata(name, path)
        return generate_maven_identifier(metadata.id, metadata.version)

    async def get_module_name(self, name: str, path: str) -> str:
        return capitalize((await self.resolve_metadata(name, path)).name)


def generate_maven_identifier(artifact: str, version: str, extension: str = DEFAULT_EXTENSION) -> str:
    return f"{MAVEN_GROUP}:{artifact}:{version}@{extension}"
