class ModMetadataError(Exception):
    """Base class for errors raised while resolving mod metadata."""


class ArchiveOpenError(ModMetadataError):
    """Raised when a mod archive cannot be opened as a zip container."""

    def __init__(self, path: str, reason: str = "") -> None:
        message = f"Failed to open mod archive {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.path = path


class EntryNotFoundError(ModMetadataError):
    """Raised when a named entry is missing from an archive or cannot be read."""

    def __init__(self, entry: str) -> None:
        super().__init__(f"Archive entry {entry} could not be read")
        self.entry = entry


class DescriptorReadError(ModMetadataError):
    """Raised when a special-cased mod is missing the entry its metadata comes from."""


class UnsupportedVersionError(ModMetadataError, LookupError):
    """Raised when no descriptor locator handles the requested Minecraft version."""

    def __init__(self, version: str) -> None:
        super().__init__(f"No Forge mod metadata locator for Minecraft {version}")
        self.version = version
