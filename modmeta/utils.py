import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from packaging import version
from rich.console import Console
from rich.logging import RichHandler

console = Console()


def setup_logging(level: int = logging.INFO) -> None:
    """Route library logging through the shared rich console."""
    handler = RichHandler(console=console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger("modmeta")
    root.handlers = [handler]
    root.setLevel(level)
    root.propagate = False


@dataclass(frozen=True)
class MinecraftVersion:
    major: int
    minor: int
    revision: Optional[int] = None

    @classmethod
    def from_string(cls, value: str) -> "MinecraftVersion":
        """Parse a release version such as ``1.12.2``.

        Snapshots and pre-releases are rejected with ``ValueError`` since the
        locator strategies are keyed on release lines only.
        """
        try:
            parsed = version.Version(value)
        except version.InvalidVersion as e:
            raise ValueError(f"Invalid Minecraft version: {value}") from e
        release = parsed.release
        if parsed.is_prerelease or len(release) < 2 or len(release) > 3:
            raise ValueError(f"Invalid Minecraft version: {value}")
        return cls(release[0], release[1], release[2] if len(release) == 3 else None)

    def __str__(self) -> str:
        if self.revision is None:
            return f"{self.major}.{self.minor}"
        return f"{self.major}.{self.minor}.{self.revision}"


def is_version_acceptable(ver: MinecraftVersion, acceptable_minors: Iterable[int]) -> bool:
    if ver.major != 1:
        return False
    return ver.minor in acceptable_minors


def capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def strip_extension(filename: str) -> str:
    # "mod.jar" -> "mod"; names without an extension are kept whole
    stem, dot, _ = filename.rpartition(".")
    return stem if dot and stem else filename
