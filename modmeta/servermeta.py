import json
from typing import Any, Dict, Optional

DEFAULT_META_VERSION = "1.0.0"
DEFAULT_ADDRESS = "localhost:25565"
DISCORD_PLACEHOLDER = "<FILL IN OR REMOVE DISCORD OBJECT>"


def get_default_server_meta(
    server_id: str,
    version: str,
    forge_version: Optional[str] = None,
    liteloader_version: Optional[str] = None,
) -> Dict[str, Any]:
    """Build the server entry forwarded to the launcher distribution file."""
    server_meta: Dict[str, Any] = {
        "meta": {
            "version": DEFAULT_META_VERSION,
            "name": f"{server_id} (Minecraft {version})",
            "description": f"{server_id} Running Minecraft {version}",
            "address": DEFAULT_ADDRESS,
            "discord": {
                "shortId": DISCORD_PLACEHOLDER,
                "largeImageText": DISCORD_PLACEHOLDER,
                "largeImageKey": DISCORD_PLACEHOLDER,
            },
            "mainServer": False,
            "serverCode": "",
            "autoconnect": False,
        }
    }

    if forge_version:
        server_meta["meta"]["description"] += f" (Forge v{forge_version})"
        server_meta["forge"] = {"version": forge_version}

    if liteloader_version:
        server_meta["meta"]["description"] += f" (Liteloader v{liteloader_version})"
        server_meta["liteloader"] = {"version": liteloader_version}

    server_meta["untrackedFiles"] = []
    return server_meta


def dump_server_meta(server_meta: Dict[str, Any]) -> str:
    return json.dumps(server_meta, indent=2)
