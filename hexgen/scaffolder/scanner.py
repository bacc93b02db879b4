"""Discovery of ports that already exist on disk.

Adapters and services that reference a port by name use this to find the
port's directory and the token name it actually exports, rather than
assuming the current naming configuration produced it.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel

from ..config import HexConfig
from ..naming import name_variations

_TOKEN_EXPORT = re.compile(r"export\s+const\s+([A-Z0-9_]+)\s*=\s*Symbol")
_INTERFACE_EXPORT = re.compile(r"export\s+interface\s+([A-Za-z0-9_]+)")


class PortInfo(BaseModel):
    """A port found under the configured ports directory."""

    name: str
    pascal_name: str
    token_name: str
    interface_name: str
    port_path: Path


def scan_available_ports(config: HexConfig, project_root: str | Path = ".") -> list[PortInfo]:
    """Return every port under ``<project_root>/<ports_dir>``.

    A subdirectory counts as a port when it holds ``<dir>.token.ts`` with an
    ``export const <TOKEN> = Symbol(...)`` declaration.  Results are sorted
    by directory name.
    """
    ports_dir = Path(project_root) / config.output.ports_dir
    if not ports_dir.is_dir():
        return []

    ports: list[PortInfo] = []
    for entry in sorted(ports_dir.iterdir()):
        if not entry.is_dir():
            continue

        token_file = entry / f"{entry.name}.token.ts"
        if not token_file.is_file():
            continue
        match = _TOKEN_EXPORT.search(token_file.read_text(encoding="utf-8"))
        if match is None:
            continue

        names = name_variations(entry.name)
        interface_name = f"{names.pascal}Port"
        port_file = entry / f"{entry.name}.port.ts"
        if port_file.is_file():
            found = _INTERFACE_EXPORT.search(port_file.read_text(encoding="utf-8"))
            if found is not None:
                interface_name = found.group(1)

        ports.append(
            PortInfo(
                name=entry.name,
                pascal_name=names.pascal,
                token_name=match.group(1),
                interface_name=interface_name,
                port_path=entry,
            )
        )
    return ports


def find_port_by_name(
    port_name: str,
    config: HexConfig,
    project_root: str | Path = ".",
) -> PortInfo | None:
    """Find a port by name, whatever casing its directory uses."""
    wanted = name_variations(port_name).kebab
    for port in scan_available_ports(config, project_root):
        if name_variations(port.name).kebab == wanted:
            return port
    return None
