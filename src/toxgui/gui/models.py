"""Value types stored by the settings store – DHT servers, window layouts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DhtServer:
    """One DHT bootstrap node."""
    name: str = ""
    user_id: str = ""
    address: str = ""
    port: int = 0

    def label(self) -> str:
        """Short human-readable form, e.g. ``sonOfRa (144.76.60.215:33445)``."""
        return f"{self.name} ({self.address}:{self.port})"


@dataclass
class WindowSettings:
    """Saved geometry and state blobs of one top-level window.

    Both blobs come straight from ``QWidget.saveGeometry()`` and
    ``QMainWindow.saveState()`` and are never decoded here.
    """
    geometry: bytes = b""
    state: bytes = b""
