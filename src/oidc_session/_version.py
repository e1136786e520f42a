"""Distribution name and version, shared by the transport headers."""

from __future__ import annotations

from typing import Final

DIST_NAME: Final[str] = "oidc-session"
__version__: Final[str] = "0.1.0"
