"""File metadata tool."""

from __future__ import annotations

import os
from typing import Any

from spot.tools.base import ParamSpec, Tool


class MetaTool(Tool):
    name = "meta"
    description = "Get file metadata via Spotlight."
    cli_description = "File metadata"
    returns = "Key: value lines"
    params = {
        "path": ParamSpec("string", "File path", required=True),
    }

    async def run(self, args: dict[str, Any]) -> str:
        path = os.path.expanduser(self.require_str(args, "path"))
        return self.gateway.metadata(path)
