"""Meta command - dump Spotlight metadata for one file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import tyro

from spot.cli._common import get_gateway


@dataclass
class Meta:
    """Get file metadata."""

    path: tyro.conf.Positional[str] = field(
        metadata={"help": "File path"},
    )

    def run(self) -> int:
        """Execute the meta command."""
        print(get_gateway().metadata(os.path.expanduser(self.path)))
        return 0
