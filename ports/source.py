from __future__ import annotations

from typing import Any, Dict, Protocol


class ProfileSourcePort(Protocol):
    url: str

    def fetch(self) -> Dict[str, Any]:
        ...
