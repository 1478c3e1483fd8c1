from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ProfileDescriptor(BaseModel):
    """One entry of the upstream profile list: a GitHub link and its house label."""

    github: str | None = None
    location: str | None = None

    model_config = ConfigDict(extra="ignore")
