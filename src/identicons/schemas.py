from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class StoredIdenticon(BaseModel):
    path: Path = Field(..., description="Location of the written PNG file.")
    filename: str = Field(..., description="Name of the written PNG file.")

    model_config = ConfigDict(frozen=True, extra="forbid")
