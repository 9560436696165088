"""Pydantic model describing one vendor bundle."""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class BundleSpec(BaseModel):
    source_directory: str = Field(
        ...,
        alias="src",
        min_length=1,
        description="Directory inside the dependency tree holding the asset.",
    )
    included_files: Optional[Tuple[str, ...]] = Field(
        default=None,
        alias="include",
        description="Files to pick from the source directory. None takes everything.",
    )
    destination_directory: str = Field(
        ...,
        alias="dest",
        min_length=1,
        description="Path relative to the vendor output area.",
    )

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Return the short-alias form used by table files and the CLI."""

        payload: Dict[str, Any] = {"src": self.source_directory}
        if self.included_files is not None:
            payload["include"] = list(self.included_files)
        payload["dest"] = self.destination_directory
        return payload
