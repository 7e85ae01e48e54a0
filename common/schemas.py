from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Post-processed transcript document ---

class TurnRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    role: str = Field(alias="Role")
    content: str = Field(alias="Content")
    end_of_turn: bool = Field(alias="EndOfTurn")
    timestamp: Optional[str] = Field(default=None, alias="Timestamp")


class TranscriptDocument(BaseModel):
    results: list[TurnRecord] = []

    def to_wire(self) -> dict:
        """Dump with the external key names; an unset Timestamp is left out."""
        return self.model_dump(by_alias=True, exclude_none=True)


# --- Service responses ---

class ScriptResponse(BaseModel):
    script: str
