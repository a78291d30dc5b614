from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- OPEN SETS ---------------------


class OpenSetScanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["scan"] = "scan"


class OpenSetHeapModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["heap"] = "heap"
    compact_ratio: float = Field(default=4.0, ge=1.0)  # heap items per live entry before rebuild


OpenSetUnion = Annotated[OpenSetScanModel | OpenSetHeapModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class SearchStateModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    run_id: str = "local"
    open_set: OpenSetUnion = Field(default_factory=OpenSetScanModel)
    log: LogModel = LogModel()
