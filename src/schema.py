"""pydantic models for the structure request and the function paths init file."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Annotated, Literal

from src.builders.mcfunction.geom_utils import EMPTY_MATERIAL_NAMES


PositiveInt = Annotated[int, Field(gt=0)]
NonNegativeInt = Annotated[int, Field(ge=0)]

NO_TEXT = "none"


def _canon(s: str) -> str:
    return str(s).strip().lower()


def _require_materials(values: List[str], label: str) -> List[str]:
    for i, v in enumerate(values):
        if _canon(v) in EMPTY_MATERIAL_NAMES:
            raise ValueError(f"{label}[{i}] must name a block, got {v!r}")
    return values


# =========================
# Family inputs (one TOML key per parallel array)
# =========================

class FamilyInput(BaseModel):
    """
    Base for one structure family. Every field listed in ``parallel_fields``
    holds one value per requested instance, so they must all have the same length.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    parallel_fields: ClassVar[Tuple[str, ...]] = ()

    def _lengths(self) -> Dict[str, int]:
        fields = type(self).model_fields
        return {
            (fields[name].alias or name): len(getattr(self, name))
            for name in self.parallel_fields
            if getattr(self, name) is not None
        }

    @model_validator(mode="after")
    def _check_parallel_lengths(self):
        lengths = self._lengths()
        if len(set(lengths.values())) > 1:
            detail = ", ".join(f"{k}={v}" for k, v in lengths.items())
            raise ValueError(f"arrays must have the same number of values ({detail})")
        return self

    def instance_count(self) -> int:
        lengths = self._lengths()
        return max(lengths.values()) if lengths else 0


class ClearVolInput(FamilyInput):
    parallel_fields: ClassVar[Tuple[str, ...]] = ("height", "width", "depth", "block_type")

    height: List[PositiveInt] = Field(default_factory=list, alias="ClearVolHeight")
    width: List[PositiveInt] = Field(default_factory=list, alias="ClearVolWidth")
    depth: List[PositiveInt] = Field(default_factory=list, alias="ClearVolDepth")
    block_type: List[str] = Field(default_factory=list, alias="ClearVolBlockType")


class MWallInput(FamilyInput):
    parallel_fields: ClassVar[Tuple[str, ...]] = ("height", "width", "depth", "wood", "brick")

    height: List[PositiveInt] = Field(default_factory=list, alias="MWallHeight")
    width: List[PositiveInt] = Field(default_factory=list, alias="MWallWidth")
    depth: List[PositiveInt] = Field(default_factory=list, alias="MWallDepth")
    wood: List[str] = Field(default_factory=list, alias="MWallWoodBlockType")
    brick: List[str] = Field(default_factory=list, alias="MWallBrickBlockType")

    @field_validator("height")
    @classmethod
    def validate_height(cls, v: List[int]):
        # Brick columns span y=2..height-5; anything lower folds the wall onto itself.
        for i, h in enumerate(v):
            if h < 7:
                raise ValueError(f"MWallHeight[{i}] must be >= 7, got {h}")
        return v

    @field_validator("wood")
    @classmethod
    def validate_wood(cls, v: List[str]):
        return _require_materials(v, "MWallWoodBlockType")

    @field_validator("brick")
    @classmethod
    def validate_brick(cls, v: List[str]):
        return _require_materials(v, "MWallBrickBlockType")


class Sign7Input(FamilyInput):
    parallel_fields: ClassVar[Tuple[str, ...]] = (
        "index",
        "text1",
        "text2",
        "text3",
        "back",
        "edge",
        "text_block",
    )

    index: Optional[List[NonNegativeInt]] = Field(default=None, alias="Sign7Index")
    text1: List[str] = Field(default_factory=list, alias="Sign7Text1")
    text2: List[str] = Field(default_factory=list, alias="Sign7Text2")
    text3: List[str] = Field(default_factory=list, alias="Sign7Text3")
    back: List[str] = Field(default_factory=list, alias="Sign7BackBlockType")
    edge: List[str] = Field(default_factory=list, alias="Sign7EdgeBlockType")
    text_block: List[str] = Field(default_factory=list, alias="Sign7TextBlockType")

    @field_validator("text1")
    @classmethod
    def validate_text1(cls, v: List[str]):
        for i, text in enumerate(v):
            if _canon(text) in ("", NO_TEXT):
                raise ValueError(f"Sign7Text1[{i}] must be text; only Sign7Text2 and Sign7Text3 can be none")
        return v

    @field_validator("text_block")
    @classmethod
    def validate_text_block(cls, v: List[str]):
        return _require_materials(v, "Sign7TextBlockType")

    def lines(self, i: int) -> Tuple[Optional[str], ...]:
        out = []
        for text in (self.text1[i], self.text2[i], self.text3[i]):
            out.append(None if _canon(text) in ("", NO_TEXT) else text.strip())
        return tuple(out)

    def sign_index(self, i: int) -> int:
        if self.index is None:
            return i
        return self.index[i]


class SphereInput(FamilyInput):
    parallel_fields: ClassVar[Tuple[str, ...]] = ("radius", "exterior", "interior")

    radius: List[NonNegativeInt] = Field(default_factory=list, alias="SphereRadius")
    exterior: List[str] = Field(default_factory=list, alias="SphereExteriorBlockType")
    interior: List[str] = Field(default_factory=list, alias="SphereInteriorBlockType")

    @field_validator("exterior")
    @classmethod
    def validate_exterior(cls, v: List[str]):
        return _require_materials(v, "SphereExteriorBlockType")


FlowKind = Literal["water", "lava"]


class FallsInput(FamilyInput):
    parallel_fields: ClassVar[Tuple[str, ...]] = ("width", "height", "flow")

    width: List[PositiveInt] = Field(default_factory=list, alias="FallWidth")
    height: List[PositiveInt] = Field(default_factory=list, alias="FallHeight")
    flow: List[FlowKind] = Field(default_factory=list, alias="FallFlowBlock")

    @field_validator("flow", mode="before")
    @classmethod
    def _v_flow(cls, v):
        if isinstance(v, list):
            return [_canon(x) if isinstance(x, str) else x for x in v]
        return v

    @field_validator("width")
    @classmethod
    def validate_width(cls, v: List[int]):
        # Walls sit on both edges; the sheet needs at least one column between them.
        for i, w in enumerate(v):
            if w < 3:
                raise ValueError(f"FallWidth[{i}] must be >= 3, got {w}")
        return v

    @field_validator("height")
    @classmethod
    def validate_height(cls, v: List[int]):
        for i, h in enumerate(v):
            if h < 4:
                raise ValueError(f"FallHeight[{i}] must be >= 4, got {h}")
        return v


class RollerCoasterInput(FamilyInput):
    parallel_fields: ClassVar[Tuple[str, ...]] = ("width", "height")

    width: List[PositiveInt] = Field(default_factory=list, alias="RollerCoasterWidth")
    height: List[PositiveInt] = Field(default_factory=list, alias="RollerCoasterHeight")

    @field_validator("width")
    @classmethod
    def validate_width(cls, v: List[int]):
        for i, w in enumerate(v):
            if w < 3:
                raise ValueError(f"RollerCoasterWidth[{i}] must be >= 3, got {w}")
        return v

    @field_validator("height")
    @classmethod
    def validate_height(cls, v: List[int]):
        for i, h in enumerate(v):
            if h < 4:
                raise ValueError(f"RollerCoasterHeight[{i}] must be >= 4, got {h}")
        return v


class WalkwayInput(FamilyInput):
    # Straight and angled runs are requested independently.
    parallel_fields: ClassVar[Tuple[str, ...]] = ()

    length: List[PositiveInt] = Field(default_factory=list, alias="WalkwayLength")
    angled_chunks: List[PositiveInt] = Field(default_factory=list, alias="WalkwayAngledChunks")

    def instance_count(self) -> int:
        return len(self.length) + len(self.angled_chunks)


FAMILY_INPUTS: Dict[str, Type[FamilyInput]] = {
    "clear_volume": ClearVolInput,
    "mwall": MWallInput,
    "sign": Sign7Input,
    "sphere": SphereInput,
    "falls": FallsInput,
    "roller_coaster": RollerCoasterInput,
    "walkway": WalkwayInput,
}


# =========================
# Init file (where the functions go)
# =========================

class FunctionPathsConfig(BaseModel):
    """
    Init file contents: the Minecraft saves directory and the world's
    functions directory below it. Both are optional; an empty config
    resolves to the current directory.
    """

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    mc_saves_dir: str = ""
    mc_world_functions_dir: str = ""

    @property
    def basepath(self) -> Path:
        saves = Path(self.mc_saves_dir).expanduser() if self.mc_saves_dir else Path(".")
        return saves / self.mc_world_functions_dir if self.mc_world_functions_dir else saves
