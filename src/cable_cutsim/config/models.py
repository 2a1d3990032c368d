from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class ClockModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    timezone: str = "UTC"  # IANA name used for "now" defaults


# ----------------- RPL FIELD ALIASES ---------------------


class FieldAliasesModel(BaseModel):
    """Priority-ordered source column names per logical field; first finite match wins."""

    model_config = ConfigDict(extra="forbid", frozen=True)
    distance: tuple[str, ...] = (
        "cable_cumulative_total",
        "cumulative_total",
        "cable_between_positions",
    )
    latitude: tuple[str, ...] = ("full_latitude", "decimal_latitude", "latitude")
    longitude: tuple[str, ...] = ("full_longitude", "decimal_longitude", "longitude")
    depth: tuple[str, ...] = ("Depth", "depth", "approx_depth")
    cable_type: tuple[str, ...] = ("cable_type",)

    @field_validator("distance", "latitude", "longitude", "depth", "cable_type")
    @classmethod
    def _non_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("at least one alias is required")
        return v


# ----------------- SEGMENTS & MIRRORING ---------------------


class SegmentModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    id: str
    label: str
    endpoint: str = ""  # feed path of the segment's RPL table


class MirrorRuleModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    a: bool = False  # reverse the Point A segment
    b: bool = False  # reverse the Point B segment


class MirrorPolicyEndpointsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["endpoints"] = "endpoints"


class MirrorPolicySpanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["span"] = "span"


MirrorPolicyUnion = Annotated[
    MirrorPolicyEndpointsModel | MirrorPolicySpanModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class CableFamilyModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    slug: str  # cable key sent with persisted cuts
    cut_prefix: str
    table_prefix: str
    segments: list[SegmentModel]
    columns: FieldAliasesModel = Field(default_factory=FieldAliasesModel)
    mirror: dict[str, dict[str, MirrorRuleModel]] = Field(default_factory=dict)
    mirror_policy: MirrorPolicyUnion = Field(default_factory=MirrorPolicyEndpointsModel)
    extra_cut_types: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_segments(self):
        ids = [s.id for s in self.segments]
        if len(set(ids)) != len(ids):
            raise ValueError(f"duplicate segment ids in {self.name}: {ids}")
        known = set(ids)
        for a, rules in self.mirror.items():
            unknown = ({a} | set(rules)) - known
            if unknown:
                raise ValueError(f"mirror table names unknown segments {sorted(unknown)}")
        return self

    @property
    def segment_ids(self) -> list[str]:
        return [s.id for s in self.segments]

    def label_of(self, segment_id: str) -> str:
        for s in self.segments:
            if s.id == segment_id:
                return s.label
        return segment_id or "Unknown"


class AppModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    run_id: str = "local"
    family: str | CableFamilyModel = "sea-us"
    log: LogModel = LogModel()
    clock: ClockModel = ClockModel()
