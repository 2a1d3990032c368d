# runtime/registries.py
from collections.abc import Callable
from typing import Any

from cable_cutsim.app.protocols import MirrorPolicy
from cable_cutsim.config.families import FAMILIES
from cable_cutsim.config.models import (
    CableFamilyModel,
    MirrorPolicyEndpointsModel,
    MirrorPolicySpanModel,
    MirrorPolicyUnion,
)
from cable_cutsim.domain.mechanics.mirror_policies import EndpointMirrorPolicy, SpanMirrorPolicy

FamilyFactory = Callable[[], CableFamilyModel]
MirrorPolicyFactory = Callable[[MirrorPolicyUnion, dict], MirrorPolicy]

_family_registry: dict[str, FamilyFactory] = {}
_mirror_policy_registry: dict[str, MirrorPolicyFactory] = {}


# ------------------- Cable families ---------------------------


def register_family(slug: str):
    def deco(fn: FamilyFactory):
        _family_registry[slug] = fn
        return fn

    return deco


def family_slugs() -> list[str]:
    return sorted(_family_registry)


def make_family(ref: str | CableFamilyModel | dict[str, Any]) -> CableFamilyModel:
    if isinstance(ref, CableFamilyModel):
        return ref
    if isinstance(ref, dict):
        return CableFamilyModel.model_validate(ref)
    try:
        factory = _family_registry[ref]
    except KeyError:
        raise ValueError(f"Unknown cable family {ref!r}; known: {family_slugs()}")
    return factory()


@register_family("sea-us")
def _make_sea_us():
    return CableFamilyModel.model_validate(FAMILIES["sea-us"])


@register_family("tgnia")
def _make_tgnia():
    return CableFamilyModel.model_validate(FAMILIES["tgnia"])


# ------------------- Mirror policies ---------------------------


def register_mirror_policy(kind: str):
    def deco(fn: MirrorPolicyFactory):
        _mirror_policy_registry[kind] = fn
        return fn

    return deco


def make_mirror_policy(cfg: MirrorPolicyUnion, *, deps: dict | None = None) -> MirrorPolicy:
    try:
        return _mirror_policy_registry[cfg.kind](cfg, deps or {})
    except KeyError:
        raise ValueError(f"Unknown mirror policy kind {cfg.kind!r}")


@register_mirror_policy("endpoints")
def _make_endpoints(cfg: MirrorPolicyEndpointsModel, deps):
    return EndpointMirrorPolicy()


@register_mirror_policy("span")
def _make_span(cfg: MirrorPolicySpanModel, deps):
    return SpanMirrorPolicy()
