# cable_cutsim/app/build.py
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from cable_cutsim.app.assembler import CutAssembler
from cable_cutsim.app.protocols import RouteFeed
from cable_cutsim.config.models import AppModel, CableFamilyModel
from cable_cutsim.domain.mechanics.mechanics_core import CutMechanics
from cable_cutsim.domain.mechanics.mechanics_factory import RawRows, build_mechanics, fetch_rows
from cable_cutsim.io.cut_logging import CutLogging  # JSON logs
from cable_cutsim.io.recorder import JsonlSink, Recorder
from cable_cutsim.runtime.registries import make_family
from cable_cutsim.sim.clock import FaultClock
from cable_cutsim.sim.hooks import CutHooks, NoopHooks


@dataclass
class App:
    config: AppModel
    family: CableFamilyModel
    clock: FaultClock
    hooks: CutHooks
    mechanics: CutMechanics
    assembler: CutAssembler

    def refresh(self, raw_rows: RawRows) -> "App":
        """Swap in a new route snapshot; the previous one is left untouched."""
        mechanics = build_mechanics(self.family, raw_rows)
        _report_store(self.hooks, self.family, mechanics)
        assembler = CutAssembler(
            family=self.family, mechanics=mechanics, clock=self.clock, hooks=self.hooks
        )
        return App(self.config, self.family, self.clock, self.hooks, mechanics, assembler)


def _report_store(hooks: CutHooks, family: CableFamilyModel, mechanics: CutMechanics) -> None:
    store = mechanics.store
    hooks.store_built(
        family=family.slug,
        segments=len(store),
        points=sum(len(s.meta) for s in store.values()),
        dropped=dict(store.dropped),
    )


def build(
    cfg: AppModel | Mapping,
    *,
    raw_rows: RawRows | None = None,
    feed: RouteFeed | None = None,
    clock: FaultClock | None = None,
    recorder: Recorder | None = None,
    logger: logging.Logger | None = None,
    use_logging: bool = True,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, AppModel) else AppModel.model_validate(cfg)
    family = make_family(model.family)

    # 1) Clock
    clock = clock or FaultClock.in_zone(model.clock.timezone)

    # 2) Hooks (structured logs + analytics recorder)
    hooks = (
        CutLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            logger=logger,
            recorder=recorder or Recorder(JsonlSink()),
        )
        if use_logging
        else NoopHooks()
    )

    # 3) Route snapshot: explicit rows win over a feed; neither means "not loaded yet"
    if raw_rows is None:
        raw_rows = fetch_rows(family, feed) if feed is not None else {}
    mechanics = build_mechanics(family, raw_rows)
    _report_store(hooks, family, mechanics)

    # 4) Assembler
    assembler = CutAssembler(family=family, mechanics=mechanics, clock=clock, hooks=hooks)

    return App(model, family, clock, hooks, mechanics, assembler)
