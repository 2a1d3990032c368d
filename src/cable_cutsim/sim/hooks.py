# sim/hooks.py
from typing import Protocol

from cable_cutsim.domain.entities.cut import CutEvent, CutPreview, FieldError


class CutHooks(Protocol):
    def store_built(self, *, family, segments, points, dropped): ...
    def preview(self, pv: CutPreview, *, start, end): ...
    def assembled(self, ev: CutEvent): ...
    def rejected(self, errors: list[FieldError], *, start, end): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def store_built(self, **_):
        pass

    def preview(self, *_, **__):
        pass

    def assembled(self, *_, **__):
        pass

    def rejected(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
