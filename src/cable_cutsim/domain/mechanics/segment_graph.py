# cable_cutsim/domain/mechanics/segment_graph.py
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from cable_cutsim.app.protocols import MirrorPolicy
from cable_cutsim.config.models import MirrorRuleModel


class SegmentGraph:
    """
    Straight-line lay order of a cable family plus its mirror table.
    No branching, no cycles: the route between two segments passes through
    every segment between them in the canonical order.
    """

    def __init__(
        self,
        order: Sequence[str],
        mirror: Mapping[str, Mapping[str, MirrorRuleModel]] | None = None,
        *,
        policy: MirrorPolicy,
    ):
        self.order = tuple(order)
        self._index = {sid: i for i, sid in enumerate(self.order)}
        self.mirror = MappingProxyType({a: dict(rules) for a, rules in (mirror or {}).items()})
        self.policy = policy

    def __contains__(self, segment_id: str) -> bool:
        return segment_id in self._index

    def path_between(self, start_id: str, end_id: str | None) -> list[str]:
        i = self._index.get(start_id)
        if i is None:
            return []
        if not end_id or end_id == start_id:
            return [start_id]
        j = self._index.get(end_id)
        if j is None:
            return [start_id]
        lo, hi = min(i, j), max(i, j)
        path = list(self.order[lo : hi + 1])
        return path if i <= j else path[::-1]

    def rule(self, start_id: str, end_id: str) -> tuple[bool, bool] | None:
        """(start flag, end flag) for the pair; falls back to the reversed entry, flags swapped."""
        r = self.mirror.get(start_id, {}).get(end_id)
        if r is not None:
            return r.a, r.b
        r = self.mirror.get(end_id, {}).get(start_id)
        if r is not None:
            return r.b, r.a
        return None

    def is_mirrored(self, segment_id: str, start_id: str, end_id: str | None) -> bool:
        """
        On the A..B path only the endpoints can be reversed, by the (A, B) rule.
        Segments off the path, or any segment when B is blank, go to the policy.
        """
        if not start_id:
            return False
        if end_id and segment_id in self.path_between(start_id, end_id):
            if start_id == end_id or segment_id not in (start_id, end_id):
                return False
            r = self.rule(start_id, end_id)
            if r is None:
                return False
            return r[0] if segment_id == start_id else r[1]
        return self.policy.detached(self, segment_id, start_id, end_id)
