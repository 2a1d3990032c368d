from cable_cutsim.app.protocols import MirrorPolicy


class EndpointMirrorPolicy(MirrorPolicy):
    """Only the (A, B) rule matters; segments off the path keep their recorded axis."""

    def detached(self, graph, segment_id, start_id, end_id) -> bool:
        return False


class SpanMirrorPolicy(MirrorPolicy):
    """
    A segment off the selected path is oriented as the Point B end of a
    selection running from Point A to that segment, i.e. rule (start, segment).b.
    Missing rules mean "not mirrored".
    """

    def detached(self, graph, segment_id, start_id, end_id) -> bool:
        r = graph.rule(start_id, segment_id)
        return bool(r and r[1])
