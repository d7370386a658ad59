from intersection_sim.model.directions import Direction
from intersection_sim.model.pedestrians import PedestrianRequestQueue
from intersection_sim.model.phases import Phase


class TestPedestrianRequestQueue:
    def test_requests_collapse(self):
        q = PedestrianRequestQueue()
        q.request("north")
        q.request(Direction.NORTH)
        assert len(q) == 1
        assert q.is_pending("NORTH")

    def test_release_only_in_cross_green(self):
        q = PedestrianRequestQueue()
        q.request(Direction.NORTH)
        q.request(Direction.EAST)
        for phase in (Phase.NS_YELLOW, Phase.EW_YELLOW):
            assert q.release_if_safe(phase) == []
        assert q.release_if_safe(Phase.EW_GREEN) == [Direction.NORTH]
        assert q.release_if_safe(Phase.NS_GREEN) == [Direction.EAST]
        assert len(q) == 0

    def test_release_both_directions_of_axis(self):
        q = PedestrianRequestQueue()
        q.request(Direction.WEST)
        q.request(Direction.EAST)
        assert q.release_if_safe(Phase.NS_GREEN) == [Direction.EAST, Direction.WEST]

    def test_end_walk(self):
        q = PedestrianRequestQueue()
        q.request(Direction.SOUTH)
        q.release_if_safe(Phase.EW_GREEN)
        assert q.walking == {Direction.SOUTH}
        assert q.end_walk() == [Direction.SOUTH]
        assert q.end_walk() == []

    def test_clear(self):
        q = PedestrianRequestQueue()
        q.request(Direction.SOUTH)
        q.request(Direction.EAST)
        q.release_if_safe(Phase.NS_GREEN)
        q.clear()
        assert len(q) == 0
        assert q.walking == set()
