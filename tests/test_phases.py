import pytest

from intersection_sim.config import TimingConfig
from intersection_sim.model.directions import Direction, LightColor, NS_AXIS, EW_AXIS
from intersection_sim.model.phases import (
    Phase,
    SAFE_CROSSINGS,
    get_lights,
    next_phase,
    phase_duration_ms,
)


class TestCycle:
    def test_cycle_order(self):
        seen = [Phase.NS_GREEN]
        for _ in range(8):
            seen.append(next_phase(seen[-1]))
        assert seen == [
            Phase.NS_GREEN, Phase.NS_YELLOW, Phase.EW_GREEN, Phase.EW_YELLOW,
        ] * 2 + [Phase.NS_GREEN]

    def test_durations(self):
        timing = TimingConfig(green_duration_ms=5000, yellow_duration_ms=1500)
        assert phase_duration_ms(Phase.NS_GREEN, timing) == 5000
        assert phase_duration_ms(Phase.EW_GREEN, timing) == 5000
        assert phase_duration_ms(Phase.NS_YELLOW, timing) == 1500
        assert phase_duration_ms(Phase.EW_YELLOW, timing) == 1500


class TestLights:
    @pytest.mark.parametrize("phase", list(Phase))
    def test_exactly_one_axis_non_red(self, phase):
        lights = get_lights(phase)
        ns_red = all(lights[d] is LightColor.RED for d in NS_AXIS)
        ew_red = all(lights[d] is LightColor.RED for d in EW_AXIS)
        assert ns_red != ew_red

    @pytest.mark.parametrize("phase", list(Phase))
    def test_axis_shares_color(self, phase):
        lights = get_lights(phase)
        assert lights[Direction.NORTH] is lights[Direction.SOUTH]
        assert lights[Direction.EAST] is lights[Direction.WEST]

    def test_yellow_pairs_with_red(self):
        lights = get_lights(Phase.EW_YELLOW)
        assert lights[Direction.EAST] is LightColor.YELLOW
        assert lights[Direction.NORTH] is LightColor.RED

    def test_get_lights_returns_copy(self):
        lights = get_lights(Phase.NS_GREEN)
        lights[Direction.NORTH] = LightColor.RED
        assert get_lights(Phase.NS_GREEN)[Direction.NORTH] is LightColor.GREEN


class TestSafeCrossings:
    def test_cross_axis_is_safe(self):
        assert SAFE_CROSSINGS[Phase.NS_GREEN] == EW_AXIS
        assert SAFE_CROSSINGS[Phase.EW_GREEN] == NS_AXIS

    def test_no_crossing_in_yellow(self):
        assert Phase.NS_YELLOW not in SAFE_CROSSINGS
        assert Phase.EW_YELLOW not in SAFE_CROSSINGS

    def test_labels(self):
        assert Phase.NS_GREEN.label == "North/South Green"
        assert Phase.EW_YELLOW.label == "East/West Yellow"


class TestDirection:
    def test_parse_name(self):
        assert Direction.parse("east") is Direction.EAST
        assert Direction.parse(" North ") is Direction.NORTH
        assert Direction.parse(Direction.WEST) is Direction.WEST

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Direction.parse("up")
