import pytest

from intersection_sim.config import TimingConfig
from intersection_sim.model.controller import IntersectionController
from intersection_sim.schedulers import ManualScheduler
from intersection_sim.sinks import RecordingSink


@pytest.fixture
def timing():
    return TimingConfig(green_duration_ms=4000, yellow_duration_ms=2000)


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def sink(scheduler):
    return RecordingSink(clock=scheduler.now)


@pytest.fixture
def controller(sink, scheduler, timing):
    return IntersectionController(sink, scheduler, timing)


@pytest.fixture
def started(controller):
    controller.start()
    return controller
