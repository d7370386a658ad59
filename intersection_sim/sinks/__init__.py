from intersection_sim.sinks.base_sink import OutputSink
from intersection_sim.sinks.sink_recording import RecordingSink, SinkCommand

# PygameSink is NOT loaded here, headless runs and tests never need a display.
# demo_intersection.py imports it directly.

__all__ = ["OutputSink", "RecordingSink", "SinkCommand"]
