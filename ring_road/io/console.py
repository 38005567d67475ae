import sys
from typing import Dict, TextIO

from ring_road.model.road import Road


class StepReporter:
    """
    Prints the road strip and a "from X to Y" line per vehicle after each step.

    Previous positions are kept here, keyed by vehicle index, not in the road.
    """

    def __init__(self, total_steps: int, stream: TextIO | None = None) -> None:
        self.total_steps = total_steps
        self.stream = stream if stream is not None else sys.stdout
        self.padding = len(str(total_steps))
        self.previous_positions: Dict[int, int] = {}

    def reset(self) -> None:
        self.previous_positions.clear()

    def header(self) -> None:
        self.stream.write(f"Number of steps: {self.total_steps}\n")

    def report(self, step: int, road: Road) -> None:
        """:param step: zero-based index of the step that just finished"""
        self.stream.write(f"Step {step + 1:>{self.padding}} of {self.total_steps}: ")
        road.print_state(self.stream)

        for v in road.get_vehicles():
            previous = self.previous_positions.get(v.id, v.position)
            self.stream.write(
                f"vehicle{v.id}({v.position}) from vehicle{v.id}({previous})\n"
            )
            self.previous_positions[v.id] = v.position
