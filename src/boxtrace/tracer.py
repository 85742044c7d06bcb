"""
Debug tracing for diagram parsing.

When debug mode is enabled, the parser records a snapshot of each stage of
the pipeline and every corner candidate that failed to close into a box.
This is mostly useful when a diagram is not parsed the way you expect:

    >>> parser = DiagramParser()
    >>> result = parser.parse(grid, debug=True)
    >>> print(parser.get_trace().summary())

Stages recorded:
- top_lefts: corner candidates found by the local 3-cell test
- boxes: candidates whose outline closed
- probes: border cells holding a connector that points at a box
- edges: deduplicated connectors
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .models import Point


@dataclass
class CandidateRejection:
    """
    A top-left corner candidate that did not become a box.

    Attributes:
        point: Position of the candidate corner.
        reason: Why it was dropped ("outline_not_closed", "outline_off_grid").
    """

    point: Point
    reason: str

    def __str__(self) -> str:
        return f"{self.point!r}: {self.reason}"


@dataclass
class PipelineStage:
    """
    Snapshot of state at one parse stage.

    Attributes:
        name: Name of the stage.
        data: Relevant data at this stage.
    """

    name: str
    data: Dict[str, Any]

    def __str__(self) -> str:
        lines = [f"=== Stage: {self.name} ==="]
        for key, value in self.data.items():
            str_val = str(value)
            if len(str_val) > 100:
                str_val = str_val[:100] + "..."
            lines.append(f"  {key}: {str_val}")
        return "\n".join(lines)


@dataclass
class ParseTrace:
    """
    Complete trace of one parse.

    Attributes:
        stages: Pipeline stages in the order they ran.
        rejections: Corner candidates that did not close.
    """

    stages: List[PipelineStage] = field(default_factory=list)
    rejections: List[CandidateRejection] = field(default_factory=list)

    def add_stage(self, name: str, data: Dict[str, Any]) -> None:
        """Add a pipeline stage snapshot."""
        self.stages.append(PipelineStage(name, data.copy()))

    def add_rejection(self, point: Point, reason: str) -> None:
        """Record a dropped corner candidate."""
        self.rejections.append(CandidateRejection(point, reason))

    def get_stage(self, name: str) -> Optional[PipelineStage]:
        """Get a specific pipeline stage by name."""
        for stage in self.stages:
            if stage.name == name:
                return stage
        return None

    def summary(self) -> str:
        """Generate a human-readable summary of the trace."""
        lines = [
            "=" * 60,
            "PARSE TRACE SUMMARY",
            "=" * 60,
            "",
            f"Pipeline stages: {len(self.stages)}",
        ]
        for stage in self.stages:
            lines.append(str(stage))

        lines.extend(["", f"Rejected candidates: {len(self.rejections)}"])
        for rejection in self.rejections:
            lines.append(f"  {rejection}")

        return "\n".join(lines)
