"""
Debug tracing infrastructure for gridroute.

When debug mode is enabled, the layout pass records every routing decision
and a snapshot of each pipeline stage. This is useful for:
1. Understanding why a connector took a particular shape
2. Finding connectors that were skipped because an endpoint is missing
3. Writing targeted tests against individual routing decisions

Usage:
    >>> diagram = GridDiagram()
    >>> svg = diagram.generate(text, debug=True)
    >>> trace = diagram.get_trace()
    >>> print(trace.summary())
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .models import Point


@dataclass
class RouteDecision:
    """
    Record of how one connector was routed.

    Attributes:
        source: Source node id.
        target: Target node id.
        kind: Route kind name, or "unresolved" for a missing endpoint.
        source_side: Side of the source node the route leaves from.
        target_side: Side of the target node the route arrives at.
        waypoints: Via-points produced by the planner.
        radii: Corner radius chosen for each interior via-point.
    """

    source: str
    target: str
    kind: str
    source_side: Optional[str] = None
    target_side: Optional[str] = None
    waypoints: List[Point] = field(default_factory=list)
    radii: List[float] = field(default_factory=list)

    def __str__(self) -> str:
        if self.kind == "unresolved":
            return f"{self.source} -> {self.target}: unresolved"
        points = " ".join(f"({x:g},{y:g})" for x, y in self.waypoints)
        return (
            f"{self.source} -> {self.target}: {self.kind} "
            f"[{self.source_side}->{self.target_side}] {points}"
        )


@dataclass
class PipelineStage:
    """Snapshot of state at a pipeline stage."""

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
class RouteTrace:
    """
    Complete trace of a layout pass.

    Attributes:
        stages: Pipeline stages with their data.
        decisions: One routing decision per connector, in input order.
        input_text: The original input text, when parsed from text.
    """

    stages: List[PipelineStage] = field(default_factory=list)
    decisions: List[RouteDecision] = field(default_factory=list)
    input_text: str = ""

    def add_stage(self, name: str, data: Dict[str, Any]) -> None:
        self.stages.append(PipelineStage(name, data.copy()))

    def add_decision(self, decision: RouteDecision) -> None:
        self.decisions.append(decision)

    def get_stage(self, name: str) -> Optional[PipelineStage]:
        """Get a specific pipeline stage by name."""
        for stage in self.stages:
            if stage.name == name:
                return stage
        return None

    def get_decisions_by_kind(self, kind: str) -> List[RouteDecision]:
        return [d for d in self.decisions if d.kind == kind]

    def get_unresolved(self) -> List[RouteDecision]:
        """Connectors skipped because an endpoint does not exist."""
        return self.get_decisions_by_kind("unresolved")

    def summary(self) -> str:
        """
        Generate a human-readable summary of the trace.

        Returns a string with the input, the pipeline stages and route
        counts grouped by kind.
        """
        lines = [
            "=" * 60,
            "ROUTE TRACE SUMMARY",
            "=" * 60,
            "",
            f"Input: {repr(self.input_text[:100])}"
            f"{'...' if len(self.input_text) > 100 else ''}",
            "",
            f"Pipeline stages: {len(self.stages)}",
        ]
        for stage in self.stages:
            lines.append(f"  {stage.name}")

        lines.extend(["", f"Total connectors: {len(self.decisions)}", ""])

        kind_counts: Dict[str, int] = {}
        for d in self.decisions:
            kind_counts[d.kind] = kind_counts.get(d.kind, 0) + 1

        lines.append("Routes by kind:")
        for kind, count in sorted(kind_counts.items(), key=lambda x: -x[1]):
            lines.append(f"  {kind}: {count}")

        return "\n".join(lines)

    def dump(self) -> str:
        """Complete dump of all stages and routing decisions."""
        lines = [self.summary(), "", "=" * 60, "DETAILED TRACE", "=" * 60, ""]

        lines.append("PIPELINE STAGES:")
        lines.append("-" * 40)
        for stage in self.stages:
            lines.append(str(stage))
            lines.append("")

        lines.append("ROUTING DECISIONS:")
        lines.append("-" * 40)
        for d in self.decisions:
            lines.append(str(d))

        return "\n".join(lines)

    def dump_to_file(self, filename: str) -> None:
        """Write the complete trace dump to a file."""
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.dump())
