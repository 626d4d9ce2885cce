"""Structured outcomes for best-effort pipeline steps."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from rich.console import Console
from rich.table import Table


class Outcome:
    """Outcome values recorded for each step."""

    SUCCESS = "success"
    SKIPPED = "skipped"
    WARNING = "warning"


@dataclass
class StageResult:
    """Result of one best-effort step against one target."""

    stage: str
    target: str
    outcome: str
    detail: str = ""

    @property
    def wrote(self) -> bool:
        return self.outcome == Outcome.SUCCESS

    @classmethod
    def success(cls, stage: str, target: str, detail: str = "") -> "StageResult":
        return cls(stage, target, Outcome.SUCCESS, detail)

    @classmethod
    def skipped(cls, stage: str, target: str, detail: str = "") -> "StageResult":
        return cls(stage, target, Outcome.SKIPPED, detail)

    @classmethod
    def warning(cls, stage: str, target: str, detail: str = "") -> "StageResult":
        return cls(stage, target, Outcome.WARNING, detail)


@dataclass
class RunSummary:
    """Ordered collection of step results for one run."""

    results: List[StageResult] = field(default_factory=list)

    def add(self, result: StageResult) -> StageResult:
        self.results.append(result)
        return result

    def extend(self, results: List[StageResult]) -> None:
        self.results.extend(results)

    def for_stage(self, stage: str) -> List[StageResult]:
        return [r for r in self.results if r.stage == stage]

    def find(self, stage: str, target: str) -> Optional[StageResult]:
        for result in self.results:
            if result.stage == stage and result.target == target:
                return result
        return None

    def warnings(self) -> List[StageResult]:
        return [r for r in self.results if r.outcome == Outcome.WARNING]

    def counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for result in self.results:
            counts[result.outcome] = counts.get(result.outcome, 0) + 1
        return counts

    def render(self, console: Console) -> None:
        """Print the summary table."""
        if not self.results:
            return

        styles = {
            Outcome.SUCCESS: "green",
            Outcome.SKIPPED: "dim",
            Outcome.WARNING: "yellow",
        }
        table = Table(title="Run summary", show_header=True, header_style="bold cyan")
        table.add_column("Stage")
        table.add_column("Target")
        table.add_column("Outcome")
        table.add_column("Detail")

        for result in self.results:
            style = styles.get(result.outcome, "")
            table.add_row(
                result.stage,
                result.target,
                f"[{style}]{result.outcome}[/{style}]" if style else result.outcome,
                result.detail,
            )

        console.print(table)
