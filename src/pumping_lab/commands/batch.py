"""Handler for the 'batch' command."""
from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..analyzer import analyze
from ..catalog import LanguageCatalog, default_catalog
from ..cli_utils import ensure_output_dir, load_json_or_yaml
from ..decomposition import check_shape, decomposition_shape, from_lengths, from_segments
from ..exceptions import BatchFileError, InvalidPumpCountError, PumpingLabError
from ..generator import generate_sample
from ..validator import validate_decomposition
from ..yaml_schema import validate_batch_content

logger = logging.getLogger(__name__)
console = Console()

CSV_HEADERS = [
    "Case", "Language", "Source", "Decomposition", "Constraints OK",
    "Pump Counts", "Violation", "Violating i", "Degraded", "Error",
]


@dataclass
class BatchCaseResult:
    name: str
    language: str
    source: str = ""
    decomposition: str = ""
    constraints_ok: Optional[bool] = None
    pump_counts: Sequence[int] = ()
    has_violation: Optional[bool] = None
    violating: Sequence[int] = ()
    degraded: bool = False
    error: str = ""

    def row(self) -> List[Any]:
        return [
            self.name,
            self.language,
            self.source,
            self.decomposition,
            "" if self.constraints_ok is None else self.constraints_ok,
            " ".join(str(i) for i in self.pump_counts),
            "" if self.has_violation is None else self.has_violation,
            " ".join(str(i) for i in self.violating),
            self.degraded,
            self.error,
        ]


class BatchHandler:
    def __init__(
        self,
        catalog: LanguageCatalog | None = None,
        default_pump_counts: Sequence[int] = (0, 1, 2),
        max_pump_count: Optional[int] = None,
    ):
        self.catalog = catalog if catalog is not None else default_catalog()
        self.default_pump_counts = tuple(default_pump_counts)
        self.max_pump_count = max_pump_count

    def load(self, path: Path) -> List[Dict[str, Any]]:
        try:
            content = load_json_or_yaml(path)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            raise BatchFileError(f"Cannot parse batch file {path}: {exc}") from exc
        result = validate_batch_content(content, self.catalog)
        for warning in result.warnings:
            console.print(f"[yellow]WARNING:[/yellow] {warning}")
        if not result:
            raise BatchFileError(result.summary())
        return content["cases"]

    def _check_cap(self, counts: Sequence[int]) -> None:
        if self.max_pump_count is None:
            return
        for count in counts:
            if count > self.max_pump_count:
                raise InvalidPumpCountError(
                    count, f"Pump count {count} exceeds the configured maximum {self.max_pump_count}"
                )

    def run_case(self, index: int, case: Dict[str, Any]) -> BatchCaseResult:
        language_id = case["language"]
        outcome = BatchCaseResult(name=case.get("name") or f"case-{index + 1}", language=language_id)
        try:
            language = self.catalog.lookup(language_id)
            if "source" in case:
                source = case["source"]
            else:
                source = generate_sample(language_id, case["length"], catalog=self.catalog)
            outcome.source = source

            if "segments" in case:
                decomposition = from_segments(case["segments"])
            else:
                shape = decomposition_shape(language.formal_type)
                decomposition = from_lengths(source, shape, case["lengths"])
            check_shape(language, decomposition)
            outcome.decomposition = " | ".join(f"{n}={v!r}" for n, v in decomposition.segments())

            report = validate_decomposition(source, decomposition, language.pumping_length)
            outcome.constraints_ok = report.valid

            counts = tuple(case.get("pump_counts") or self.default_pump_counts)
            outcome.pump_counts = counts
            self._check_cap(counts)
            verdict = analyze(language_id, decomposition, counts, catalog=self.catalog)
            outcome.has_violation = verdict.has_violation
            outcome.violating = [r.pump_count for r in verdict.violating_results]
            outcome.degraded = verdict.degraded
        except PumpingLabError as exc:
            logger.warning("Case %s failed: %s", outcome.name, exc)
            outcome.error = str(exc)
        return outcome

    def run(self, path: Path, output_csv: Optional[Path] = None) -> List[BatchCaseResult]:
        cases = self.load(path)
        console.print(f"[bold]Found {len(cases)} cases in {path.name}.[/bold]")

        results = [self.run_case(index, case) for index, case in enumerate(cases)]

        if output_csv:
            ensure_output_dir(output_csv.parent)
            with open(output_csv, "w", newline="", encoding="utf-8") as csvfile:
                writer = csv.writer(csvfile)
                writer.writerow(CSV_HEADERS)
                for result in results:
                    writer.writerow(result.row())
            console.print(f"Writing results to: [blue]{output_csv}[/blue]")

        table = Table(title="Batch Pumping Summary")
        table.add_column("Case")
        table.add_column("Language")
        table.add_column("Source")
        table.add_column("Constraints")
        table.add_column("Verdict")
        for result in results:
            if result.error:
                verdict = f"[red]error: {escape(result.error)}[/red]"
            elif result.has_violation:
                verdict = f"[red]violation at i={', '.join(str(i) for i in result.violating)}[/red]"
            else:
                verdict = "[green]no violation[/green]"
            if result.degraded:
                verdict += " [yellow](degraded)[/yellow]"
            constraints = "-" if result.constraints_ok is None else ("ok" if result.constraints_ok else "violated")
            table.add_row(escape(result.name), escape(result.language), escape(repr(result.source)), constraints, verdict)
        console.print(table)
        return results
