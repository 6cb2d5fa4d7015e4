import json
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from .models import AnalysisVerdict, ConstraintReport, Decomposition


def verdict_to_dict(
    verdict: AnalysisVerdict,
    source: str,
    decomposition: Decomposition,
    constraint_report: Optional[ConstraintReport] = None,
) -> Dict[str, Any]:
    """Plain-data payload for one analysis run."""

    report: Dict[str, Any] = {
        "run_id": uuid.uuid4().hex,
        "language_id": verdict.language_id,
        "formal_type": verdict.formal_type.value,
        "source": source,
        "decomposition": dict(decomposition.segments()),
        "results": [
            {
                "pump_count": r.pump_count,
                "produced_string": r.produced_string,
                "accepted": r.accepted,
                "recognizer_error": r.recognizer_error,
            }
            for r in verdict.results
        ],
        "has_violation": verdict.has_violation,
        "violating_pump_counts": [r.pump_count for r in verdict.violating_results],
        "degraded": verdict.degraded,
        "conclusion": verdict.conclusion_text,
        "explanation": verdict.explanation_text,
        "violation_details": verdict.violation_details,
    }
    if constraint_report is not None:
        report["constraints"] = {
            "pumping_length": constraint_report.pumping_length,
            "all_satisfied": constraint_report.all_satisfied,
            "reconstructs_source": constraint_report.reconstructs_source,
            "items": [
                {"name": c.name, "satisfied": c.satisfied, "value": c.value_text}
                for c in constraint_report.constraints
            ],
            "errors": list(constraint_report.errors),
        }
    return report


class ReportManager:
    def __init__(self, reports_dir: Path):
        self.reports_dir = Path(reports_dir)
        self.logs_dir = self.reports_dir.parent / "logs"

    def persist_report(self, report: dict) -> Path:
        self.reports_dir.mkdir(parents=True, exist_ok=True)
        report_id = report.get("run_id", uuid.uuid4().hex)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"report_{timestamp}_{report_id}.json"
        path = self.reports_dir / filename
        path.write_text(json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8")
        return path

    def persist_log(self, report: dict, report_stem: str) -> Path:
        """Write a human-readable log summarizing the report (one log == one run)."""
        self.logs_dir.mkdir(parents=True, exist_ok=True)
        log_path = self.logs_dir / f"{report_stem}.log"
        lines = []

        lines.append("PumpingLab Analysis Report")
        lines.append("==========================")
        lines.append(f"Date: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        lines.append(f"Run ID: {report.get('run_id')}")
        lines.append(f"Language: {report.get('language_id')} ({report.get('formal_type')})")
        lines.append(f"Source: \"{report.get('source', '')}\"")
        lines.append("")

        lines.append("Decomposition")
        lines.append("-------------")
        for name, segment in report.get("decomposition", {}).items():
            lines.append(f"{name} = \"{segment}\"")
        lines.append("")

        constraints = report.get("constraints")
        if constraints:
            lines.append("Constraints")
            lines.append("-----------")
            lines.append(f"Pumping length: {constraints.get('pumping_length')}")
            for item in constraints.get("items", []):
                mark = "ok" if item.get("satisfied") else "VIOLATED"
                lines.append(f"  {item.get('name')}: {mark} ({item.get('value')})")
            for err in constraints.get("errors", []):
                lines.append(f"  error: {err}")
            lines.append("")

        lines.append("Pumped Strings")
        lines.append("--------------")
        lines.append(f"{'i':<4} | {'Accepted':<10} | String")
        lines.append("-" * 40)
        for result in report.get("results", []):
            if result.get("recognizer_error"):
                status = "error"
            else:
                status = "yes" if result.get("accepted") else "no"
            lines.append(f"{result.get('pump_count'):<4} | {status:<10} | \"{result.get('produced_string')}\"")
        lines.append("")

        lines.append("Verdict")
        lines.append("-------")
        lines.append(str(report.get("conclusion", "")))
        lines.append(str(report.get("explanation", "")))
        if report.get("violation_details"):
            lines.append(str(report["violation_details"]))

        log_path.write_text("\n".join(lines), encoding="utf-8")
        return log_path

    def save(self, report: dict) -> tuple[Path, Path]:
        report_path = self.persist_report(report)
        log_path = self.persist_log(report, report_path.stem)
        return report_path, log_path
