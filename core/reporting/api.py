"""Reporting API wrappers around renderer classes."""

import logging
from pathlib import Path
from datetime import date
from contextlib import suppress
from typing import Iterable, Optional

from core.domain import BaselineTask, Task, TaskDependency
from core.reporting.renderers.gantt import GanttPngRenderer
from core.reporting.renderers.excel import ExcelReportRenderer
from core.reporting.renderers.pdf import PdfReportRenderer
from core.reporting.contexts import (
    ExcelReportContext,
    PdfReportContext,
)
from core.services.critical_path import (
    CriticalPathEngine,
    CriticalPathResult,
    get_critical_path_stats,
)
from core.services.reporting import build_gantt_bars, calculate_schedule_variance
from infra.operational_support import bind_trace_id, current_trace_id

logger = logging.getLogger(__name__)


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _cleanup_temp_artifact(path: Path | None, temp_dir: Path | None = None) -> None:
    if path:
        with suppress(FileNotFoundError, PermissionError, OSError):
            path.unlink()

    parent = temp_dir if temp_dir is not None else (path.parent if path else None)
    if parent is None:
        return
    if parent.exists():
        with suppress(FileNotFoundError, PermissionError, OSError):
            if not any(parent.iterdir()):
                parent.rmdir()


def _report_context_kwargs(
    tasks: list[Task],
    result: CriticalPathResult,
    project_name: str,
    baseline_tasks: Optional[Iterable[BaselineTask]],
    as_of: date,
) -> dict:
    return dict(
        project_name=project_name,
        stats=get_critical_path_stats(tasks, result.critical_task_ids),
        project_end=result.project_end,
        bars=build_gantt_bars(tasks, result),
        variance=calculate_schedule_variance(tasks, baseline_tasks) if baseline_tasks is not None else None,
        as_of=as_of,
    )


def generate_gantt_png(
    tasks: Iterable[Task],
    dependencies: Iterable[TaskDependency],
    output_path: str | Path,
    today: date | None = None,
) -> Path:
    tasks = list(tasks)
    with bind_trace_id(current_trace_id()):
        result = CriticalPathEngine().calculate(tasks, dependencies)
        bars = build_gantt_bars(tasks, result)
        path = GanttPngRenderer().render(bars, _ensure_parent(Path(output_path)), today=today)
        logger.info("Gantt chart written to %s", path)
        return path


def generate_excel_report(
    tasks: Iterable[Task],
    dependencies: Iterable[TaskDependency],
    output_path: str | Path,
    project_name: str = "Project",
    baseline_tasks: Iterable[BaselineTask] | None = None,
    as_of: date | None = None,
) -> Path:
    as_of = as_of or date.today()
    tasks = list(tasks)
    with bind_trace_id(current_trace_id()):
        result = CriticalPathEngine().calculate(tasks, dependencies)
        ctx = ExcelReportContext(
            **_report_context_kwargs(tasks, result, project_name, baseline_tasks, as_of)
        )
        path = ExcelReportRenderer().render(ctx, _ensure_parent(Path(output_path)))
        logger.info("Excel critical path report written to %s", path)
        return path


def generate_pdf_report(
    tasks: Iterable[Task],
    dependencies: Iterable[TaskDependency],
    output_path: str | Path,
    project_name: str = "Project",
    temp_dir: str | Path = "tmp_reports",
    baseline_tasks: Iterable[BaselineTask] | None = None,
    as_of: date | None = None,
) -> Path:
    as_of = as_of or date.today()
    tasks = list(tasks)
    temp_dir = Path(temp_dir)
    temp_dir.mkdir(parents=True, exist_ok=True)
    gantt_path = temp_dir / "gantt_critical_path.png"
    with bind_trace_id(current_trace_id()):
        result = CriticalPathEngine().calculate(tasks, dependencies)
        context_kwargs = _report_context_kwargs(tasks, result, project_name, baseline_tasks, as_of)
        try:
            GanttPngRenderer().render(context_kwargs["bars"], gantt_path, today=as_of)
        except ValueError:
            gantt_path = None

        ctx = PdfReportContext(
            **context_kwargs,
            gantt_png_path=str(gantt_path) if gantt_path else "",
        )
        try:
            path = PdfReportRenderer().render(ctx, _ensure_parent(Path(output_path)))
        finally:
            _cleanup_temp_artifact(gantt_path, temp_dir=temp_dir)
        logger.info("PDF critical path report written to %s", path)
        return path
