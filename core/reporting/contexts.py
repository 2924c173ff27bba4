from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional

from core.services.critical_path import CriticalPathStats
from core.services.reporting import GanttTaskBar, TaskVariance


@dataclass
class CriticalPathReportContext:
    project_name: str
    stats: CriticalPathStats
    project_end: int
    bars: List[GanttTaskBar]
    variance: Optional[Dict[str, TaskVariance]]
    as_of: date


@dataclass
class ExcelReportContext(CriticalPathReportContext):
    pass


@dataclass
class PdfReportContext(CriticalPathReportContext):
    gantt_png_path: str
