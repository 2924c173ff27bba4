from datetime import date
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt
import matplotlib.dates as mdates
from matplotlib.dates import date2num
from matplotlib import ticker
from matplotlib.patches import Patch

from core.services.reporting import GanttTaskBar


class GanttPngRenderer:
    def render(
        self,
        bars: List[GanttTaskBar],
        output_path: Path,
        today: Optional[date] = None,
    ) -> Path:
        if not bars:
            raise ValueError("No tasks with dates available for Gantt chart")

        bars = sorted(bars, key=lambda b: (b.start, b.end))

        names = [b.name for b in bars]
        # bars cover whole days: the end date is inclusive
        start_nums = [date2num(b.start) for b in bars]
        durations = [(b.end - b.start).days + 1 for b in bars]

        fig, ax = plt.subplots(figsize=(12, max(3, 0.45 * len(bars) + 1.5)))

        for i, (bar, s, d) in enumerate(zip(bars, start_nums, durations)):
            c = bar.is_critical
            ax.barh(i, d, left=s, height=0.4,
                    color="#ffcccc" if c else "#d0d0ff",
                    edgecolor="black", linewidth=0.6)
            if bar.progress > 0:
                ax.barh(i, d * bar.progress / 100.0, left=s, height=0.4,
                        color="#ff6666" if c else "#8080ff")
            if bar.total_slack > 0:
                ax.barh(i, bar.total_slack, left=date2num(bar.slack_start), height=0.2,
                        color="none", edgecolor="grey", hatch="///", linewidth=0.4)

        ax.set_yticks(range(len(names)))
        ax.set_yticklabels(names, fontsize=9)
        ax.invert_yaxis()

        locator = mdates.AutoDateLocator(minticks=4, maxticks=10)
        ax.xaxis.set_major_locator(locator)
        ax.xaxis.set_major_formatter(mdates.ConciseDateFormatter(locator))
        ax.xaxis.set_minor_locator(ticker.NullLocator())

        today = today or date.today()
        ax.axvline(date2num(today), color="red", linestyle="--", linewidth=1)

        ax.legend(
            handles=[
                Patch(facecolor="#ffcccc", edgecolor="black", label="Critical"),
                Patch(facecolor="#d0d0ff", edgecolor="black", label="Non-critical"),
                Patch(facecolor="none", edgecolor="grey", hatch="///", label="Total slack"),
            ],
            loc="upper right",
            fontsize=8,
        )

        ax.set_title("Project Gantt Chart - Critical Path")
        ax.grid(True, axis="x", linestyle=":", linewidth=0.5)

        fig.tight_layout()
        fig.savefig(output_path, dpi=150)
        plt.close(fig)

        return output_path
