from pathlib import Path
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib import colors
from reportlab.platypus import (
    SimpleDocTemplate,
    Paragraph,
    Spacer,
    Table,
    TableStyle,
    Image,
)
from reportlab.lib.styles import getSampleStyleSheet

from core.reporting.contexts import PdfReportContext


class PdfReportRenderer:
    def render(self, ctx: PdfReportContext, output_path: Path) -> Path:
        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=landscape(A4),
            leftMargin=40,
            rightMargin=40,
            topMargin=40,
            bottomMargin=40,
        )

        styles = getSampleStyleSheet()
        story = []

        # ---------------- Title ----------------
        story.append(Paragraph(f"Critical Path Report - {ctx.project_name}", styles["Title"]))
        story.append(Spacer(1, 12))

        # ---------------- Summary ----------------
        info = [
            f"As of: {ctx.as_of.isoformat()}",
            f"Tasks total: {ctx.stats.total_tasks}",
            f"Critical tasks: {ctx.stats.critical_tasks}",
            f"Project duration (days): {ctx.stats.project_duration}",
            f"Critical path duration (days): {ctx.stats.critical_path_duration}",
        ]

        for line in info:
            story.append(Paragraph(line, styles["Normal"]))

        story.append(Spacer(1, 16))

        # ---------------- Gantt ----------------
        if ctx.gantt_png_path:
            story.append(Paragraph("Gantt Chart", styles["Heading2"]))
            story.append(Spacer(1, 8))

            img = Image(ctx.gantt_png_path)
            img._restrictSize(720, 280)
            story.append(img)
            story.append(Spacer(1, 16))

        # ---------------- Tasks ----------------
        if ctx.bars:
            story.append(Paragraph("Task Slack", styles["Heading2"]))
            story.append(Spacer(1, 8))

            data = [["Task", "Start", "End", "Total slack", "Free slack", "Critical"]]
            critical_rows = []
            for i, b in enumerate(ctx.bars, start=1):
                data.append([
                    b.name,
                    b.start.isoformat(),
                    b.end.isoformat(),
                    b.total_slack,
                    b.free_slack,
                    "Yes" if b.is_critical else "No",
                ])
                if b.is_critical:
                    critical_rows.append(i)

            style = [
                ("BACKGROUND", (0,0), (-1,0), colors.lightgrey),
                ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
                ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
                ("ALIGN", (3,1), (4,-1), "RIGHT"),
            ]
            for r in critical_rows:
                style.append(("BACKGROUND", (0,r), (-1,r), colors.mistyrose))

            table = Table(data, colWidths=[260, 90, 90, 80, 80, 70])
            table.setStyle(TableStyle(style))
            story.append(table)

        doc.build(story)
        return output_path
