from pathlib import Path
from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side

from core.reporting.contexts import ExcelReportContext
from core.services.reporting import format_variance


class ExcelReportRenderer:
    def render(self, ctx: ExcelReportContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()

        header_font = Font(bold=True)
        title_font = Font(bold=True, size=14)
        center = Alignment(horizontal="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        header_fill = PatternFill("solid", fgColor="DDDDDD")
        critical_fill = PatternFill("solid", fgColor="FFCCCC")

        def header_row(ws, headers):
            for col_index, h in enumerate(headers, start=1):
                cell = ws.cell(row=1, column=col_index, value=h)
                cell.font = header_font
                cell.alignment = center
                cell.fill = header_fill
                cell.border = thin_border

        # ---------------- Overview ----------------
        ws = wb.active
        ws.title = "Overview"

        ws["A1"] = f"Critical Path - {ctx.project_name}"
        ws["A1"].font = title_font

        row = 3

        def kv(key, value):
            nonlocal row
            ws[f"A{row}"] = key
            ws[f"B{row}"] = value
            ws[f"A{row}"].font = header_font
            ws[f"A{row}"].border = thin_border
            ws[f"B{row}"].border = thin_border
            row += 1

        kv("As of", ctx.as_of.isoformat())
        kv("Tasks - total", ctx.stats.total_tasks)
        kv("Critical tasks", ctx.stats.critical_tasks)
        kv("Project duration (days)", ctx.stats.project_duration)
        kv("Critical path duration (days)", ctx.stats.critical_path_duration)
        kv("Project end (day offset)", ctx.project_end)

        ws.column_dimensions["A"].width = 32
        ws.column_dimensions["B"].width = 20

        # ---------------- Tasks ----------------
        ws_tasks = wb.create_sheet("Tasks")
        header_row(ws_tasks, [
            "Task ID", "Name", "Start", "End", "Duration (days)",
            "Critical", "Total slack", "Free slack", "Progress %", "Status",
        ])

        for row_index, b in enumerate(ctx.bars, start=2):
            values = [
                b.task_id,
                b.name,
                b.start.isoformat(),
                b.end.isoformat(),
                (b.end - b.start).days + 1,
                "Yes" if b.is_critical else "No",
                b.total_slack,
                b.free_slack,
                b.progress,
                getattr(b.status, "value", str(b.status)),
            ]
            for col_index, v in enumerate(values, start=1):
                cell = ws_tasks.cell(row=row_index, column=col_index, value=v)
                cell.border = thin_border
                if b.is_critical:
                    cell.fill = critical_fill

        ws_tasks.column_dimensions["A"].width = 36
        ws_tasks.column_dimensions["B"].width = 30
        for col_letter in ("C", "D", "E", "F", "G", "H", "I", "J"):
            ws_tasks.column_dimensions[col_letter].width = 15

        # ---------------- Baseline Variance ----------------
        if ctx.variance:
            ws_v = wb.create_sheet("Variance")
            header_row(ws_v, ["Task", "Start variance", "End variance", "Status", "Baseline", "Critical"])

            for r_i, b in enumerate(ctx.bars, start=2):
                v = ctx.variance.get(b.task_id)
                if v is None:
                    continue
                ws_v.cell(r_i, 1, b.name).border = thin_border
                ws_v.cell(r_i, 2, format_variance(v.start_variance)).border = thin_border
                ws_v.cell(r_i, 3, format_variance(v.end_variance)).border = thin_border
                ws_v.cell(r_i, 4, v.status.value).border = thin_border
                ws_v.cell(r_i, 5, "Yes" if v.has_baseline else "No").border = thin_border
                ws_v.cell(r_i, 6, "Yes" if b.is_critical else "No").border = thin_border

            ws_v.column_dimensions["A"].width = 40
            for col in ("B", "C", "D", "E", "F"):
                ws_v.column_dimensions[col].width = 15

        wb.save(output_path)
        return output_path
