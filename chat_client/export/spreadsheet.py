"""Transcript to .xlsx encoding using openpyxl.

Produces a single worksheet with a ``sender``/``text`` header row followed by
one row per message in transcript order.
"""

import io

from openpyxl import Workbook, load_workbook

from chat_client.transcript.store import Transcript

EXPORT_FILENAME = "ChatOutput.xlsx"
SHEET_NAME = "ChatOutput"
EXPORT_COLUMNS = ("sender", "text")
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def export_to_spreadsheet(transcript: Transcript) -> bytes:
    """Encode the transcript as an xlsx workbook.

    Args:
        transcript: Messages to export. Not modified.

    Returns:
        Workbook bytes ready to be offered as ``ChatOutput.xlsx``.
    """
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_NAME
    sheet.append(list(EXPORT_COLUMNS))
    for row in transcript.to_export_rows():
        sheet.append([row[column] for column in EXPORT_COLUMNS])

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def read_spreadsheet_rows(data: bytes) -> list[dict[str, str]]:
    """Read rows back from an exported workbook, keyed by header."""
    workbook = load_workbook(io.BytesIO(data), read_only=True)
    try:
        sheet = workbook[SHEET_NAME]
        rows = sheet.iter_rows(values_only=True)
        header = [str(cell) for cell in next(rows, ())]
        return [
            {column: "" if value is None else str(value) for column, value in zip(header, row)}
            for row in rows
        ]
    finally:
        workbook.close()
