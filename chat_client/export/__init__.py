"""Spreadsheet export of the conversation transcript."""

from chat_client.export.spreadsheet import (
    EXPORT_COLUMNS,
    EXPORT_FILENAME,
    SHEET_NAME,
    XLSX_MEDIA_TYPE,
    export_to_spreadsheet,
    read_spreadsheet_rows,
)

__all__ = [
    "EXPORT_COLUMNS",
    "EXPORT_FILENAME",
    "SHEET_NAME",
    "XLSX_MEDIA_TYPE",
    "export_to_spreadsheet",
    "read_spreadsheet_rows",
]
