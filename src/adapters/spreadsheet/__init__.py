from .openpyxl_spreadsheet_host import OpenpyxlSpreadsheetHost

__all__ = [
    "OpenpyxlSpreadsheetHost",
]
