"""Export modules for results."""

from .rows import build_export_rows
from .excel_exporter import export_to_excel
from .print_exporter import export_to_print

__all__ = ["build_export_rows", "export_to_excel", "export_to_print"]
