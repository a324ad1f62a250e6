"""Test data sources: spreadsheet files and inline parameter sets."""

from .excel_utility import ExcelUtility, read_rows, set_cell_data
from .providers import DataProviders, data_provider

__all__ = ["DataProviders", "ExcelUtility", "data_provider", "read_rows", "set_cell_data"]
