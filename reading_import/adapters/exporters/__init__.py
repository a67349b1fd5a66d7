# reading_import/adapters/exporters/__init__.py

"""Output generation and export functionality"""

# Local imports
from reading_import.adapters.exporters.csv_exporter import save_unmatched_csv
from reading_import.adapters.exporters.json_exporter import execution_to_dict
from reading_import.adapters.exporters.json_exporter import preview_to_dict
from reading_import.adapters.exporters.json_exporter import save_execution_json
from reading_import.adapters.exporters.json_exporter import save_preview_json

__all__: list[str] = [
    "execution_to_dict",
    "preview_to_dict",
    "save_execution_json",
    "save_preview_json",
    "save_unmatched_csv",
]
