# reading_import/adapters/exporters/json_exporter.py

"""JSON export of import previews and execution reports"""

# Standard library imports
from datetime import datetime
import gzip
import json
from typing import cast

# Local imports
from reading_import.application.models.import_batch import ExecutionOutcome
from reading_import.application.models.preview import PreviewPage
from reading_import.core.types.json import JSONDict

TOOL_VERSION = "0.1.0"


def _write_json(data: JSONDict, json_file: str, pretty: bool, compress: bool) -> str:
    output_path = json_file if not compress else f"{json_file}.gz"
    indent = 2 if pretty else None
    if compress:
        with gzip.open(output_path, "wt", encoding="utf-8") as f:
            json.dump(data, f, indent=indent, ensure_ascii=False, default=str)
    else:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent, ensure_ascii=False, default=str)
    return output_path


def _create_metadata(kind: str, import_id: str) -> JSONDict:
    return {
        "report": kind,
        "import_id": import_id,
        "processing_date": datetime.now().isoformat(),
        "tool_version": TOOL_VERSION,
    }


def preview_to_dict(page: PreviewPage) -> JSONDict:
    """Serializable form of a preview page"""
    data = page.model_dump(mode="json")
    data["summary"] = page.summary.to_dict()
    return cast(JSONDict, data)


def execution_to_dict(outcome: ExecutionOutcome) -> JSONDict:
    """Serializable form of an execution report"""
    data = outcome.model_dump(mode="json")
    data["summary"] = outcome.summary.to_dict()
    return cast(JSONDict, data)


def save_preview_json(
    page: PreviewPage, json_file: str, pretty: bool = True, compress: bool = False
) -> str:
    """Save a preview page with report metadata

    Args:
        page: Preview page to save
        json_file: Output filename
        pretty: If True, format JSON with indentation (default).
        compress: If True, use gzip compression.

    Returns:
        Path of the written file
    """
    data: JSONDict = {
        "metadata": _create_metadata("preview", page.import_id),
        "preview": preview_to_dict(page),
    }
    return _write_json(data, json_file, pretty, compress)


def save_execution_json(
    outcome: ExecutionOutcome, json_file: str, pretty: bool = True, compress: bool = False
) -> str:
    """Save an execution report with report metadata

    Returns:
        Path of the written file
    """
    data: JSONDict = {
        "metadata": _create_metadata("execution", outcome.import_id),
        "execution": execution_to_dict(outcome),
    }
    return _write_json(data, json_file, pretty, compress)
