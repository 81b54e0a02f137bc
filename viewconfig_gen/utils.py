"""Utility functions for loading schemas and writing generated files.

This module provides functions for loading the component schema JSON
with proper error handling, and for writing generator output to disk.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from .codegen.core.schema import Schema, convert_schema
from .logging_config import get_logger

logger = get_logger(__name__)


class JSONLoaderError(Exception):
    """Custom exception for JSON loading errors."""

    pass


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load JSON data from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        JSONLoaderError: If the file is missing, unreadable or not valid JSON.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load JSON from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise JSONLoaderError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info(f"Successfully loaded JSON from {file_path}")
        return f"📄 {file_path.name}", data
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}", exc_info=True)
        raise JSONLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e


def load_schema(file_path: str | Path) -> Schema:
    """Load and convert a component schema JSON file.

    Raises:
        JSONLoaderError: If the file cannot be loaded or is not an object.
        GeneratorError: If the schema uses an unsupported type annotation.
    """
    _, data = load_json_from_file(file_path)

    if not isinstance(data, dict):
        raise JSONLoaderError(f"Schema must be a JSON object: {file_path}")

    return convert_schema(data)


def write_files(
    files: Dict[str, str], output_dir: str | Path, extension: str = ".js"
) -> List[Path]:
    """Write generated files to a directory.

    Args:
        files: Mapping of file name (without extension) to source text.
        output_dir: Target directory, created if missing.
        extension: Extension appended to each file name.

    Returns:
        Paths of the written files, in mapping order.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for name, content in files.items():
        path = output_dir / f"{name}{extension}"
        path.write_text(content, encoding="utf-8")
        logger.info(f"Wrote {path}")
        written.append(path)

    return written
