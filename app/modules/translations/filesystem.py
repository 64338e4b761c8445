"""Filesystem access for language directories.

A root directory holds one subdirectory per language code; each language
directory holds zero or more ``*.json`` translation files.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from infrastructure.logging import get_module_logger

logger = get_module_logger()

JSON_SUFFIX = ".json"


class LanguageDirectory:
    """Reads and writes the JSON documents below a languages root.

    Attributes:
        root: Directory containing one subdirectory per language.
    """

    def __init__(self, root: Path):
        """Initialize the language directory.

        Args:
            root: Directory containing one subdirectory per language.

        Raises:
            FileNotFoundError: If root does not exist or is not a directory.
        """
        self.root = Path(root).resolve()

        if not self.root.is_dir():
            raise FileNotFoundError(f"Input directory not found: {self.root}")

    def list_languages(self) -> List[str]:
        """Return the names of all language subdirectories, sorted."""
        return sorted(p.name for p in self.root.iterdir() if p.is_dir())

    def has_language(self, language: str) -> bool:
        return (self.root / language).is_dir()

    def list_files(self, language: str) -> List[str]:
        """Return the JSON file names of a language, sorted.

        A language without a directory has no files.
        """
        directory = self.root / language
        if not directory.is_dir():
            return []
        return sorted(
            p.name
            for p in directory.iterdir()
            if p.is_file() and p.name.endswith(JSON_SUFFIX)
        )

    def read_json(self, language: str, name: str) -> Dict[str, Any]:
        """Parse one JSON document.

        Raises:
            ValueError: If the file is not valid JSON or not a JSON object.
        """
        path = self.root / language / name
        try:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

        if not isinstance(document, dict):
            raise ValueError(f"Expected a JSON object in {path}")
        return document

    def write_json(self, language: str, name: str, document: Dict[str, Any]) -> Path:
        """Write a document pretty-printed with a trailing newline."""
        directory = self.root / language
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        with open(path, "w", encoding="utf-8") as f:
            f.write(json.dumps(document, indent=2, ensure_ascii=False) + "\n")
        logger.debug("wrote_translation_file", language=language, file=name)
        return path

    def delete(self, language: str, name: str) -> None:
        path = self.root / language / name
        path.unlink()
        logger.debug("deleted_translation_file", language=language, file=name)
