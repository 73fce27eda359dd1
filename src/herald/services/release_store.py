"""
Persistence for the latest-release JSON file.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.exceptions import PriorDataReadError
from ..core.logger import get_logger
from ..models.releases import OutputRecord

logger = get_logger(__name__)


class ReleaseStore:
    """Reads the previous record and writes the new one without partial overwrites."""

    def __init__(self, output_file: Path):
        self.output_file = Path(output_file)

    def _load(self) -> Dict[str, Any]:
        try:
            with open(self.output_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise PriorDataReadError(f"Could not read existing data file: {e}") from e

        if not isinstance(data, dict):
            raise PriorDataReadError(
                f"Could not read existing data file: expected a JSON object, got {type(data).__name__}"
            )
        return data

    def read(self) -> Optional[Dict[str, Any]]:
        """
        Load the previously written record.

        Returns:
            The parsed record, or None if the file is missing or unusable
        """
        if not self.output_file.exists():
            logger.debug(f"No existing data file at {self.output_file}")
            return None

        try:
            return self._load()
        except PriorDataReadError as e:
            logger.warning(str(e))
            return None

    def write(self, record: OutputRecord) -> Path:
        """
        Write record as pretty-printed UTF-8 JSON with a trailing newline.

        The content goes to a temporary file in the same directory first and
        is moved over the old file in one step.
        """
        self.output_file.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(record.to_dict(), indent=2, ensure_ascii=False) + "\n"

        fd, tmp_path = tempfile.mkstemp(
            dir=self.output_file.parent,
            prefix=f".{self.output_file.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_path, self.output_file)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

        logger.info(f"Saved to {self.output_file}")
        return self.output_file
