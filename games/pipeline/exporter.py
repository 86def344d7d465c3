# games/pipeline/exporter.py
"""
JSON + Excel exporter for the accumulated catalog.

Workflow: accumulated EnrichedGames -> gameData.json -> gameData.xlsx
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pandas as pd
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils.exceptions import IllegalCharacterError

from ..errors import PersistenceError
from ..models import EXPORT_COLUMNS, EnrichedGame


def worksheet_safe(value: Any) -> Any:
    """Drop control characters openpyxl refuses to store in a cell"""
    if isinstance(value, str):
        return ILLEGAL_CHARACTERS_RE.sub("", value)
    return value


class CatalogExporter:
    """
    Rewrites both output files from the full list of enriched games.

    The JSON array is written first; the workbook is then regenerated from
    what was read back out of that file.
    """

    def __init__(self, json_path: str = "gameData.json", workbook_path: str = "gameData.xlsx",
                 sheet_name: str = "sheet"):
        self.json_path = Path(json_path)
        self.workbook_path = Path(workbook_path)
        self.sheet_name = sheet_name
        self.logger = logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_config(cls, config) -> "CatalogExporter":
        return cls(config.json_path, config.workbook_path, config.sheet_name)

    def write(self, games: Sequence[EnrichedGame]) -> int:
        """
        Write every game to the JSON file and regenerate the workbook.

        Args:
            games: The whole accumulator, not just the latest batch

        Returns:
            Number of workbook rows written

        Raises:
            PersistenceError: either file could not be written
        """
        self.write_json(games)
        rows = self.write_workbook()
        self.logger.debug(f"Saved {rows} games to {self.json_path} and {self.workbook_path}")
        return rows

    def write_json(self, games: Sequence[EnrichedGame]) -> None:
        rows = [game.to_export_dict() for game in games]
        try:
            self.json_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.json_path, "w", encoding="utf-8") as f:
                json.dump(rows, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(self.json_path, e) from e

    def write_workbook(self) -> int:
        try:
            rows = [
                {key: worksheet_safe(value) for key, value in row.items()}
                for row in self.read_json()
            ]
            df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
            self.workbook_path.parent.mkdir(parents=True, exist_ok=True)
            df.to_excel(self.workbook_path, sheet_name=self.sheet_name, index=False)
        except (OSError, TypeError, ValueError, AttributeError, IllegalCharacterError) as e:
            raise PersistenceError(self.workbook_path, e) from e
        return len(df)

    def read_json(self) -> List[Dict[str, Any]]:
        with open(self.json_path, "r", encoding="utf-8") as f:
            rows = json.load(f)
        if not isinstance(rows, list):
            raise ValueError(f"{self.json_path} should hold an array of games")
        return rows
