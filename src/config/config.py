import logging
import os
from pathlib import Path
from typing import Dict

import yaml

from countdown.puzzle import Puzzle

logger = logging.getLogger(__name__)

DEFAULT_PUZZLES_FILE = Path(__file__).with_name('puzzles.yaml')


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


class Config:
    def __init__(self):
        self.max_top = _int_env('COUNTDOWN_MAX_TOP', 20)
        self.log_level = os.getenv('COUNTDOWN_LOG_LEVEL', 'INFO').upper()
        self.puzzles_file = Path(os.getenv('COUNTDOWN_PUZZLES_FILE', DEFAULT_PUZZLES_FILE))
        self.puzzles = self._load_puzzles()

        if self.max_top < 1:
            raise ValueError("COUNTDOWN_MAX_TOP must be at least 1")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    def _load_puzzles(self) -> Dict[str, Puzzle]:
        try:
            with open(self.puzzles_file, 'r', encoding='utf-8') as f:
                puzzles_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("YAML parsing error in %s: %s", self.puzzles_file, e)
            raise

        if not puzzles_data:
            logger.warning("No puzzles defined in %s", self.puzzles_file)
            return {}

        puzzles = {}
        for puzzle_id, data in puzzles_data.items():
            try:
                numbers = [int(n) for n in data['numbers']]
                target = int(data['target'])
            except (KeyError, TypeError, ValueError) as e:
                raise ValueError(f"Malformed puzzle '{puzzle_id}': {e}")
            if len(numbers) != 6:
                raise ValueError(f"Puzzle '{puzzle_id}' must have 6 numbers, got {len(numbers)}")
            puzzles[puzzle_id] = Puzzle(
                numbers=numbers,
                target=target,
                name=puzzle_id,
                description=data.get('description', '')
            )
        return puzzles
