from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

LABEL_FORMAT = "%Y-%m-%d %H:%M:%S"


class HighScoreError(Exception):
    """Reading or writing the high-score file failed."""


def read_highscores(path: Path) -> dict[str, int]:
    """Read the high-score table from ``path``. A missing file is an empty table."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.info("No high-score file at %s, starting with an empty table", path)
        return {}
    except OSError as e:
        raise HighScoreError(f"could not read {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise HighScoreError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise HighScoreError(f"{path} must hold a JSON object, got {type(data).__name__}")
    for label, score in data.items():
        if isinstance(score, bool) or not isinstance(score, int) or score < 0:
            raise HighScoreError(f"{path}: score for {label!r} is not a non-negative integer")
    return data


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_highscores(path: Path, highscores: dict[str, int]) -> None:
    """Replace ``path`` with the whole table, via a temp file in the same directory."""
    path = Path(path)
    try:
        payload = json.dumps(highscores, indent=2)
    except (TypeError, ValueError) as e:
        raise HighScoreError(f"could not serialize high scores: {e}") from e

    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=".highscores-", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
        # mkstemp creates 0600; give the file the usual umask-based mode.
        os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)
        raise HighScoreError(f"could not write {path}: {e}") from e


class ScoreBoard:
    def __init__(self, path: Path, highscores: dict[str, int] | None = None):
        self.path = Path(path)
        self.score = 0
        self.highscores: dict[str, int] = dict(highscores or {})

    def load(self) -> None:
        self.highscores = read_highscores(self.path)
        logger.debug("Loaded %d high scores from %s", len(self.highscores), self.path)

    def save(self) -> None:
        write_highscores(self.path, self.highscores)
        logger.debug("Saved %d high scores to %s", len(self.highscores), self.path)

    def increase(self) -> None:
        self.score += 1

    def reset(self) -> None:
        self.score = 0

    def is_high_score(self) -> bool:
        # Vacuously true on an empty table.
        return all(self.score > best for best in self.highscores.values())

    def record_high_score(self, now: datetime | None = None) -> str:
        """Insert the current score under a timestamp label and persist the table.

        Returns the label used. Labels are never overwritten: a clash within the
        same second gets a `` (2)``, `` (3)``... suffix. If saving fails the entry
        is removed again so memory keeps matching the file, and the error propagates.
        """
        base = (now or datetime.now()).strftime(LABEL_FORMAT)
        label = base
        n = 2
        while label in self.highscores:
            label = f"{base} ({n})"
            n += 1

        self.highscores[label] = self.score
        try:
            self.save()
        except HighScoreError:
            del self.highscores[label]
            raise
        logger.info("New high score %d recorded as %s", self.score, label)
        return label

    def entries(self) -> list[tuple[str, int]]:
        return sorted(self.highscores.items(), key=lambda item: (-item[1], item[0]))
