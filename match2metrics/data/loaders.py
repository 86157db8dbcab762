"""
File-based retrieval of raw match log and rating summary text.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunText:
    """Raw text sources for one run; either source may be missing."""

    run_id: str
    match_text: Optional[str] = None
    summary_text: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.match_text or "").strip() and not (self.summary_text or "").strip()


def read_text(path: Optional[Path]) -> Optional[str]:
    """
    Read a text file, returning None when it is missing or unreadable.

    Args:
        path: File to read, or None

    Returns:
        Stripped file contents, or None
    """
    if path is None:
        return None
    path = Path(path)
    if not path.exists():
        logger.warning(f"File not found: {path}")
        return None
    try:
        return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to read {path}: {e}")
        return None


class RunTextLoader:
    """Loads per-run text from ``<base_dir>/<run_id>/`` directories."""

    def __init__(self,
                 base_dir: Union[str, Path] = ".",
                 match_log_filename: str = "match.log",
                 summary_filename: str = "summary.txt"):
        self.base_dir = Path(base_dir)
        self.match_log_filename = match_log_filename
        self.summary_filename = summary_filename

    def load(self, run_id: str) -> RunText:
        """
        Load both text sources for a run directory.

        Args:
            run_id: Name of the run sub-directory

        Returns:
            RunText with None for each missing source
        """
        run_dir = self.base_dir / run_id
        logger.info(f"Loading run text for: {run_id}")
        return RunText(
            run_id=run_id,
            match_text=read_text(run_dir / self.match_log_filename),
            summary_text=read_text(run_dir / self.summary_filename),
        )

    def load_files(self,
                   match_path: Optional[Path] = None,
                   summary_path: Optional[Path] = None,
                   run_id: str = "Run 1") -> RunText:
        """Load a single run from explicit file paths."""
        return RunText(
            run_id=run_id,
            match_text=read_text(match_path),
            summary_text=read_text(summary_path),
        )

    def discover_runs(self) -> List[str]:
        """List run sub-directories containing at least one source file."""
        if not self.base_dir.exists():
            logger.warning(f"Runs directory does not exist: {self.base_dir}")
            return []

        run_ids = []
        for run_dir in sorted(p for p in self.base_dir.iterdir() if p.is_dir()):
            if (run_dir / self.match_log_filename).exists() or (run_dir / self.summary_filename).exists():
                run_ids.append(run_dir.name)
        return run_ids
