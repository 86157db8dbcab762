"""
Shared sample inputs for the test suite.
"""

import logging
import sys

import pytest

sys.path.append('.')

MATCH_LOG = """\
Game 1 finished
Avg move time used by KW29 0.250000 40 moves
NN rows: 1000
Avg move time used by FMSWA7 0.500000 42 moves
NN rows: 4000
Game 2 finished
Avg move time used by KW29 0.200000 80 moves
Avg move time used by FMSWA7 0.400000 84 moves
"""

SUMMARY = """\
Elo ratings
KW29                :    48.41 +/- 25.16
FMSWA7              :     0.00 +/- 20.00

Win%:
KW29   56.2%
FMSWA7   43.8%
"""


@pytest.fixture
def match_log_text() -> str:
    return MATCH_LOG


@pytest.fixture
def summary_text() -> str:
    return SUMMARY


@pytest.fixture
def runs_dir(tmp_path):
    """Run directories: run_a has both sources, run_b only a summary, run_c nothing."""
    run_a = tmp_path / "run_a"
    run_a.mkdir()
    (run_a / "match.log").write_text(MATCH_LOG)
    (run_a / "summary.txt").write_text(SUMMARY)

    run_b = tmp_path / "run_b"
    run_b.mkdir()
    (run_b / "summary.txt").write_text(
        "KW29 : 10.00 +/- 5.00\n"
        "FMSWA7 : 30.00 +/- 5.00\n"
    )

    (tmp_path / "run_c").mkdir()
    return tmp_path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Detach handlers installed by the CLI so they never outlive a test's capture."""
    yield
    logger = logging.getLogger("match2metrics")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
