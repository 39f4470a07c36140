import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'contao_composer'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from contao_composer.core.io import BufferedIO
from contao_composer.core.logging import reset_logging_for_tests
from contao_composer.data import clear_caches
from helpers.contao import ContaoLayout


@pytest.fixture(autouse=True)
def _reset_process_state():
    """Each test starts with fresh data caches and no installed log handler."""
    clear_caches()
    yield
    reset_logging_for_tests()


@pytest.fixture
def buffered_io() -> BufferedIO:
    return BufferedIO()


@pytest.fixture
def contao_root(tmp_path: Path) -> ContaoLayout:
    """A Contao installation at ``tmp_path/site`` with the project in ``tmp_path/site/composer``."""
    return ContaoLayout(tmp_path / "site")
