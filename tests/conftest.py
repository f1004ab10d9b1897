import pytest
from pathlib import Path

from findr.logging_setup import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    # routes structlog through the "findr" stdlib logger so stdout only carries matches.
    configure_logging("warning")
    yield


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Creates root/a.txt, root/b.log and root/sub/c.txt."""
    root = tmp_path / "t"
    root.mkdir()
    (root / "a.txt").write_text("a")
    (root / "b.log").write_text("b")
    (root / "sub").mkdir()
    (root / "sub" / "c.txt").write_text("c")
    return root


