import logging
from pathlib import Path

import pytest


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers installed by configure_logging so caplog keeps working."""
    yield
    package_logger = logging.getLogger("striptrease")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


NEXUS_TREES = """#NEXUS

begin trees;
\ttree STATE_0 = [&R] (A:1.0[&rate=1.0],B:2.0)[&posterior=0.95];
\ttree STATE_1 = [&R] ((A:1.0,B:1.0)[&posterior=1.0]:0.5,C:1.5);
end;
"""


@pytest.fixture
def nexus_file(tmp_path: Path) -> Path:
    path = tmp_path / "beast.trees"
    path.write_text(NEXUS_TREES)
    return path
