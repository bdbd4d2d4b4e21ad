import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


SAMPLE_LINES = ["Root:A,B", "A:C,D", "B:E"]


@pytest.fixture
def sample_tree():
    from family_tree import FamilyTree

    return FamilyTree().add_lines(SAMPLE_LINES)
