import sys
from pathlib import Path

import pytest

_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from bflab.config import load_settings
from bflab.utils.repro import set_global_seed


@pytest.fixture(autouse=True)
def seeded():
    """Every test starts from the configured global seed."""
    return set_global_seed(load_settings().global_seed)
