import os
import sys

import pytest

# Add the project src directory to PYTHONPATH for tests
CURRENT_DIR = os.path.dirname(__file__)
SRC_PATH = os.path.abspath(os.path.join(CURRENT_DIR, "..", "src"))
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)


@pytest.fixture(autouse=True)
def reset_globals():
    """Keep process-wide config/session/client from leaking between tests."""
    from hoteladmin.client import set_client
    from hoteladmin.config import set_config
    from hoteladmin.session import set_session

    yield
    set_client(None)
    set_session(None)
    set_config(None)
