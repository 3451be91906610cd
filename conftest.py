# Ensure project root is on sys.path so 'tmi_parser' is importable when running pytest from
# environments that don't automatically include it.
import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.resolve()
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Drop console handlers installed by LoggerConfigurator between tests."""
    from tmi_parser.logging_config import ConsoleHandler

    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler, ConsoleHandler):
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("tmi_parser").setLevel(logging.NOTSET)
