from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from feedback_analyzer.db.storage import InMemoryStorage  # noqa: E402
from feedback_analyzer.services.history_store import HistoryStore  # noqa: E402
from tests.helpers.factories import FixedClock  # noqa: E402


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture()
def history(storage: InMemoryStorage) -> HistoryStore:
    return HistoryStore(storage, clock=FixedClock())
