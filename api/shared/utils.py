"""Common utility functions."""
from datetime import datetime, timezone
from typing import Any, Callable, Dict

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Timezone-aware current UTC time. Default clock for services."""
    return datetime.now(timezone.utc)


def without_mongo_id(document: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of a stored document without the store's internal ``_id``."""
    return {k: v for k, v in document.items() if k != "_id"}
