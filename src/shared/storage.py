"""Loading the JSON export of activities."""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .errors import ActivitiesFileError
from .models import Activity

logger = logging.getLogger(__name__)

_activities_adapter = TypeAdapter(list[Activity])


def load_activities(path: str | Path) -> list[Activity]:
    """
    Read activities from a JSON file holding an array of activity objects.

    Args:
        path: Location of the export

    Returns:
        Activities sorted newest first

    Raises:
        ActivitiesFileError: If the file is missing, not JSON, or an entry
            does not validate
    """
    path = Path(path)
    if not path.exists():
        raise ActivitiesFileError(f"Activities file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        raise ActivitiesFileError(f"Could not read {path}: {e}") from e

    try:
        activities = _activities_adapter.validate_python(raw)
    except ValidationError as e:
        raise ActivitiesFileError(
            f"{path} has {e.error_count()} invalid field(s): {e.errors()[0]['msg']}"
        ) from e

    activities.sort(key=lambda a: a.start_utc, reverse=True)
    logger.info(f"Loaded {len(activities)} activities from {path}")
    return activities
