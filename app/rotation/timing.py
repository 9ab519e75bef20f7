"""Official shift start hours."""

from datetime import date

from .dates import is_weekend
from .models import ShiftLabel

MORNING_START_HOUR = 7
EVENING_START_HOUR = 15
NIGHT_START_HOUR_WEEKEND = 19
NIGHT_START_HOUR_WEEKDAY = 23


def shift_start_hour(label: ShiftLabel | str, on: date) -> int:
    """Hour (0-23) at which ``label`` officially starts on ``on``.

    Crews arrive an hour earlier to relieve the outgoing shift; the value
    returned here is the official start and only decides when today's shift
    stops being reported as upcoming. Rest days and unknown labels map to 0.
    """
    if label == ShiftLabel.MORNING:
        return MORNING_START_HOUR
    if label == ShiftLabel.EVENING:
        return EVENING_START_HOUR
    if label == ShiftLabel.NIGHT:
        return NIGHT_START_HOUR_WEEKEND if is_weekend(on) else NIGHT_START_HOUR_WEEKDAY
    return 0
