"""
Spaced repetition scheduler driven by a proficiency level.

Each card carries an integer level (>= 1). A correct answer moves the card
one level up, a wrong one moves it one level down (never below 1). The level
picks the interval from a fixed table; anything past the table waits
LONG_INTERVAL days.
"""

from datetime import timedelta

# Days until the next review, by level
INTERVALS = {
    1: 1,
    2: 4,
    3: 10,
    4: 25,
    5: 50,
}
LONG_INTERVAL = 1000

MIN_LEVEL = 1


def interval_for(level):
    return INTERVALS.get(level, LONG_INTERVAL)


def schedule(level, correct, today):
    """
    Given the card's current level and the review outcome, returns the new
    scheduling fields.

    Returns dict with: level, next, scheduled_days
    """
    if correct:
        # No upper clamp: levels past the table keep growing at LONG_INTERVAL
        new_level = level + 1
    else:
        new_level = max(MIN_LEVEL, level - 1)

    days = interval_for(new_level)
    return {
        'level': new_level,
        'next': today + timedelta(days=days),
        'scheduled_days': days,
    }


def schedule_both(level, today):
    """Results for both outcomes, keyed by the answer."""
    return {
        True: schedule(level, True, today),
        False: schedule(level, False, today),
    }


def format_interval(days):
    """Human-readable label for an interval in days."""
    if days < 30:
        return f"{days}d"
    elif days < 365:
        months = round(days / 30)
        return f"{months}mo"
    else:
        years = round(days / 365, 1)
        return f"{years}y"
