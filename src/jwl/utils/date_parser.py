from datetime import date, datetime, timezone

DATE_FORMAT_ERROR = "Could not parse to a valid date, dates should have format `yyyy-mm-dd`"


def parse_date(date_input: str) -> date:
    """
    Parse a single calendar day.

    Args:
        date_input: Date string formatted as 'YYYY-MM-DD'

    Returns:
        The parsed date

    Raises:
        ValueError: If the input is not a valid 'YYYY-MM-DD' date
    """
    try:
        return datetime.strptime(date_input.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(DATE_FORMAT_ERROR) from None


def today() -> date:
    """Current date in UTC."""
    return datetime.now(timezone.utc).date()
