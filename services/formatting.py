from datetime import datetime

NOT_AVAILABLE = 'Not Available'


def format_date(value):
    """Render an ISO timestamp as e.g. '05 Mar 2024'."""
    if not value:
        return NOT_AVAILABLE
    try:
        parsed = datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError:
        return 'Invalid Date'
    return parsed.strftime('%d %b %Y')


def yes_no(value):
    return 'Yes' if value else 'No'


def or_not_available(value):
    return NOT_AVAILABLE if value is None or value == '' else value
