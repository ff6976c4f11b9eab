"""Display formatting helpers used by API serializers."""


def format_duration(minutes):
    """Render minutes as '45m', '2h' or '1h 30m'; 'Unknown' when missing."""
    if not minutes:
        return "Unknown"
    if minutes < 60:
        return f"{minutes}m"
    hours, remaining = divmod(minutes, 60)
    return f"{hours}h {remaining}m" if remaining else f"{hours}h"


def truncate_text(text, max_length):
    """Cut text to max_length characters, adding an ellipsis when shortened."""
    text = text or ""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."
