import re

# ASCII digits only; \d would also admit other scripts' digits
APPLICATION_ID_PATTERN = re.compile(r'[0-9]+')


def application_id_error(value):
    """Return the field-level message for a bad application ID, or None if it is valid."""
    if value is None or value == '':
        return 'Application ID is required'
    if not APPLICATION_ID_PATTERN.fullmatch(value):
        return 'Application ID must be a number'
    return None
