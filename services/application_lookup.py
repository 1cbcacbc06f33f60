"""Point lookup of a scholarship application in the record store.

One connection is opened per lookup and always closed again, whatever happens
while connecting or querying. Rows are normalized into the JSON shape served
by ``GET /api/track``.
"""
import logging
from datetime import date, datetime

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError

from models.models import db
from services.validation import application_id_error

APPLICATION_QUERY = text("""
    SELECT
        id,
        name,
        course_name,
        year_of_study,
        created_at,
        updated_at,
        student_salaried,
        father_alive,
        father_working,
        father_occupation,
        mother_alive,
        mother_working,
        mother_occupation,
        marksheet_upload,
        aadhar_no,
        cap_id
    FROM scholarship_applications
    WHERE id = :id
    LIMIT 1
""").columns(created_at=db.DateTime, updated_at=db.DateTime)

BOOLEAN_FIELDS = ('student_salaried', 'father_alive', 'father_working', 'mother_alive', 'mother_working')
TIMESTAMP_FIELDS = ('created_at', 'updated_at')
PASSTHROUGH_FIELDS = (
    'id', 'name', 'course_name', 'year_of_study',
    'father_occupation', 'mother_occupation', 'marksheet_upload',
    'aadhar_no', 'cap_id',
)

# MySQL client/server error numbers
CONNECTION_ERROR_CODES = {1044, 1045, 1049, 2002, 2003, 2005, 2006, 2013}
TABLE_ERROR_CODES = {1146}

# Largest value a BIGINT primary key can hold
MAX_APPLICATION_ID = 2 ** 63 - 1


class InvalidApplicationId(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ApplicationNotFound(Exception):
    def __init__(self, application_id):
        super().__init__(f"Application {application_id} not found")
        self.application_id = application_id


class StoreError(Exception):
    def __init__(self, code, details):
        super().__init__(details)
        self.code = code
        self.details = details


def validate_application_id(value):
    message = application_id_error(value)
    if message:
        raise InvalidApplicationId(message)
    return value


def _iso(value):
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def normalize_application(row):
    """Map a store row (any mapping) to the public application record."""
    record = {field: row[field] for field in PASSTHROUGH_FIELDS}
    for field in BOOLEAN_FIELDS:
        record[field] = bool(row[field])
    for field in TIMESTAMP_FIELDS:
        record[field] = _iso(row[field])
    return record


def classify_store_error(exc):
    """Pick the API error code for a failure raised while talking to the store."""
    if not isinstance(exc, DBAPIError):
        return 'DB_ERROR'
    orig = exc.orig
    errno = orig.args[0] if orig is not None and orig.args else None
    if errno in TABLE_ERROR_CODES or 'no such table' in str(orig).lower():
        return 'TABLE_ERROR'
    if errno in CONNECTION_ERROR_CODES or exc.connection_invalidated:
        return 'CONNECTION_ERROR'
    return 'DB_ERROR'


def row_id(application_id):
    """Integer key for a digit string, or None when no row could ever carry it."""
    digits = application_id.lstrip('0') or '0'
    if len(digits) > len(str(MAX_APPLICATION_ID)):
        return None
    value = int(digits)
    return value if value <= MAX_APPLICATION_ID else None


def fetch_application(engine, application_id):
    key = row_id(application_id)
    if key is None:
        logging.info(f"[TRACK_API] Application ID {application_id[:32]}... is out of range")
        raise ApplicationNotFound(application_id)

    connection = None
    try:
        connection = engine.connect()
        logging.debug(f"[TRACK_API] Database connected, looking up application {application_id}")
        row = connection.execute(APPLICATION_QUERY, {'id': key}).mappings().first()
    except Exception as e:
        logging.error(f"[TRACK_API] Failed to fetch application {application_id}: {e}")
        raise StoreError(classify_store_error(e), str(e) or 'Database connection failed') from e
    finally:
        if connection is not None:
            try:
                connection.close()
            except Exception as e:
                # Must not replace the outcome already decided above
                logging.error(f"[TRACK_API] Error closing database connection: {e}")

    if row is None:
        logging.info(f"[TRACK_API] No application found with ID {application_id}")
        raise ApplicationNotFound(application_id)
    return normalize_application(row)
