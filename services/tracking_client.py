"""
HTTP client the tracking page uses to call the application lookup API.

Every failure is raised as a TrackingError subclass whose ``message`` is the
text shown to the applicant. No call is ever retried: the applicant has to
submit the form again.
"""
import json
import logging
import time

import requests
from urllib3.exceptions import NameResolutionError, ReadTimeoutError

from services.validation import application_id_error

DEFAULT_TIMEOUT = 10
GENERIC_ERROR = 'Failed to fetch application details'

TIMEOUT_MESSAGE = 'Request timed out. Please try again.'
OFFLINE_MESSAGE = 'No internet connection. Please check your network.'
UNREACHABLE_MESSAGE = 'Unable to connect to the server. Please try again later.'

# One byte per read so the deadline is checked between socket waits
READ_CHUNK_SIZE = 1


class TrackingError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(TrackingError):
    pass


class RequestTimedOut(TrackingError):
    pass


class MalformedResponse(TrackingError):
    pass


class TransportError(TrackingError):
    pass


class ApplicationNotFound(TrackingError):
    pass


class StoreUnavailable(TrackingError):
    pass


class LookupFailed(TrackingError):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


def _is_offline(exc):
    # requests wraps urllib3's MaxRetryError, whose reason says why we never connected
    reason = getattr(exc.args[0], 'reason', None) if exc.args else None
    return isinstance(reason, NameResolutionError)


def _is_read_timeout(exc):
    # iter_content re-raises urllib3 read timeouts as ConnectionError
    return bool(exc.args) and isinstance(exc.args[0], ReadTimeoutError)


def _limit_next_read(response, remaining):
    connection = getattr(getattr(response, 'raw', None), 'connection', None)
    sock = getattr(connection, 'sock', None)
    if sock is not None:
        sock.settimeout(remaining)


def api_error(status_code, data, application_id):
    """Turn a non-2xx lookup response body into the matching TrackingError."""
    if not isinstance(data, dict):
        return LookupFailed(GENERIC_ERROR, status_code)
    code = data.get('code')
    if code == 'NOT_FOUND':
        return ApplicationNotFound(f"Application with ID {application_id} was not found")
    if code == 'CONNECTION_ERROR':
        return StoreUnavailable('Unable to connect to the database. Please try again later')
    if code == 'TABLE_ERROR':
        return StoreUnavailable('Database configuration error. Please contact support')
    return LookupFailed(data.get('error') or data.get('details') or GENERIC_ERROR, status_code)


class TrackingClient:
    """
    Client for ``GET /api/track``.

    Usage:
        client = TrackingClient("http://localhost:5000")
        try:
            record = client.fetch_application("42")
        except TrackingError as e:
            print(e.message)
        finally:
            client.close()
    """

    def __init__(self, base_url, timeout=DEFAULT_TIMEOUT, session=None):
        self.base = base_url.rstrip('/')
        self.timeout = timeout
        self.s = session or requests.Session()

    def fetch_application(self, application_id):
        """
        Look up one application and return its record as a dict.

        The ID is validated before anything is sent; exactly one request is
        made per call, and the whole body must arrive within ``self.timeout``
        seconds of sending it.
        """
        message = application_id_error(application_id)
        if message:
            raise ValidationError(message)

        url = f"{self.base}/api/track"
        try:
            r, body = self._get(url, application_id)
        except requests.Timeout as e:
            logging.error(f"[TRACKING_CLIENT] Lookup of {application_id} timed out after {self.timeout}s")
            raise RequestTimedOut(TIMEOUT_MESSAGE) from e
        except requests.ConnectionError as e:
            if _is_read_timeout(e):
                logging.error(f"[TRACKING_CLIENT] Lookup of {application_id} timed out after {self.timeout}s")
                raise RequestTimedOut(TIMEOUT_MESSAGE) from e
            logging.error(f"[TRACKING_CLIENT] Could not reach {url}: {e}")
            raise TransportError(OFFLINE_MESSAGE if _is_offline(e) else UNREACHABLE_MESSAGE) from e
        except requests.RequestException as e:
            logging.error(f"[TRACKING_CLIENT] Request to {url} failed: {e}")
            raise TransportError(str(e) or GENERIC_ERROR) from e

        try:
            data = json.loads(body)
        except ValueError as e:
            logging.error(f"[TRACKING_CLIENT] Non-JSON response ({r.status_code}): {body[:200]!r}")
            raise MalformedResponse('Invalid response from server') from e

        if not r.ok:
            logging.warning(f"[TRACKING_CLIENT] API error: status={r.status_code} body={data}")
            raise api_error(r.status_code, data, application_id)

        if not isinstance(data, dict):
            raise MalformedResponse('Invalid response format received')
        if not data.get('id') or not data.get('name'):
            logging.warning(f"[TRACKING_CLIENT] Incomplete data: {data}")
            raise MalformedResponse('Incomplete application data received')
        return data

    def _get(self, url, application_id):
        """Send the lookup and read the full body before the deadline passes."""
        deadline = time.monotonic() + self.timeout
        r = self.s.get(
            url,
            params={'id': application_id},
            headers={'Accept': 'application/json', 'Cache-Control': 'no-cache'},
            timeout=self.timeout,
            stream=True,
        )
        try:
            body = bytearray()
            chunks = r.iter_content(chunk_size=READ_CHUNK_SIZE)
            while True:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise requests.Timeout(f"No complete response within {self.timeout}s")
                _limit_next_read(r, remaining)
                chunk = next(chunks, None)
                if chunk is None:
                    break
                body.extend(chunk)
        finally:
            r.close()
        return r, bytes(body)

    def close(self):
        self.s.close()
