"""HTTP Status Code Constants."""


class HTTPStatusCodes:
    """HTTP status code constants."""

    OK = 200
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500

    # Anything at or above this is treated as a failed response
    ERROR_THRESHOLD = 400
