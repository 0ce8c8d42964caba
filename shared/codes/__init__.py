"""
Business status codes carried in every error body as `code`.

Generic request and system codes live here; gateway and webhook codes are in
`shared.codes.payment_codes`. `core.exceptions` maps both to HTTP statuses.
"""
from enum import IntEnum


class BusinessCode(IntEnum):
    SUCCESS = 0

    # Request (1xxxx)
    PARAM_MISSING = 10001
    PARAM_VALIDATION_ERROR = 10003

    # Routing and access (2xxxx / 3xxxx)
    NOT_FOUND = 20006
    METHOD_NOT_ALLOWED = 20007
    UNAUTHORIZED = 30001
    FORBIDDEN = 30002

    # System (4xxxx)
    SYSTEM_ERROR = 40000
    SERVICE_UNAVAILABLE = 40003
    TOO_MANY_REQUESTS = 40004
