#
#
#

"""Classification of remote errors seen while reading a resource.

A resource deleted outside of the tool shows up as a not found error on
read. Those are drift: the resource is dropped from local state and the
read succeeds. Everything else is a real failure. When in doubt an error is
classified as OTHER, it's better to fail loudly than to silently forget a
resource that still exists.
"""

import re

from requests import ConnectionError, Timeout

from .exceptions import OperationTimeout, SnitchDNSClientNotFound

NOT_FOUND = 'not_found'
OTHER = 'other'

_NOT_FOUND_RE = re.compile(r'\b404\b|\bnot found\b', re.IGNORECASE)


def _status_code(exc):
    status = getattr(exc, 'status_code', None)
    if status is None:
        response = getattr(exc, 'response', None)
        status = getattr(response, 'status_code', None)
    return status


def classify(exc):
    if isinstance(exc, SnitchDNSClientNotFound):
        return NOT_FOUND
    # Transport level failures never mean the resource is gone
    if isinstance(exc, (OperationTimeout, ConnectionError, Timeout)):
        return OTHER

    status = _status_code(exc)
    if isinstance(status, int):
        return NOT_FOUND if status == 404 else OTHER

    if _NOT_FOUND_RE.search(str(exc)):
        return NOT_FOUND
    return OTHER


def is_not_found(exc):
    return classify(exc) == NOT_FOUND
