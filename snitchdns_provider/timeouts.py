#
#
#

"""Per operation deadlines.

Every reconciler operation makes exactly one remote call and that call runs
under a deadline. The deadline comes from the resource's ``Timeouts`` when
set, then from the provider level configuration, then from ``DEFAULTS``.
A call that misses its deadline is abandoned: it keeps running on its
worker thread but whatever it eventually returns is dropped. Nothing is
retried.
"""

import re
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, fields
from typing import Dict, Optional

from .exceptions import ValidationError

OPERATIONS = ('create', 'read', 'update', 'delete')

# seconds
DEFAULTS = {'create': 300.0, 'read': 120.0, 'update': 120.0, 'delete': 180.0}

_UNITS = {'ms': 0.001, 's': 1.0, 'm': 60.0, 'h': 3600.0}
_DURATION_RE = re.compile(r'(\d+(?:\.\d+)?)(ms|s|m|h)')


def parse_duration(value):
    '''Seconds for a number or a duration string such as ``'1h30m'``.'''
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(
            'Invalid timeout', f'Expected a duration, got: {value!r}'
        )
    if isinstance(value, (int, float)):
        seconds = float(value)
    else:
        text = str(value).strip()
        pos = 0
        seconds = 0.0
        for match in _DURATION_RE.finditer(text):
            if match.start() != pos:
                break
            seconds += float(match.group(1)) * _UNITS[match.group(2)]
            pos = match.end()
        if not text or pos != len(text):
            raise ValidationError(
                'Invalid timeout',
                f'Expected a duration such as "30s", "5m" or "1h30m", got: {value!r}',
            )
    if seconds <= 0:
        raise ValidationError(
            'Invalid timeout', f'Timeout must be positive, got: {value!r}'
        )
    return seconds


@dataclass(frozen=True)
class Timeouts:
    '''Optional per operation overrides, in seconds.

    Values may be given as numbers or duration strings, both are parsed
    on construction.

    Carried on zone and record state but never sent to the API.
    '''

    create: Optional[float] = None
    read: Optional[float] = None
    update: Optional[float] = None
    delete: Optional[float] = None

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(
                self, f.name, parse_duration(getattr(self, f.name))
            )

    @classmethod
    def from_config(cls, config: Optional[Dict]) -> 'Timeouts':
        if not config:
            return cls()
        unknown = set(config) - set(OPERATIONS)
        if unknown:
            raise ValidationError(
                'Invalid timeouts',
                f'Unknown operations: {", ".join(sorted(unknown))}',
            )
        return cls(**config)

    def for_operation(self, operation, default):
        value = getattr(self, operation)
        return default if value is None else value


def resolve(operation, timeouts=None, provider_timeouts=None):
    if operation not in OPERATIONS:
        raise ValueError(f'Unknown operation {operation!r}')
    seconds = DEFAULTS[operation]
    if provider_timeouts is not None:
        seconds = provider_timeouts.for_operation(operation, seconds)
    if timeouts is not None:
        seconds = timeouts.for_operation(operation, seconds)
    return seconds


class DeadlineExceeded(Exception):
    def __init__(self, seconds):
        super().__init__(f'deadline of {seconds:g}s exceeded')
        self.seconds = seconds


def call_with_deadline(seconds, func, *args, **kwargs):
    executor = ThreadPoolExecutor(
        max_workers=1, thread_name_prefix='snitchdns-call'
    )
    try:
        future = executor.submit(func, *args, **kwargs)
        done, _ = wait([future], timeout=seconds)
        if not done:
            future.cancel()
            raise DeadlineExceeded(seconds)
        return future.result()
    finally:
        # don't wait on an abandoned call
        executor.shutdown(wait=False)
