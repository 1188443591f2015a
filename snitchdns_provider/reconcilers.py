#
#
#

"""Behaviour shared by the zone and record reconcilers.

Each lifecycle method runs a single remote call under the operation's
deadline. Failures are reported to the diagnostics sink the host passes in
and the method returns ``None``; a read that finds the resource gone also
returns ``None`` but reports nothing.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .clients import RemoteResourceClient
from .diagnostics import DiagnosticsSink
from .drift import is_not_found
from .exceptions import (
    OperationTimeout,
    RemoteOperationError,
    SnitchDNSException,
)
from .timeouts import DeadlineExceeded, Timeouts, call_with_deadline, resolve

CREATE = 'create'
NOOP = 'noop'
UPDATE = 'update'
REPLACE = 'replace'
DELETE = 'delete'


@dataclass(frozen=True)
class Plan:
    action: str
    changes: Tuple[str, ...] = ()


class Reconciler(object):
    TYPE_NAME = None
    RESOURCE = None
    STATE = None
    REQUIRES_REPLACE = ()

    def __init__(
        self,
        client: RemoteResourceClient,
        provider_id: str = 'snitchdns',
        timeouts: Optional[Timeouts] = None,
    ):
        self.log = logging.getLogger(
            f'{self.__class__.__name__}[{provider_id}]'
        )
        self._client = client
        self._timeouts = timeouts or Timeouts()

    # --- Host facing lifecycle ------------------------------------------

    def create(self, desired, diagnostics):
        return self._guard(diagnostics, self._create, desired)

    def read(self, state, diagnostics):
        return self._guard(diagnostics, self._read, state)

    def update(self, desired, diagnostics):
        return self._guard(diagnostics, self._update, desired)

    def delete(self, state, diagnostics):
        return bool(self._guard(diagnostics, self._delete, state))

    def import_state(self, raw, diagnostics):
        return self._guard(diagnostics, self._import_state, raw)

    def plan(self, prior, desired):
        if prior is None and desired is None:
            return Plan(NOOP)
        if prior is None:
            return Plan(CREATE)
        if desired is None:
            return Plan(DELETE)

        changes = tuple(self.diff(prior, desired))
        if any(name in self.REQUIRES_REPLACE for name in changes):
            return Plan(REPLACE, changes)
        if changes:
            return Plan(UPDATE, changes)
        return Plan(NOOP)

    def carry_over(self, prior, desired):
        '''Desired state with unset computed attributes taken from prior.'''
        unknown = {
            name: getattr(prior, name)
            for name in self.STATE.COMPUTED
            if getattr(desired, name) is None
        }
        return replace(desired, **unknown)

    def diff(self, prior, desired):
        changed = []
        for name in self.STATE.CONFIGURABLE:
            want = getattr(desired, name)
            have = getattr(prior, name)
            if want is None and name in self.STATE.COMPUTED:
                # unknown, the prior value carries over
                continue
            if name in self.STATE.NULL_WHEN_EMPTY:
                # the API reports an empty value as null
                want = want or None
                have = have or None
            if want != have:
                changed.append(name)
        return changed

    # --- Helpers --------------------------------------------------------

    def _guard(self, diagnostics: DiagnosticsSink, func, *args):
        try:
            return func(*args)
        except SnitchDNSException as e:
            self.log.debug('%s: failed: %s', func.__name__.lstrip('_'), e)
            diagnostics.add_error(e.summary, str(e), e)
            return None

    def _call(self, operation, state, identifiers, func, *args):
        seconds = resolve(operation, state.timeouts, self._timeouts)
        try:
            return call_with_deadline(seconds, func, *args)
        except DeadlineExceeded:
            raise OperationTimeout(
                self.RESOURCE, operation, identifiers, seconds
            )
        except Exception as e:
            raise RemoteOperationError(
                self.RESOURCE, operation, identifiers, e
            ) from e

    def _merge(self, operation, identifiers, state, func, *args):
        '''``state`` updated with the fields ``func`` maps from a response.'''
        try:
            return replace(state, **func(*args))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise RemoteOperationError(
                self.RESOURCE,
                operation,
                identifiers,
                f'unexpected response: {e!r}',
            ) from e

    def _call_read(self, state, identifiers, func, *args):
        try:
            return self._call('read', state, identifiers, func, *args)
        except OperationTimeout:
            raise
        except RemoteOperationError as e:
            if not is_not_found(e.cause):
                raise
            self.log.warning(
                'read: %s not found, removing from state, %s',
                self.RESOURCE,
                ', '.join(f'{k}={v}' for k, v in sorted(identifiers.items())),
            )
            return None
