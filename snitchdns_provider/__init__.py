#
#
#

import logging

from .diagnostics import Diagnostics
from .exceptions import (
    OperationTimeout,
    RemoteOperationError,
    SnitchDNSClientException,
    SnitchDNSClientNotFound,
    SnitchDNSClientUnauthorized,
    SnitchDNSException,
    ValidationError,
)
from .reconcilers import CREATE, DELETE, REPLACE, UPDATE
from .state import RecordState, ZoneState
from .timeouts import Timeouts

__version__ = __VERSION__ = '0.1.0'

__all__ = [
    'Diagnostics',
    'OperationTimeout',
    'RecordState',
    'RemoteOperationError',
    'SnitchDNSClientException',
    'SnitchDNSClientNotFound',
    'SnitchDNSClientUnauthorized',
    'SnitchDNSException',
    'SnitchDNSProvider',
    'Timeouts',
    'ValidationError',
    'ZoneState',
]


class SnitchDNSProvider(object):
    '''Entry point the host talks to.

    Builds one API client and hands it to a reconciler per resource type,
    then dispatches lifecycle calls by resource type name
    (``snitchdns_zone``, ``snitchdns_record``).

    Configured with keyword arguments, the token already resolved by the
    host::

        provider = SnitchDNSProvider(
            'snitch',
            token,
            'https://dns.example.com',
            # Optional
            verify=True,
            request_timeout=30,
            timeouts={'create': '10m', 'read': '1m'},
        )
    '''

    def __init__(
        self,
        id,
        token,
        url,
        verify=True,
        request_timeout=30,
        timeouts=None,
        client=None,
    ):
        self.id = id
        self.log = logging.getLogger(f'SnitchDNSProvider[{id}]')
        self.log.debug(
            '__init__: id=%s, token=***, url=%s, verify=%s',
            id,
            url,
            verify,
        )

        if client is None:
            client = self._create_client(url, token, verify, request_timeout)
        self._client = client

        provider_timeouts = Timeouts.from_config(timeouts)
        self._reconcilers = {}
        for cls in self._reconciler_classes():
            self._reconcilers[cls.TYPE_NAME] = cls(
                client, provider_id=id, timeouts=provider_timeouts
            )

    def _create_client(self, url, token, verify, request_timeout):
        from .api_client import SnitchDNSClient

        return SnitchDNSClient(
            url, token, verify=verify, timeout=request_timeout
        )

    def _reconciler_classes(self):
        from .record import RecordReconciler
        from .zone import ZoneReconciler

        return (ZoneReconciler, RecordReconciler)

    @property
    def resource_types(self):
        return sorted(self._reconcilers)

    def reconciler(self, type_name):
        try:
            return self._reconcilers[type_name]
        except KeyError:
            raise ValueError(
                f"Unknown resource type '{type_name}'. Must be one of: "
                f'{", ".join(self.resource_types)}'
            )

    def create(self, type_name, desired, diagnostics):
        return self.reconciler(type_name).create(desired, diagnostics)

    def read(self, type_name, state, diagnostics):
        return self.reconciler(type_name).read(state, diagnostics)

    def update(self, type_name, desired, diagnostics):
        return self.reconciler(type_name).update(desired, diagnostics)

    def delete(self, type_name, state, diagnostics):
        return self.reconciler(type_name).delete(state, diagnostics)

    def import_state(self, type_name, raw, diagnostics):
        return self.reconciler(type_name).import_state(raw, diagnostics)

    def plan(self, type_name, prior, desired):
        return self.reconciler(type_name).plan(prior, desired)

    def apply(self, type_name, prior, desired, diagnostics):
        '''Converge one resource instance and return its new state.

        On failure the diagnostics carry the error and the returned state
        is what's known to exist remotely.
        '''
        reconciler = self.reconciler(type_name)
        plan = reconciler.plan(prior, desired)
        self.log.debug(
            'apply: type=%s, action=%s, changes=%s',
            type_name,
            plan.action,
            ','.join(plan.changes),
        )

        if plan.action == CREATE:
            return reconciler.create(desired, diagnostics)
        elif plan.action == UPDATE:
            desired = reconciler.carry_over(prior, desired)
            return reconciler.update(desired, diagnostics) or prior
        elif plan.action == REPLACE:
            if not reconciler.delete(prior, diagnostics):
                return prior
            return reconciler.create(desired, diagnostics)
        elif plan.action == DELETE:
            if not reconciler.delete(prior, diagnostics):
                return prior
            return None
        return prior
