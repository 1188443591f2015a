#
#
#

from octodns.provider import ProviderException


class SnitchDNSException(ProviderException):
    summary = 'SnitchDNS error'


class SnitchDNSClientException(SnitchDNSException):
    pass


class SnitchDNSClientNotFound(SnitchDNSClientException):
    status_code = 404

    def __init__(self):
        super().__init__('Not Found')


class SnitchDNSClientUnauthorized(SnitchDNSClientException):
    status_code = 401

    def __init__(self):
        super().__init__('Unauthorized')


class ValidationError(SnitchDNSException):
    '''Raised locally, before any remote call, for malformed input.'''

    def __init__(self, summary, detail):
        super().__init__(detail)
        self.summary = summary
        self.detail = detail


class RemoteOperationError(SnitchDNSException):
    '''A remote call failed for a reason other than drift.

    Carries enough context to diagnose which resource the failure belongs
    to: the resource type, the operation, the identifiers involved and the
    underlying cause.
    '''

    GERUNDS = {
        'create': 'creating',
        'read': 'reading',
        'update': 'updating',
        'delete': 'deleting',
    }

    def __init__(self, resource_type, operation, identifiers, cause):
        self.resource_type = resource_type
        self.operation = operation
        self.identifiers = dict(identifiers)
        self.cause = cause
        gerund = self.GERUNDS.get(operation, operation)
        self.summary = f'Error {gerund} {resource_type}'
        super().__init__(self._describe())

    def _describe(self):
        target = self.resource_type
        if self.identifiers.get('id') is not None:
            target = f'{target} ID {self.identifiers["id"]}'
        if self.identifiers.get('zone_id') is not None:
            target = f'{target} in zone {self.identifiers["zone_id"]}'
        return f'Could not {self.operation} {target}: {self.cause}'


class OperationTimeout(RemoteOperationError):
    def __init__(self, resource_type, operation, identifiers, seconds):
        self.seconds = seconds
        super().__init__(
            resource_type,
            operation,
            identifiers,
            f'deadline of {seconds:g}s exceeded',
        )
