#
#
#

from .convert import required, tags_from_wire, tags_to_wire
from .exceptions import ValidationError
from .identifiers import parse_zone_import_id
from .reconcilers import Reconciler
from .state import ZoneState


class ZoneReconciler(Reconciler):
    '''Create, read, update, delete and import SnitchDNS zones.

    Zones created here are never master zones. Updates always send every
    mutable field, there's no partial update.
    '''

    TYPE_NAME = 'snitchdns_zone'
    RESOURCE = 'zone'
    STATE = ZoneState

    def _computed(self, zone):
        user_id = zone.get('user_id')
        return {
            'id': str(required(zone, 'id')),
            'user_id': None if user_id is None else int(user_id),
            'master': bool(zone.get('master', False)),
            'created_at': zone.get('created_at'),
            'updated_at': zone.get('updated_at'),
        }

    def _check_domain(self, desired):
        if not desired.domain:
            raise ValidationError(
                'Invalid zone', 'A zone requires a non-empty domain'
            )

    def _create(self, desired):
        self.log.debug('create: domain=%s', desired.domain)
        self._check_domain(desired)

        data = {
            'domain': desired.domain,
            'active': bool(desired.active),
            'catch_all': bool(desired.catch_all),
            'forwarding': bool(desired.forwarding),
            'regex': bool(desired.regex),
            'master': False,
            'tags': tags_to_wire(desired.tags),
        }
        zone = self._call('create', desired, {}, self._client.zone_create, data)

        created = self._merge('create', {}, desired, self._computed, zone)
        self.log.info(
            'create: zone id=%s, domain=%s', created.id, created.domain
        )
        return created

    def _read(self, state):
        self.log.debug('read: id=%s', state.id)
        zone = self._call_read(
            state, {'id': state.id}, self._client.zone_get, state.id
        )
        if zone is None:
            return None

        return self._merge(
            'read', {'id': state.id}, state, self._observed, zone
        )

    def _observed(self, zone):
        return {
            'domain': required(zone, 'domain'),
            'active': bool(zone.get('active')),
            'catch_all': bool(zone.get('catch_all')),
            'forwarding': bool(zone.get('forwarding')),
            'regex': bool(zone.get('regex')),
            'tags': tags_from_wire(zone.get('tags')),
            **self._computed(zone),
        }

    def _update(self, desired):
        self.log.debug('update: id=%s, domain=%s', desired.id, desired.domain)
        self._check_domain(desired)

        data = {
            'domain': desired.domain,
            'active': bool(desired.active),
            'catch_all': bool(desired.catch_all),
            'forwarding': bool(desired.forwarding),
            'regex': bool(desired.regex),
            'tags': tags_to_wire(desired.tags),
        }
        zone = self._call(
            'update',
            desired,
            {'id': desired.id},
            self._client.zone_update,
            desired.id,
            data,
        )

        updated = self._merge(
            'update', {'id': desired.id}, desired, self._computed, zone
        )
        self.log.info('update: zone id=%s', updated.id)
        return updated

    def _delete(self, state):
        self.log.debug('delete: id=%s', state.id)
        self._call(
            'delete', state, {'id': state.id}, self._client.zone_delete, state.id
        )
        self.log.info('delete: zone id=%s', state.id)
        return True

    def _import_state(self, raw):
        return ZoneState(id=parse_zone_import_id(raw))
