#
#
#

from .convert import (
    from_remote_payload,
    from_remote_payload_or_none,
    required,
    to_remote_payload,
)
from .identifiers import parse_record_import_id
from .reconcilers import Reconciler
from .state import RecordState


class RecordReconciler(Reconciler):
    '''Create, read, update, delete and import records within a zone.

    Records are addressed by their zone id and record id together. The
    zone and the type of a record can't change, a new record has to
    replace the old one.

    ``conditional_data`` on update is tri-state: ``None`` leaves the remote
    value alone, ``{}`` clears it and anything else replaces it.
    '''

    TYPE_NAME = 'snitchdns_record'
    RESOURCE = 'record'
    STATE = RecordState
    REQUIRES_REPLACE = ('zone_id', 'type')

    def _observed(self, record, zone_id):
        return {
            'id': str(required(record, 'id')),
            'zone_id': str(record.get('zone_id') or zone_id),
            'active': bool(record.get('active')),
            'cls': record.get('cls'),
            'type': record.get('type'),
            'ttl': int(required(record, 'ttl')),
            'data': from_remote_payload(record.get('data')),
            'is_conditional': bool(record.get('is_conditional')),
            'conditional_count': int(record.get('conditional_count') or 0),
            'conditional_limit': int(record.get('conditional_limit') or 0),
            'conditional_reset': bool(record.get('conditional_reset')),
            'conditional_data': from_remote_payload_or_none(
                record.get('conditional_data')
            ),
        }

    def _create(self, desired):
        zone_id = desired.zone_id
        self.log.debug(
            'create: zone_id=%s, type=%s, cls=%s',
            zone_id,
            desired.type,
            desired.cls,
        )

        data = {
            'active': bool(desired.active),
            'cls': desired.cls,
            'type': desired.type,
            'ttl': desired.ttl,
            'data': to_remote_payload(desired.data),
            # unset optional flags are sent as false, never null
            'is_conditional': desired.is_conditional is True,
            'conditional_count': desired.conditional_count or 0,
            'conditional_limit': desired.conditional_limit or 0,
            'conditional_reset': desired.conditional_reset is True,
            'conditional_data': to_remote_payload(desired.conditional_data),
        }
        record = self._call(
            'create',
            desired,
            {'zone_id': zone_id},
            self._client.record_create,
            zone_id,
            data,
        )

        created = self._merge(
            'create',
            {'zone_id': zone_id},
            desired,
            self._observed,
            record,
            zone_id,
        )
        self.log.info(
            'create: record id=%s, zone_id=%s, type=%s',
            created.id,
            created.zone_id,
            created.type,
        )
        return created

    def _read(self, state):
        self.log.debug('read: zone_id=%s, id=%s', state.zone_id, state.id)
        record = self._call_read(
            state,
            {'id': state.id, 'zone_id': state.zone_id},
            self._client.record_get,
            state.zone_id,
            state.id,
        )
        if record is None:
            return None
        return self._merge(
            'read',
            {'id': state.id, 'zone_id': state.zone_id},
            state,
            self._observed,
            record,
            state.zone_id,
        )

    def _update(self, desired):
        self.log.debug('update: zone_id=%s, id=%s', desired.zone_id, desired.id)

        data = {
            'active': bool(desired.active),
            'cls': desired.cls,
            'type': desired.type,
            'ttl': desired.ttl,
            'data': to_remote_payload(desired.data),
            'is_conditional': bool(desired.is_conditional),
            'conditional_count': desired.conditional_count or 0,
            'conditional_limit': desired.conditional_limit or 0,
            'conditional_reset': bool(desired.conditional_reset),
        }
        if desired.conditional_data is not None:
            data['conditional_data'] = to_remote_payload(
                desired.conditional_data
            )

        record = self._call(
            'update',
            desired,
            {'id': desired.id, 'zone_id': desired.zone_id},
            self._client.record_update,
            desired.zone_id,
            desired.id,
            data,
        )

        updated = self._merge(
            'update',
            {'id': desired.id, 'zone_id': desired.zone_id},
            desired,
            self._observed,
            record,
            desired.zone_id,
        )
        self.log.info(
            'update: record id=%s, zone_id=%s', updated.id, updated.zone_id
        )
        return updated

    def _delete(self, state):
        self.log.debug('delete: zone_id=%s, id=%s', state.zone_id, state.id)
        self._call(
            'delete',
            state,
            {'id': state.id, 'zone_id': state.zone_id},
            self._client.record_delete,
            state.zone_id,
            state.id,
        )
        self.log.info('delete: record id=%s, zone_id=%s', state.id, state.zone_id)
        return True

    def _import_state(self, raw):
        zone_id, record_id = parse_record_import_id(raw)
        return RecordState(id=record_id, zone_id=zone_id)
