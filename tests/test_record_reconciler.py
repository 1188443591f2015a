#
# Record create, read, update, delete and import
#

from dataclasses import replace
from unittest import TestCase
from unittest.mock import Mock

from requests import HTTPError

from snitchdns_provider import Diagnostics, RecordState
from snitchdns_provider.exceptions import (
    RemoteOperationError,
    SnitchDNSClientNotFound,
    SnitchDNSClientUnauthorized,
    ValidationError,
)
from snitchdns_provider.record import RecordReconciler


def remote_record(**kwargs):
    record = {
        'id': 17,
        'zone_id': 42,
        'active': True,
        'cls': 'IN',
        'type': 'A',
        'ttl': 300,
        'data': {'address': '192.168.1.1'},
        'is_conditional': False,
        'conditional_count': 0,
        'conditional_limit': 0,
        'conditional_reset': False,
        'conditional_data': {},
    }
    record.update(kwargs)
    return record


DESIRED = RecordState(
    zone_id='42',
    active=True,
    cls='IN',
    type='A',
    ttl=300,
    data={'address': '192.168.1.1'},
)


class TestRecordCreate(TestCase):
    def setUp(self):
        self.client = Mock()
        self.reconciler = RecordReconciler(self.client)
        self.diagnostics = Diagnostics()

    def test_create(self):
        self.client.record_create.return_value = remote_record()

        state = self.reconciler.create(DESIRED, self.diagnostics)

        self.assertFalse(self.diagnostics.has_error())
        self.client.record_create.assert_called_once_with(
            '42',
            {
                'active': True,
                'cls': 'IN',
                'type': 'A',
                'ttl': 300,
                'data': {'address': '192.168.1.1'},
                'is_conditional': False,
                'conditional_count': 0,
                'conditional_limit': 0,
                'conditional_reset': False,
                'conditional_data': {},
            },
        )
        self.assertEqual('17', state.id)
        self.assertEqual('42', state.zone_id)
        self.assertEqual({'address': '192.168.1.1'}, state.data)
        # unset optionals come back as concrete values, never null
        self.assertFalse(state.is_conditional)
        self.assertEqual(0, state.conditional_count)
        self.assertEqual(0, state.conditional_limit)
        self.assertFalse(state.conditional_reset)
        # ...except the conditional data bag, empty maps to null
        self.assertIsNone(state.conditional_data)

    def test_create_conditional(self):
        self.client.record_create.return_value = remote_record(
            is_conditional=True,
            conditional_limit=5,
            conditional_reset=True,
            conditional_data={'address': '10.0.0.1'},
        )
        desired = RecordState(
            zone_id='42',
            active=True,
            cls='IN',
            type='A',
            ttl=300,
            data={'address': '192.168.1.1', 'ignored': None},
            is_conditional=True,
            conditional_limit=5,
            conditional_reset=True,
            conditional_data={'address': '10.0.0.1'},
        )

        state = self.reconciler.create(desired, self.diagnostics)

        data = self.client.record_create.call_args[0][1]
        self.assertEqual({'address': '192.168.1.1'}, data['data'])
        self.assertTrue(data['is_conditional'])
        self.assertEqual(5, data['conditional_limit'])
        self.assertTrue(data['conditional_reset'])
        self.assertEqual({'address': '10.0.0.1'}, data['conditional_data'])
        self.assertTrue(state.is_conditional)
        self.assertEqual({'address': '10.0.0.1'}, state.conditional_data)

    def test_create_stringifies_remote_data(self):
        self.client.record_create.return_value = remote_record(
            type='MX', data={'priority': 10, 'hostname': 'mail.example.com'}
        )
        desired = RecordState(
            zone_id='42',
            active=True,
            cls='IN',
            type='MX',
            ttl=300,
            data={'priority': '10', 'hostname': 'mail.example.com'},
        )

        state = self.reconciler.create(desired, self.diagnostics)

        self.assertEqual(
            {'priority': '10', 'hostname': 'mail.example.com'}, state.data
        )

    def test_create_failure(self):
        self.client.record_create.side_effect = HTTPError(
            '400 Client Error: Bad Request', response=Mock(status_code=400)
        )

        self.assertIsNone(self.reconciler.create(DESIRED, self.diagnostics))
        error = self.diagnostics.errors[0]
        self.assertEqual('Error creating record', error.summary)
        self.assertEqual(
            'Could not create record in zone 42: 400 Client Error: Bad Request',
            error.detail,
        )


class TestRecordRead(TestCase):
    def setUp(self):
        self.client = Mock()
        self.reconciler = RecordReconciler(self.client)
        self.diagnostics = Diagnostics()

    def test_read(self):
        self.client.record_get.return_value = remote_record(
            ttl=600, conditional_data={'address': '10.0.0.1'}
        )

        state = self.reconciler.read(
            RecordState(id='17', zone_id='42'), self.diagnostics
        )

        self.client.record_get.assert_called_once_with('42', '17')
        self.assertEqual(600, state.ttl)
        self.assertEqual('IN', state.cls)
        self.assertEqual('A', state.type)
        self.assertEqual({'address': '10.0.0.1'}, state.conditional_data)

    def test_read_drift(self):
        self.client.record_get.side_effect = SnitchDNSClientNotFound()

        state = self.reconciler.read(
            RecordState(id='17', zone_id='42'), self.diagnostics
        )

        self.assertIsNone(state)
        self.assertEqual(0, len(self.diagnostics))

    def test_read_drift_from_message(self):
        self.client.record_get.side_effect = RuntimeError('record not found')

        state = self.reconciler.read(
            RecordState(id='17', zone_id='42'), self.diagnostics
        )

        self.assertIsNone(state)
        self.assertFalse(self.diagnostics.has_error())

    def test_read_malformed_response(self):
        record = remote_record()
        del record['ttl']
        self.client.record_get.return_value = record

        state = self.reconciler.read(
            RecordState(id='17', zone_id='42'), self.diagnostics
        )

        self.assertIsNone(state)
        error = self.diagnostics.errors[0]
        self.assertIsInstance(error.exception, RemoteOperationError)
        self.assertEqual('Error reading record', error.summary)
        self.assertEqual(
            "Could not read record ID 17 in zone 42: "
            "unexpected response: KeyError('ttl')",
            error.detail,
        )

    def test_read_other_error_names_both_ids(self):
        self.client.record_get.side_effect = SnitchDNSClientUnauthorized()

        state = self.reconciler.read(
            RecordState(id='17', zone_id='42'), self.diagnostics
        )

        self.assertIsNone(state)
        error = self.diagnostics.errors[0]
        self.assertEqual('Error reading record', error.summary)
        self.assertEqual(
            'Could not read record ID 17 in zone 42: Unauthorized',
            error.detail,
        )
        self.assertEqual(
            {'id': '17', 'zone_id': '42'}, error.exception.identifiers
        )


class TestRecordUpdate(TestCase):
    def setUp(self):
        self.client = Mock()
        self.reconciler = RecordReconciler(self.client)
        self.diagnostics = Diagnostics()
        self.desired = RecordState(
            id='17',
            zone_id='42',
            active=True,
            cls='IN',
            type='A',
            ttl=300,
            data={'address': '192.168.1.2'},
            is_conditional=False,
            conditional_count=0,
            conditional_limit=0,
            conditional_reset=False,
        )

    def test_update_omits_unset_conditional_data(self):
        self.client.record_update.return_value = remote_record(
            data={'address': '192.168.1.2'}
        )

        state = self.reconciler.update(self.desired, self.diagnostics)

        self.client.record_update.assert_called_once_with(
            '42',
            '17',
            {
                'active': True,
                'cls': 'IN',
                'type': 'A',
                'ttl': 300,
                'data': {'address': '192.168.1.2'},
                'is_conditional': False,
                'conditional_count': 0,
                'conditional_limit': 0,
                'conditional_reset': False,
            },
        )
        self.assertEqual({'address': '192.168.1.2'}, state.data)
        self.assertIsNone(state.conditional_data)

    def test_update_clears_conditional_data(self):
        self.client.record_update.return_value = remote_record()
        desired = replace(self.desired, conditional_data={})

        self.reconciler.update(desired, self.diagnostics)

        data = self.client.record_update.call_args[0][2]
        self.assertEqual({}, data['conditional_data'])

    def test_update_sets_conditional_data(self):
        self.client.record_update.return_value = remote_record(
            conditional_data={'address': '10.0.0.9'}
        )
        desired = replace(
            self.desired, conditional_data={'address': '10.0.0.9'}
        )

        state = self.reconciler.update(desired, self.diagnostics)

        data = self.client.record_update.call_args[0][2]
        self.assertEqual({'address': '10.0.0.9'}, data['conditional_data'])
        self.assertEqual({'address': '10.0.0.9'}, state.conditional_data)

    def test_update_is_idempotent(self):
        self.client.record_update.return_value = remote_record(
            data={'address': '192.168.1.2'}
        )

        first = self.reconciler.update(self.desired, self.diagnostics)
        second = self.reconciler.update(first, self.diagnostics)

        self.assertEqual(first, second)

    def test_update_failure(self):
        self.client.record_update.side_effect = RuntimeError('rejected')

        self.assertIsNone(self.reconciler.update(self.desired, self.diagnostics))
        error = self.diagnostics.errors[0]
        self.assertEqual('Error updating record', error.summary)
        self.assertIsInstance(error.exception, RemoteOperationError)


class TestRecordDelete(TestCase):
    def test_delete(self):
        client = Mock()
        reconciler = RecordReconciler(client)
        diagnostics = Diagnostics()

        self.assertTrue(
            reconciler.delete(RecordState(id='17', zone_id='42'), diagnostics)
        )
        client.record_delete.assert_called_once_with('42', '17')

    def test_delete_failure(self):
        client = Mock()
        client.record_delete.side_effect = SnitchDNSClientNotFound()
        reconciler = RecordReconciler(client)
        diagnostics = Diagnostics()

        self.assertFalse(
            reconciler.delete(RecordState(id='17', zone_id='42'), diagnostics)
        )
        self.assertEqual(
            'Could not delete record ID 17 in zone 42: Not Found',
            diagnostics.errors[0].detail,
        )


class TestRecordImport(TestCase):
    def setUp(self):
        self.client = Mock()
        self.reconciler = RecordReconciler(self.client)
        self.diagnostics = Diagnostics()

    def test_import(self):
        state = self.reconciler.import_state('42:17', self.diagnostics)

        self.assertEqual('42', state.zone_id)
        self.assertEqual('17', state.id)
        self.assertIsNone(state.type)
        self.assertEqual([], self.client.method_calls)

    def test_import_invalid(self):
        for raw in ('42', '42:17:1', 'a:17', '42:b'):
            diagnostics = Diagnostics()
            self.assertIsNone(self.reconciler.import_state(raw, diagnostics))
            self.assertIsInstance(
                diagnostics.errors[0].exception, ValidationError
            )
        self.assertEqual([], self.client.method_calls)

    def test_import_then_read(self):
        self.client.record_get.return_value = remote_record()

        state = self.reconciler.import_state('42:17', self.diagnostics)
        state = self.reconciler.read(state, self.diagnostics)

        self.client.record_get.assert_called_once_with('42', '17')
        self.assertEqual({'address': '192.168.1.1'}, state.data)
        self.assertEqual(300, state.ttl)
