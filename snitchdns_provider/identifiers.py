#
#
#

import re

from .exceptions import ValidationError

_NUMERIC_RE = re.compile(r'[0-9]+')


def parse_zone_import_id(raw):
    '''Zones are addressed by a single opaque id, used as is.'''
    if not raw:
        raise ValidationError(
            'Invalid import ID', 'Expected a zone ID, got an empty string'
        )
    return raw


def parse_record_import_id(raw):
    '''Split a ``zone_id:record_id`` import id into its two numeric parts.

    Nothing is contacted here, the parsed ids only seed the read that
    follows an import.
    '''
    parts = raw.split(':')
    if len(parts) != 2:
        raise ValidationError(
            'Invalid import ID format',
            f"Expected import ID format 'zone_id:record_id', got: {raw}",
        )

    zone_id, record_id = parts
    if not _NUMERIC_RE.fullmatch(zone_id):
        raise ValidationError(
            'Invalid zone ID', f'Zone ID must be numeric, got: {zone_id}'
        )
    if not _NUMERIC_RE.fullmatch(record_id):
        raise ValidationError(
            'Invalid record ID', f'Record ID must be numeric, got: {record_id}'
        )

    return zone_id, record_id
