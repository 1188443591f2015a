#
#
#

"""Conversions between local attribute values and SnitchDNS payloads.

Local state keeps record data bags as string to string maps no matter
what JSON type the API used for a value. Anything coming back from the API
is stringified, so ``10`` becomes ``'10'`` and ``true`` becomes ``'true'``.
The conversion is lossy but deterministic and it is what lets one map type
describe every record type's data.

Tag lists travel as a single comma separated string. An empty or missing
local list is sent as ``''`` while an empty remote value comes back as
``None`` rather than ``[]``; callers rely on that asymmetry when comparing
state.
"""

import json
from typing import Any, Dict, List, Optional


def stringify(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(',', ':'), sort_keys=True)
    return str(value)


def to_remote_payload(values: Optional[Dict[str, Any]]) -> Dict[str, str]:
    # Entries that aren't plain strings (unknown/null) are not sent
    if not values:
        return {}
    return {k: v for k, v in values.items() if isinstance(v, str)}


def from_remote_payload(payload: Optional[Dict[str, Any]]) -> Dict[str, str]:
    if not payload:
        return {}
    return {k: stringify(v) for k, v in payload.items()}


def from_remote_payload_or_none(
    payload: Optional[Dict[str, Any]],
) -> Optional[Dict[str, str]]:
    if not payload:
        return None
    return from_remote_payload(payload)


def tags_to_wire(tags: Optional[List[str]]) -> str:
    if not tags:
        return ''
    return ','.join(tags)


def tags_from_wire(value: Any) -> Optional[List[str]]:
    """Tags as stored locally from whatever the API returned.

    The API has answered with both a comma separated string and a JSON
    list over time; both are accepted. Empty always maps to ``None``.
    """
    if not value:
        return None
    if isinstance(value, str):
        tags = [t.strip() for t in value.split(',')]
    else:
        tags = [stringify(t).strip() for t in value]
    tags = [t for t in tags if t]
    return tags or None


def required(response: Dict[str, Any], key: str) -> Any:
    '''``response[key]``, which the API must not leave out or null.'''
    value = response[key]
    if value is None:
        raise ValueError(f'{key!r} is null')
    return value
