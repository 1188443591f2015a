#
#
#

"""Local state for the managed resources.

The same shapes hold desired state (from configuration) and observed state
(from the API). Reconcilers never modify the instance they're given, they
return a new one with the remote values merged in.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .timeouts import Timeouts


@dataclass(frozen=True)
class ZoneState:
    # computed
    id: Optional[str] = None
    user_id: Optional[int] = None
    master: Optional[bool] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    # configurable
    domain: Optional[str] = None
    active: Optional[bool] = None
    catch_all: Optional[bool] = None
    forwarding: Optional[bool] = None
    regex: Optional[bool] = None
    tags: Optional[List[str]] = None
    timeouts: Timeouts = field(default_factory=Timeouts)

    CONFIGURABLE = (
        'domain',
        'active',
        'catch_all',
        'forwarding',
        'regex',
        'tags',
    )
    COMPUTED = ('id', 'user_id', 'master', 'created_at', 'updated_at')
    # empty tags stay distinct from unset
    NULL_WHEN_EMPTY = ()


@dataclass(frozen=True)
class RecordState:
    id: Optional[str] = None
    zone_id: Optional[str] = None
    active: Optional[bool] = None
    cls: Optional[str] = None
    type: Optional[str] = None
    ttl: Optional[int] = None
    data: Optional[Dict[str, str]] = None
    # conditional response, optional and computed
    is_conditional: Optional[bool] = None
    conditional_count: Optional[int] = None
    conditional_limit: Optional[int] = None
    conditional_reset: Optional[bool] = None
    conditional_data: Optional[Dict[str, str]] = None
    timeouts: Timeouts = field(default_factory=Timeouts)

    CONFIGURABLE = (
        'zone_id',
        'active',
        'cls',
        'type',
        'ttl',
        'data',
        'is_conditional',
        'conditional_count',
        'conditional_limit',
        'conditional_reset',
        'conditional_data',
    )
    COMPUTED = (
        'id',
        'is_conditional',
        'conditional_count',
        'conditional_limit',
        'conditional_reset',
        'conditional_data',
    )
    NULL_WHEN_EMPTY = ('conditional_data',)
