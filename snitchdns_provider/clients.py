#
#
#

"""Protocol definitions for the SnitchDNS remote client.

This module defines structural typing (PEP 544) for the client the
reconcilers talk to, allowing fakes and mocks in tests without requiring
explicit inheritance.
"""

from typing import Any, Dict, Protocol


class RemoteResourceClient(Protocol):
    """Protocol defining the interface the reconcilers need.

    Zones and records are plain dicts decoded from the API's JSON. Errors
    raised by any method must expose a not-found condition, either as
    SnitchDNSClientNotFound, an HTTP-style ``status_code`` of 404 or a
    "not found" message, so drift can be told apart from real failures.
    """

    def zone_create(self, data: Dict[str, Any]) -> Dict:
        """Create a zone.

        Args:
            data: Request body with domain, active, catch_all, forwarding,
                regex, master and tags (comma separated)

        Returns:
            Zone dict including the assigned 'id'
        """
        ...

    def zone_get(self, zone_id: str) -> Dict:
        """Get a zone by id."""
        ...

    def zone_update(self, zone_id: str, data: Dict[str, Any]) -> Dict:
        """Overwrite a zone's mutable fields and return the stored zone."""
        ...

    def zone_delete(self, zone_id: str) -> None:
        ...

    def record_create(self, zone_id: str, data: Dict[str, Any]) -> Dict:
        """Create a record in a zone.

        Args:
            zone_id: Zone identifier
            data: Request body with active, cls, type, ttl, data and the
                conditional response fields

        Returns:
            Record dict including the assigned 'id' and 'zone_id'
        """
        ...

    def record_get(self, zone_id: str, record_id: str) -> Dict:
        ...

    def record_update(
        self, zone_id: str, record_id: str, data: Dict[str, Any]
    ) -> Dict:
        """Update a record; keys missing from data are left untouched."""
        ...

    def record_delete(self, zone_id: str, record_id: str) -> None:
        ...
