#
#
#

from requests import Session

from octodns import __VERSION__ as octodns_version

from . import __version__ as package_version
from .exceptions import SnitchDNSClientNotFound, SnitchDNSClientUnauthorized


class SnitchDNSClient(object):
    API_PATH = '/api/v1'

    def __init__(self, url, token, verify=True, timeout=30):
        session = Session()
        session.headers.update(
            {
                'X-SnitchDNS-Auth': token,
                'User-Agent': f'octodns/{octodns_version} snitchdns-provider/{package_version}',
            }
        )
        session.verify = verify
        self._session = session
        self._base_url = f'{url.rstrip("/")}{self.API_PATH}'
        self._timeout = timeout

    def _do(self, method, path, params=None, data=None):
        url = f'{self._base_url}{path}'
        response = self._session.request(
            method, url, params=params, json=data, timeout=self._timeout
        )
        if response.status_code == 401:
            raise SnitchDNSClientUnauthorized()
        if response.status_code == 404:
            raise SnitchDNSClientNotFound()
        response.raise_for_status()
        return response

    def _do_json(self, method, path, params=None, data=None):
        return self._do(method, path, params, data).json()

    def zone_create(self, data):
        return self._do_json('POST', '/zones', data=data)

    def zone_get(self, zone_id):
        return self._do_json('GET', f'/zones/{zone_id}')

    def zone_update(self, zone_id, data):
        return self._do_json('POST', f'/zones/{zone_id}', data=data)

    def zone_delete(self, zone_id):
        self._do('DELETE', f'/zones/{zone_id}')

    def record_create(self, zone_id, data):
        return self._do_json('POST', f'/zones/{zone_id}/records', data=data)

    def record_get(self, zone_id, record_id):
        return self._do_json('GET', f'/zones/{zone_id}/records/{record_id}')

    def record_update(self, zone_id, record_id, data):
        return self._do_json(
            'POST', f'/zones/{zone_id}/records/{record_id}', data=data
        )

    def record_delete(self, zone_id, record_id):
        self._do('DELETE', f'/zones/{zone_id}/records/{record_id}')
