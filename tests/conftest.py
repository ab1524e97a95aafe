"""Pytest fixtures for wapipy tests."""
import json
from collections import defaultdict, deque

import pytest

from wapipy.core.api import APIConfig, RawResponse
from wapipy.core.api.errors import error_from_response


def json_body(data) -> bytes:
    """Encode a response body."""
    return json.dumps(data).encode('utf-8')


class FakeExecutor:
    """
    In-memory request executor.

    Responses are queued per (method, path-or-url) and returned in order.
    Non-2xx statuses raise from ``request``/``request_multipart`` like
    AsyncAPIClient does; ``send`` returns them as RawResponse.
    """

    def __init__(self):
        self.calls = []
        self._responses = defaultdict(deque)

    def queue(self, method, target, body=b'{}', status=200):
        if isinstance(body, (dict, list)):
            body = json_body(body)
        self._responses[(method, target)].append((status, body))
        return self

    def _next(self, method, target):
        entries = self._responses[(method, target)]
        if not entries:
            raise AssertionError(f"Unexpected call: {method} {target}")
        status, body = entries.popleft()
        if isinstance(body, Exception):
            raise body
        return RawResponse(status=status, body=body)

    def _checked(self, method, target):
        response = self._next(method, target)
        if not response.ok:
            raise error_from_response(response.status, response.body)
        return response.body

    async def request(self, path, method='GET', body=None, params=None):
        self.calls.append({'kind': 'request', 'method': method, 'path': path,
                           'body': body, 'params': params})
        return self._checked(method, path)

    async def request_multipart(self, method, path, form):
        self.calls.append({'kind': 'multipart', 'method': method, 'path': path, 'form': form})
        return self._checked(method, path)

    async def send(self, method, url, data=None, headers=None, params=None, authenticate=True):
        self.calls.append({'kind': 'send', 'method': method, 'url': url, 'data': data,
                           'headers': headers, 'authenticate': authenticate})
        return self._next(method, url)


class EchoAssetExecutor(FakeExecutor):
    """Stores pushed assets and returns them on fetch, like a faithful remote."""

    def __init__(self):
        super().__init__()
        self.assets = {}

    async def request_multipart(self, method, path, form):
        self.calls.append({'kind': 'multipart', 'method': method, 'path': path, 'form': form})
        self.assets[path] = form.get('file').value
        return json_body({'success': True, 'validation_errors': []})

    async def request(self, path, method='GET', body=None, params=None):
        self.calls.append({'kind': 'request', 'method': method, 'path': path,
                           'body': body, 'params': params})
        if path not in self.assets:
            raise error_from_response(404, json_body({'error': {'message': 'Not found', 'code': 100}}))
        return self.assets[path]


@pytest.fixture
def api_config():
    """Configuration with a fixed token and version."""
    return APIConfig(access_token='TEST_TOKEN', api_version='v21.0')


@pytest.fixture
def executor():
    """Fresh fake executor."""
    return FakeExecutor()


@pytest.fixture
def echo_executor():
    """Executor that echoes pushed assets."""
    return EchoAssetExecutor()


@pytest.fixture
def png_payload():
    """1024 bytes starting with a PNG signature."""
    signature = b'\x89PNG\r\n\x1a\n'
    return signature + bytes(1024 - len(signature))
