"""Pytest fixtures for fiosstats tests."""
import hashlib
import json
from contextlib import asynccontextmanager

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from fiosstats import APIConfig


class FakeGateway:
    """
    In-process stand-in for the gateway REST API and an InfluxDB endpoint.

    Behaviour is tuned through attributes before the app is served; every
    request received is recorded in ``requests``.
    """

    def __init__(self, password='secret', salt='s4lt'):
        self.password = password
        self.salt = salt
        self.challenge = {
            'doSetupWizard': False,
            'requirePassword': True,
            'passwordSalt': salt,
            'isWireless': False,
            'error': 0,
            'maxUsers': 5,
            'denyState': 0,
            'denyTimeout': 0,
            'meshNetworkEnabledStatus': False,
            'meshUserEnabledConfig': False,
        }
        self.challenge_body = None
        self.login_status = None
        self.login_cookies = {'XSRF-TOKEN': 'tok-abc', 'Session': '1234', 'Other': 'x'}
        self.network = {
            'bandwidth': {'minutesRx': [10, 1, 2], 'minutesTx': [20, 3, 4]},
            'rxErrors': 1,
            'rxDropped': 2,
        }
        self.logout_status = 200
        self.influx_status = 204
        self.requests = []

    def hash(self):
        return hashlib.sha512((self.password + self.salt).encode()).hexdigest()

    async def _record(self, request):
        body = await request.text()
        self.requests.append({
            'method': request.method,
            'path': request.path,
            'query': dict(request.query),
            'headers': request.headers.copy(),
            'body': body,
        })
        return body

    async def get_login(self, request):
        await self._record(request)
        if self.challenge_body is not None:
            return web.Response(text=self.challenge_body)
        return web.json_response(self.challenge)

    async def post_login(self, request):
        body = await self._record(request)
        if self.login_status is not None:
            return web.Response(status=self.login_status)
        try:
            submitted = json.loads(body).get('password')
        except ValueError:
            return web.Response(status=400)
        if submitted != self.hash():
            return web.Response(status=401)
        response = web.json_response({})
        for name, value in self.login_cookies.items():
            response.set_cookie(name, value)
        return response

    async def get_network(self, request):
        await self._record(request)
        return web.json_response(self.network)

    async def get_logout(self, request):
        await self._record(request)
        return web.Response(status=self.logout_status, text='')

    async def post_write(self, request):
        await self._record(request)
        return web.Response(status=self.influx_status)

    def app(self):
        app = web.Application()
        app.router.add_get('/api/login', self.get_login)
        app.router.add_post('/api/login', self.post_login)
        app.router.add_get('/api/network/{interface}', self.get_network)
        app.router.add_get('/api/logout', self.get_logout)
        app.router.add_post('/write', self.post_write)
        return app

    def paths(self):
        return [(r['method'], r['path']) for r in self.requests]


@pytest.fixture
def config_for():
    """Returns a factory of APIConfig pointing at a running TestServer."""
    def _config(server) -> APIConfig:
        return APIConfig(host=f"{server.host}:{server.port}", scheme='http')
    return _config


@pytest.fixture
def fake_gateway():
    """Returns a fresh fake gateway."""
    return FakeGateway()


@pytest.fixture
def gateway_server():
    """Returns an async context manager serving an aiohttp app."""
    @asynccontextmanager
    async def _serve(app):
        server = TestServer(app)
        await server.start_server()
        try:
            yield server
        finally:
            await server.close()
    return _serve


@pytest.fixture
def network_document():
    """Returns a minimal network/1 document."""
    return {
        'bandwidth': {'minutesRx': [10], 'minutesTx': [20]},
        'rxErrors': 1,
        'rxDropped': 2,
    }
