import types

import pytest


@pytest.fixture(
    params=[
        pytest.param(("asyncio", {}), id="asyncio"),
        pytest.param(("trio", {}), id="trio"),
    ],
)
def anyio_backend(request):
    return request.param


@pytest.fixture
def req_factory():
    def make(method="GET", **attrs):
        return types.SimpleNamespace(method=method, **attrs)

    return make


class RecordingRenderer(object):
    def __init__(self):
        self.calls = []

    def render(self, name, context):
        self.calls.append((name, context))
        return f"rendered:{name}"


@pytest.fixture
def renderer():
    return RecordingRenderer()
