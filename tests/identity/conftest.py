import pytest


@pytest.fixture(autouse=True)
def _ctx(identity_context):
    yield
