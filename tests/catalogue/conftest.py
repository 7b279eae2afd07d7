import pytest


@pytest.fixture(autouse=True)
def _ctx(catalogue_context):
    yield
