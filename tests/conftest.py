import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Selects the config overlay and initializes every domain once by importing
    the application module.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("JWT_SECRET", "freshcart-test-secret")
    os.environ.setdefault("LOG_DIR", str(Path(session.config.rootpath) / "logs"))

    import app  # noqa: F401


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def domains():
    from catalogue.domain import catalogue
    from identity.domain import identity
    from ordering.domain import ordering

    return {"identity": identity, "catalogue": catalogue, "ordering": ordering}


@pytest.fixture(autouse=True)
def run_around_tests(domains):
    """Fixture to automatically cleanup infrastructure after every test"""
    yield

    from protean import current_domain

    for domain in domains.values():
        with domain.domain_context():
            for _, provider in current_domain.providers.items():
                provider._data_reset()

            for _, broker in current_domain.brokers.items():
                broker._data_reset()

            current_domain.event_store.store._data_reset()


@pytest.fixture()
def identity_context(domains):
    with domains["identity"].domain_context():
        yield


@pytest.fixture()
def catalogue_context(domains):
    with domains["catalogue"].domain_context():
        yield


@pytest.fixture()
def ordering_context(domains):
    with domains["ordering"].domain_context():
        yield
