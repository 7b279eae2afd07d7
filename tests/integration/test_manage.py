"""Tests for the management CLI and schema helpers."""

import pytest

import manage
from shared.db import drop_db, setup_db


def test_schema_helpers_skip_memory_providers(domains):
    for domain in domains.values():
        assert setup_db(domain) == []
        assert drop_db(domain) == []


def test_create_admin_rejects_short_password():
    with pytest.raises(ValueError, match="at least 6 characters"):
        manage.create_admin("Ops", "ops@example.com", "123")


def test_unknown_domain_is_rejected():
    with pytest.raises(SystemExit):
        manage.main(["setup-db", "--domain", "payments"])


def test_command_is_required():
    with pytest.raises(SystemExit):
        manage.main([])
