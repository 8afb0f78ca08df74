"""Tests for the compiled query registry."""

import pytest

from vaultlinks.errors import RegistryError
from vaultlinks.vault.parser import YAML_LANGUAGE
from vaultlinks.vault.queries import QueryRegistry, compile_query, get_registry


def test_registry_is_compiled_once():
    assert get_registry() is get_registry()


def test_registry_has_expected_captures(queries: QueryRegistry):
    assert queries.links.capture_count == 2
    assert queries.aliases.capture_count == 2
    assert queries.quoted_scalars.capture_count == 1


def test_registry_is_frozen(queries: QueryRegistry):
    with pytest.raises(AttributeError):
        queries.links = queries.aliases


def test_invalid_query_raises_registry_error():
    with pytest.raises(RegistryError, match="bogus"):
        compile_query(YAML_LANGUAGE, "(no_such_node_kind) @x", "bogus")
