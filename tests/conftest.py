"""Shared fixtures for recognizer tests."""

import pytest

from docblock_mcp.description import DescriptionFactory
from docblock_mcp.type_resolver import TypeResolver


@pytest.fixture
def resolver():
    return TypeResolver()


@pytest.fixture
def descriptions():
    return DescriptionFactory()
