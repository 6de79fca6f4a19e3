"""Pytest configuration and fixtures for swid tests"""
import pytest

from swid import EntityBuilder, Role, TagBuilder


@pytest.fixture
def language_provider():
    """Fixed default language so tests never depend on the host locale"""
    return lambda: "en-US"


@pytest.fixture
def entity(language_provider):
    return (EntityBuilder.create(language_provider)
            .name("Acme Corp")
            .regid("acme.example")
            .add_role(Role.TAG_CREATOR)
            .add_role(Role.SOFTWARE_CREATOR))


@pytest.fixture
def tag(language_provider, entity):
    """A minimal valid tag: name, tagId and one entity"""
    return (TagBuilder.create(language_provider)
            .name("Acme App")
            .tag_id("acme-app-1.0")
            .add_entity(entity))
