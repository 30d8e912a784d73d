"""Shared pytest fixtures for pratyāhāra tests."""

import pytest
from pratyahara.embedder.group_embedder import GroupEmbedder
from pratyahara.registry.named_groups import PratyaharaRegistry


@pytest.fixture
def registry():
    """Return a freshly built PratyaharaRegistry."""
    return PratyaharaRegistry()


@pytest.fixture
def emb():
    """Return a fresh GroupEmbedder over the default registry."""
    return GroupEmbedder()
