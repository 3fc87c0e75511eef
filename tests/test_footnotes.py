import pytest

from MarkPreview.footnotes import FootnoteEntry, FootnoteRegistry


def test_first_seen_order_and_reuse():
    registry = FootnoteRegistry()
    assert registry.resolve("http://a", "A") == 1
    assert registry.resolve("http://b") == 2
    assert registry.resolve("http://a", "other") == 1
    assert registry.entries() == (FootnoteEntry("http://a", "A"), FootnoteEntry("http://b", None))
    assert [entry.url for entry in registry] == ["http://a", "http://b"]


def test_empty_registry_is_falsy():
    registry = FootnoteRegistry()
    assert not registry
    assert len(registry) == 0
    assert list(registry) == []


def test_frozen_registry_rejects_new_urls():
    registry = FootnoteRegistry()
    registry.resolve("http://a")
    registry.freeze()
    assert registry.resolve("http://a") == 1
    with pytest.raises(RuntimeError):
        registry.resolve("http://new")
    assert len(registry) == 1
