"""Tests for wiki-link extraction and target normalization."""

import pytest

from brainlink.vault.parser import extract_links, normalize_target, slugify_title


def test_extract_plain_and_aliased_links():
    content = "See [[Dopamine]] and [[ concepts/serotonin | the mood one ]]."
    links = extract_links(content)

    assert [l.target for l in links] == ["Dopamine", "concepts/serotonin"]
    assert links[0].alias is None
    assert links[1].alias == "the mood one"
    assert links[0].raw == "[[Dopamine]]"
    assert content[links[1].start : links[1].end] == links[1].raw


def test_extract_offsets_cover_full_match():
    content = "ab[[x]]cd"
    (link,) = extract_links(content)
    assert (link.start, link.end) == (2, 7)


def test_extract_empty_content():
    assert extract_links("") == []


def test_extract_ignores_unclosed_brackets():
    links = extract_links("see [[fine]] then [[half] and [[dangling")
    assert [l.target for l in links] == ["fine"]


def test_extract_is_non_overlapping_and_ordered():
    links = extract_links("[[a]][[b]] [[a|again]]")
    assert [(l.target, l.alias) for l in links] == [("a", None), ("b", None), ("a", "again")]
    assert links[0].end <= links[1].start


def test_extract_twice_gives_identical_results():
    content = "one [[first]] two [[second|2]] three"
    first = extract_links(content)
    # An unrelated scan in between must not leak a cursor into the next call
    extract_links("[[other]] [[links]]")
    second = extract_links(content)
    assert first == second
    assert len(first) == 2


def test_normalize_plain_title():
    assert normalize_target("Second Brain System") == "second-brain-system"


def test_normalize_strips_punctuation():
    assert normalize_target("Second Brain System!") == "second-brain-system"


def test_normalize_date_defaults_to_journals():
    assert normalize_target("2026-01-29") == "journals/2026-01-29"


def test_normalize_category_qualified_target():
    assert normalize_target("  Concepts/Second-Brain  ") == "concepts/second-brain"


def test_normalize_drops_non_ascii_letters():
    assert normalize_target("Café") == "caf"
    assert normalize_target("Über Note") == "ber-note"


def test_normalize_date_shaped_after_stripping():
    assert normalize_target("2026-01-29!") == "journals/2026-01-29"


@pytest.mark.parametrize(
    "raw",
    [
        "Second Brain System",
        "Second Brain System!",
        "2026-01-29",
        "2026-01-29!",
        "concepts/Foo Bar",
        "  padded  title ",
        "Café au lait",
        "",
        "already-normal",
        "under_score & ampersand",
    ],
)
def test_normalize_is_idempotent(raw):
    once = normalize_target(raw)
    assert normalize_target(once) == once


def test_slugify_title():
    assert slugify_title("concepts", "  Second Brain: System!  ") == "concepts/second-brain-system"
