"""Tests for deckpicker.domain.services.deck_tree_builder."""

from deckpicker.domain.services.deck_tree_builder import build_deck_tree, deck_sort_key
from deckpicker.domain.value_objects.deck_stats import DeckStats
from helpers import walk


def stats(deck_id, name, new=0, learn=0, review=0):
    return DeckStats(
        deck_id=deck_id, name=name, new_count=new, learn_count=learn, review_count=review
    )


def test_empty_input():
    assert build_deck_tree([]) == []


def test_nests_by_name_and_sets_depth():
    tree = build_deck_tree([
        stats(1, "Lang"),
        stats(2, "Lang::Verbs"),
        stats(3, "Lang::Verbs::Irregular"),
        stats(4, "Math"),
    ])

    assert [n.name for n in tree] == ["Lang", "Math"]
    verbs = tree[0].children[0]
    assert verbs.name_component == "Verbs"
    assert verbs.depth == 1
    assert verbs.children[0].depth == 2
    assert verbs.children[0].name == "Lang::Verbs::Irregular"


def test_orders_siblings_case_insensitively():
    tree = build_deck_tree([
        stats(1, "beta"),
        stats(2, "Alpha"),
        stats(3, "alpha::Zed"),
        stats(4, "Alpha::apple"),
    ])

    assert [n.name for n in tree] == ["Alpha", "beta"]
    assert [n.name for n in walk(tree)] == ["Alpha", "Alpha::apple", "alpha::Zed", "beta"]


def test_input_order_does_not_matter():
    names = ["B::Y", "A", "B", "A::X"]
    forward = build_deck_tree([stats(i, n) for i, n in enumerate(names)])
    backward = build_deck_tree([stats(i, n) for i, n in reversed(list(enumerate(names)))])
    assert forward == backward


def test_aggregates_descendant_counts():
    tree = build_deck_tree([
        stats(1, "Lang", new=1, learn=0, review=2),
        stats(2, "Lang::Verbs", new=3, learn=1, review=0),
        stats(3, "Lang::Verbs::Irregular", new=0, learn=2, review=5),
    ])

    lang = tree[0]
    assert (lang.new_count, lang.learn_count, lang.review_count) == (4, 3, 7)
    verbs = lang.children[0]
    assert (verbs.new_count, verbs.learn_count, verbs.review_count) == (3, 3, 5)


def test_aggregate_disabled_keeps_own_counts():
    tree = build_deck_tree(
        [stats(1, "Lang", new=1), stats(2, "Lang::Verbs", new=3)],
        aggregate=False,
    )
    assert tree[0].new_count == 1


def test_missing_parent_goes_to_top_level():
    tree = build_deck_tree([stats(1, "Lang"), stats(2, "Orphan::Child")])

    assert [n.name for n in tree] == ["Lang", "Orphan::Child"]
    assert tree[1].depth == 0
    assert tree[1].name_component == "Child"


def test_missing_intermediate_parent_attaches_to_nearest_ancestor():
    tree = build_deck_tree([stats(1, "A"), stats(2, "A::B::C")])

    assert len(tree) == 1
    assert tree[0].children[0].name == "A::B::C"
    assert tree[0].children[0].depth == 1


def test_duplicate_names_keep_first():
    tree = build_deck_tree([stats(1, "A"), stats(2, "A")])
    assert [n.deck_id for n in tree] == [1]


def test_deck_sort_key():
    assert deck_sort_key("Lang::Verbs") == ["lang", "verbs"]
    assert sorted(["b", "A::z", "a"], key=deck_sort_key) == ["a", "A::z", "b"]


def test_parent_lookup_ignores_case(caplog):
    tree = build_deck_tree([stats(1, "Lang", new=1), stats(2, "lang::Verbs", new=4)])

    assert [n.deck_id for n in tree] == [1]
    assert tree[0].children[0].deck_id == 2
    assert tree[0].children[0].depth == 1
    assert tree[0].new_count == 5
    assert "no parent deck" not in caplog.text


def test_names_differing_only_in_case_are_duplicates():
    tree = build_deck_tree([stats(1, "Lang"), stats(2, "LANG")])
    assert [n.deck_id for n in tree] == [1]
