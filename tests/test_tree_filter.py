from catalog_tree.models.category import Category
from catalog_tree.services.tree_builder import build_tree, count_nodes, find_node, flatten_tree, sort_tree
from catalog_tree.services.tree_filter import (
    all_of,
    apply_filters,
    filter_by_search,
    filter_by_status,
    filter_tree,
    search_predicate,
    status_predicate,
)
from catalog_tree.utils.formatters import format_tree_lines


def ids(nodes):
    return [node.id for node in nodes]


def shape(nodes):
    return [(node.id, shape(node.children)) for node in nodes]


def test_status_filter_drops_inactive_leaf(bath_tree):
    result = filter_by_status(bath_tree, True)

    assert ids(result) == [1]
    assert ids(result[0].children) == [3]


def test_search_keeps_ancestor_of_match(bath_tree):
    result = filter_by_search(bath_tree, "sham")

    assert ids(result) == [1]
    assert ids(result[0].children) == [3]


def test_active_filter_keeps_inactive_ancestors_of_active_nodes(catalog_forest):
    result = filter_by_status(catalog_forest, True)

    assert shape(result) == [
        (10, [(11, [(12, [])]), (13, [])]),
        (30, []),
    ]


def test_inactive_filter(catalog_forest):
    result = filter_by_status(catalog_forest, False)

    assert shape(result) == [
        (10, [(11, [])]),
        (20, [(21, [])]),
    ]


def test_status_filter_matches_definition(catalog_forest):
    result = filter_by_status(catalog_forest, True)
    kept = {node.id for node in flatten_tree(result)}

    for node in flatten_tree(catalog_forest):
        has_kept_descendant = any(d.id in kept for d in flatten_tree(node.children))
        assert (node.id in kept) == (node.is_active or has_kept_descendant)


def test_search_is_case_insensitive_and_checks_description(catalog_forest):
    result = filter_by_search(catalog_forest, "CREAMS")

    assert shape(result) == [(10, [(13, [])])]


def test_search_nested_match_keeps_depth(catalog_forest):
    result = filter_by_search(catalog_forest, "soap")

    assert shape(result) == [(20, [(21, [])])]


def test_search_without_matches(catalog_forest):
    assert filter_by_search(catalog_forest, "garden") == []


def test_blank_search_keeps_everything(catalog_forest):
    result = filter_by_search(catalog_forest, "   ")

    assert shape(result) == shape(catalog_forest)


def test_search_is_idempotent(catalog_forest):
    for term in ("soap", "s", "hair", "x"):
        once = filter_by_search(catalog_forest, term)
        twice = filter_by_search(once, term)
        assert shape(twice) == shape(once)


def test_filter_does_not_mutate_input(catalog_forest):
    before = shape(catalog_forest)
    result = filter_by_status(catalog_forest, True)

    assert shape(catalog_forest) == before
    assert find_node(result, 10) is not find_node(catalog_forest, 10)


def test_sibling_order_is_preserved():
    parent = Category(id=1, name="Root", children=[
        Category(id=4, name="match d"),
        Category(id=2, name="skip"),
        Category(id=3, name="match c"),
    ])

    result = filter_by_search([parent], "match")

    assert ids(result[0].children) == [4, 3]


def test_custom_predicate(catalog_forest):
    result = filter_tree(catalog_forest, lambda node: (node.products_count or 0) > 10)

    assert shape(result) == [(10, [(11, [(12, [])])])]


def test_predicates():
    node = Category(id=1, name="Shampoo", description=None, is_active=False)

    assert search_predicate("POO")(node)
    assert not search_predicate("bar")(node)
    assert status_predicate(False)(node)
    assert not all_of(status_predicate(False), search_predicate("bar"))(node)
    assert all_of()(node)


def test_apply_filters_combines_both(catalog_forest):
    assert shape(apply_filters(catalog_forest, search="sham", is_active=True)) == [
        (10, [(11, [(12, [])])]),
    ]
    # Hair is inactive and matches; Beauty mentions hair but is active
    assert shape(apply_filters(catalog_forest, search="hair", is_active=False)) == [
        (10, [(11, [])]),
    ]


def test_apply_filters_without_filters_copies_tree(catalog_forest):
    result = apply_filters(catalog_forest)

    assert shape(result) == shape(catalog_forest)
    assert result[0] is not catalog_forest[0]
    assert count_nodes(result) == count_nodes(catalog_forest)


def test_cyclic_branch_is_skipped():
    a = Category(id=1, name="a")
    b = Category(id=2, name="b", children=[a])
    a.children = [b]

    result = filter_tree([a], lambda node: True)

    assert shape(result) == [(1, [(2, [])])]


def test_deep_chain_is_filtered_without_recursion():
    depth = 1500
    categories = [
        Category(id=i, name=f"level {i}", parent_id=i - 1 if i > 1 else None, is_active=(i == depth))
        for i in range(1, depth + 1)
    ]
    tree = build_tree(categories)

    assert count_nodes(filter_by_status(tree, True)) == depth
    assert count_nodes(filter_by_status(tree, False)) == depth - 1
    assert count_nodes(filter_by_search(tree, "level 1500")) == depth
    assert count_nodes(sort_tree(tree, "name", "desc")) == depth

    lines = format_tree_lines(tree)
    assert len(lines) == depth
    assert lines[-1] == "  " * (depth - 1) + "• level 1500 (1500)"
