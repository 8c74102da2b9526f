"""
Tests for hint ordering, rendering and selection.
"""

from xqueryls.hints.present import (
    HintList,
    HintResponse,
    build_hint_list,
    render,
    sort_candidates,
)


def test_sort_is_case_insensitive():
    assert sort_candidates(["beta", "Alpha", "gamma", "ALPHA-2"]) == [
        "Alpha",
        "ALPHA-2",
        "beta",
        "gamma",
    ]


def test_sort_keeps_input_order_for_equal_keys():
    assert sort_candidates(["FOR", "for", "For"]) == ["FOR", "for", "For"]
    assert sort_candidates(["for", "For", "FOR"]) == ["for", "For", "FOR"]


def test_sort_is_repeatable():
    candidates = ["node", "Node", "xs:QName", "as", "node", "ancestor::"]

    assert sort_candidates(candidates) == sort_candidates(candidates)


def test_sort_orders_by_code_point_after_lowercasing():
    assert sort_candidates(["following::", "following-sibling", "follows"]) == [
        "following-sibling",
        "following::",
        "follows",
    ]


def test_render_adds_suffix_without_changing_candidate():
    display = render("xs:string")

    assert display.startswith("xs:string")
    assert display != "xs:string"
    assert display.count("xs:string") == 2


def test_hint_list_is_index_aligned():
    hint_list = build_hint_list(["let", "Local:a", "for"])

    assert hint_list.raw == ("for", "let", "Local:a")
    assert len(hint_list.display) == len(hint_list.raw) == len(hint_list)
    for raw, display in zip(hint_list.raw, hint_list.display):
        assert display.startswith(raw)
        assert display == render(raw)


def test_resolve_maps_display_to_raw():
    hint_list = build_hint_list(["let", "for"])

    assert hint_list.resolve(render("let")) == "let"


def test_resolve_unknown_display_is_none():
    hint_list = build_hint_list(["let"])

    assert hint_list.resolve(render("for")) is None
    assert hint_list.resolve("let") is None
    assert HintList().resolve(render("let")) is None


def test_response_defaults_match_hint_manager_contract():
    response = HintResponse(hints=("a",))

    assert response.match is None
    assert response.select_initial is True
    assert response.handle_wide_results is False
