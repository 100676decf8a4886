"""Tests for the structural walker."""

from tests.conftest import DEGENERATE_PATHS_SVG, NESTED_SVG

from app.engine.config import ExtractionConfig
from app.engine.context import ExtractionContext
from app.engine.walker import path_item, rect_item, walk
from app.models.design import Dimensions, ItemIssue
from app.svg.parser import SvgNode, document_root, parse_document


def _ctx(width=100.0, height=100.0, **config) -> ExtractionContext:
    return ExtractionContext(
        dimensions=Dimensions(width=width, height=height),
        config=ExtractionConfig(**config),
    )


def _node(tag, **attrs) -> SvgNode:
    return SvgNode(tag=tag, attributes=attrs)


def test_emission_order_follows_dispatch_order():
    ctx = _ctx(300, 200)
    walk(ctx, document_root(parse_document(NESTED_SVG)))
    assert [i.fill for i in ctx.items] == ["#000001", "#000002", "#000003", "#000004", "#000005"]


def test_rects_before_paths_before_groups():
    root = _node("svg")
    group = _node("g")
    group.add_child(_node("rect", width="1", height="1", fill="group"))
    root.add_child(group)
    root.add_child(_node("path", d="M0 0 H5 V5", fill="path"))
    root.add_child(_node("rect", width="1", height="1", fill="rect"))

    ctx = _ctx()
    walk(ctx, root)
    assert [i.fill for i in ctx.items] == ["rect", "path", "group"]


def test_rect_defaults():
    item = rect_item(_ctx(), _node("rect"))
    assert (item.x, item.y, item.width, item.height) == (0.0, 0.0, 0.0, 0.0)
    assert item.fill == "#000000"
    assert item.issue is None


def test_rect_unparseable_values_default_to_zero():
    item = rect_item(_ctx(), _node("rect", x="left", y="5px", width="", height="nan"))
    assert (item.x, item.y, item.width, item.height) == (0.0, 5.0, 0.0, 0.0)


def test_rect_within_bounds_has_no_issue():
    item = rect_item(_ctx(), _node("rect", x="0", y="0", width="100", height="100"))
    assert item.issue is None


def test_each_bound_violation_flags_item():
    for attrs in (
        {"x": "-1", "y": "0", "width": "10", "height": "10"},
        {"x": "0", "y": "-1", "width": "10", "height": "10"},
        {"x": "95", "y": "0", "width": "10", "height": "10"},
        {"x": "0", "y": "95", "width": "10", "height": "10"},
    ):
        assert rect_item(_ctx(), _node("rect", **attrs)).issue == ItemIssue.OUT_OF_BOUNDS


def test_path_fill_chain():
    ctx = _ctx()
    d = "M0 0 L10 10"
    assert path_item(ctx, _node("path", d=d, fill="red", stroke="blue")).fill == "red"
    assert path_item(ctx, _node("path", d=d, stroke="blue")).fill == "blue"
    assert path_item(ctx, _node("path", d=d)).fill == "transparent"


def test_path_without_d_is_dropped():
    assert path_item(_ctx(), _node("path", fill="red")) is None


def test_path_out_of_bounds():
    item = path_item(_ctx(50, 50), _node("path", d="M10 10 L60 20"))
    assert item.issue == ItemIssue.OUT_OF_BOUNDS


def test_degenerate_paths_dropped():
    ctx = _ctx()
    walk(ctx, document_root(parse_document(DEGENERATE_PATHS_SVG)))
    assert ctx.items == []
    assert ctx.paths_dropped == 3


def test_root_level_nested_svg_not_entered():
    root = document_root(parse_document(
        '<svg width="100" height="100"><svg><rect width="5" height="5"/></svg></svg>'
    ))
    ctx = _ctx()
    walk(ctx, root)
    assert ctx.items == []


def test_nested_svg_below_group_entered():
    root = document_root(parse_document(
        '<svg width="100" height="100"><g><svg><rect width="5" height="5"/></svg></g></svg>'
    ))
    ctx = _ctx()
    walk(ctx, root)
    assert len(ctx.items) == 1


def test_depth_limit_stops_branch_without_failing():
    root = _node("svg")
    node = root
    for _ in range(10):
        child = _node("g")
        child.add_child(_node("rect", width="1", height="1"))
        node.add_child(child)
        node = child

    ctx = _ctx(max_depth=3)
    walk(ctx, root)
    # groups at depth 1..3 are walked, depth 4 is cut
    assert len(ctx.items) == 3
    assert ctx.depth_limit_hits == 1


def test_default_depth_limit_is_100():
    root = _node("svg")
    node = root
    for _ in range(150):
        child = _node("g")
        child.add_child(_node("rect", width="1", height="1"))
        node.add_child(child)
        node = child

    ctx = _ctx()
    walk(ctx, root)
    assert len(ctx.items) == 100
    assert ctx.depth_limit_hits == 1


def test_cycle_terminates():
    root = _node("svg")
    group = _node("g")
    group.add_child(_node("rect", width="1", height="1"))
    root.add_child(group)
    # group lists itself and the root as children
    group.add_child(group)
    group.add_child(root)

    ctx = _ctx()
    walk(ctx, root)
    assert len(ctx.items) == 1


def test_shared_node_visited_once():
    shared = _node("g")
    shared.add_child(_node("rect", width="1", height="1"))
    root = _node("svg")
    outer = _node("g")
    outer.add_child(shared)
    root.add_child(shared)
    root.add_child(outer)

    ctx = _ctx()
    walk(ctx, root)
    assert len(ctx.items) == 1
