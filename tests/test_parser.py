"""GraphParser: text → GraphModel."""

import time

import pytest

from graph import GraphBuilder, GraphModel, diff_node_ids, parse


def test_tree_document(tree_text):
    model = parse(tree_text)
    assert model.node_ids == ("Root", "A", "B", "A1", "A2", "B1", "B2")
    assert model.adjacency["Root"] == ("A", "B")
    assert model.adjacency["A"] == ("A1", "A2")
    assert model.adjacency["B2"] == ()
    assert model.start_node == "Root"
    assert model.edge_count() == 6


@pytest.mark.parametrize("text", ["", "   \n\n", "%% only a comment\n   %% another", None])
def test_empty_and_comment_only_text_give_empty_model(text):
    model = parse(text)
    assert model.node_ids == ()
    assert dict(model.adjacency) == {}
    assert model.start_node is None
    assert model.is_empty()


def test_keyword_lines_are_noise():
    model = parse("""
        graph LR
        subgraph group
            A --> B
        end
        style A fill:#f9f
        classDef hot fill:#f00
    """)
    assert model.node_ids == ("A", "B")


def test_root_is_first_node_without_incoming_edge():
    model = parse("A --> B\nC --> B")
    assert model.node_ids == ("A", "B", "C")
    assert model.start_node == "A"


def test_root_skips_targets_declared_first():
    model = parse("B\nA --> B")
    assert model.start_node == "A"


def test_fully_cyclic_graph_falls_back_to_first_node():
    model = parse("A --> B\nB --> A")
    assert model.start_node == "A"


def test_duplicate_edges_are_collapsed():
    model = parse("A --> B\nA --> B\nA -.-> B\nA ==> B")
    assert model.adjacency["A"] == ("B",)


def test_self_loop_is_recorded():
    model = parse("A --> A\nA --> B")
    assert model.adjacency["A"] == ("A", "B")
    # A is its own target, B is a target: fallback to first node
    assert model.start_node == "A"


def test_isolated_declarations_get_empty_adjacency():
    model = parse("Solo[Alone]\nX --> Y")
    assert model.node_ids == ("Solo", "X", "Y")
    assert model.adjacency["Solo"] == ()
    assert model.start_node == "Solo"


def test_identifiers_are_case_sensitive():
    model = parse("a --> A")
    assert model.node_ids == ("a", "A")


def test_pair_with_invalid_endpoint_registers_nothing():
    model = parse("A --> [orphan]\n--> B\nC --> end")
    assert model.node_ids == ()


def test_chain_keeps_valid_pairs_only():
    model = parse("A --> B --> [x] --> C")
    assert model.node_ids == ("A", "B")
    assert model.adjacency["A"] == ("B",)


def test_labelled_arrows_and_shapes():
    model = parse("""
        Start((Go)) -->|ok| Check{Valid?}
        Check -- yes --> Done[Finish]
        Check -.-> Retry(Again)
        Retry ==> Start
    """)
    assert model.node_ids == ("Start", "Check", "Done", "Retry")
    assert model.adjacency["Check"] == ("Done", "Retry")
    assert model.adjacency["Retry"] == ("Start",)


def test_no_dangling_references():
    model = parse("A --> B\nB --> C\nD\nC --> A\nE -.-> F")
    for src, targets in model.adjacency.items():
        assert src in model.node_ids
        for t in targets:
            assert t in model.node_ids
    assert set(model.adjacency) == set(model.node_ids)


def test_parse_is_idempotent(tree_text):
    first, second = parse(tree_text), parse(tree_text)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_model_is_read_only():
    model = parse("A --> B")
    with pytest.raises(TypeError):
        model.adjacency["C"] = ()
    with pytest.raises(AttributeError):
        model.start_node = "B"


def test_builder_reports_duplicates():
    builder = GraphBuilder()
    assert builder.add_edge("A", "B") is True
    assert builder.add_edge("A", "B") is False
    model = builder.build()
    assert isinstance(model, GraphModel)
    assert "A" in model and "Z" not in model
    assert model.neighbours("Z") == ()


def test_diff_between_edits():
    before = parse("A --> B\nB --> C")
    after = parse("A --> B\nA --> D")
    diff = diff_node_ids(before, after)
    assert diff.added == ("D",)
    assert diff.removed == ("C",)
    assert diff.kept == ("A", "B")


def test_diff_without_previous_model():
    diff = diff_node_ids(None, parse("A --> B"))
    assert diff.added == ("A", "B")
    assert diff.removed == ()


def test_only_newline_separates_lines():
    model = parse("A --> B\x0cC --> D\r\nD --> E\x1cF")
    assert model.node_ids == ("A", "B", "D", "E")
    assert model.adjacency == {"A": ("B",), "B": ("D",), "D": ("E",), "E": ()}


def test_equal_models_hash_equal(tree_text):
    first, second = parse(tree_text), parse(tree_text)
    assert hash(first) == hash(second)
    assert len({first, second, parse("A --> B")}) == 2
    assert {first: "tree"}[second] == "tree"


def test_long_line_of_unterminated_labels_parses_quickly():
    started = time.perf_counter()
    model = parse("A " + "-- x " * 12000 + "B")
    assert time.perf_counter() - started < 2.0
    assert model.node_ids == ("A",)
