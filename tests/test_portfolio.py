"""Tests for portfolio document parsing."""

import pytest

from portfoliograph import BusinessAddress, Name, ParseFailure, parse_portfolio


class TestParseNodes:
    """Node variants are decided once, at parse time."""

    def test_name_variant(self, doe_document):
        portfolio = parse_portfolio(doe_document)
        assert portfolio.nodes[0].value == Name("Jane Doe")
        assert portfolio.nodes[0].label == "Jane Doe"

    def test_bizaddr_variant(self, doe_document):
        portfolio = parse_portfolio(doe_document)
        assert portfolio.nodes[1].value == BusinessAddress("1 Main St")

    def test_both_keys_rejected(self, doe_document):
        doe_document["nodes"][0]["value"] = {"Name": "Jane", "BizAddr": "1 Main St"}
        with pytest.raises(ParseFailure) as exc_info:
            parse_portfolio(doe_document)
        assert exc_info.value.path == "nodes[0].value"
        assert "both" in str(exc_info.value)

    def test_neither_key_rejected(self, doe_document):
        doe_document["nodes"][1]["value"] = {"Address": "1 Main St"}
        with pytest.raises(ParseFailure) as exc_info:
            parse_portfolio(doe_document)
        assert exc_info.value.path == "nodes[1].value"

    def test_label_must_be_string(self, doe_document):
        doe_document["nodes"][0]["value"] = {"Name": 42}
        with pytest.raises(ParseFailure) as exc_info:
            parse_portfolio(doe_document)
        assert exc_info.value.path == "nodes[0].value.Name"

    def test_boolean_id_rejected(self, doe_document):
        doe_document["nodes"][0]["id"] = True
        with pytest.raises(ParseFailure):
            parse_portfolio(doe_document)

    def test_duplicate_ids_rejected(self, doe_document):
        doe_document["nodes"][1]["id"] = 1
        with pytest.raises(ParseFailure) as exc_info:
            parse_portfolio(doe_document)
        assert "duplicate node id 1" in str(exc_info.value)

    def test_node_order_preserved(self, streets_document):
        portfolio = parse_portfolio(streets_document)
        assert [n.id for n in portfolio.nodes] == [1, 2, 3, 4]


class TestParseEdges:
    """Edge fields and defaults."""

    def test_optional_fields_default(self, doe_document):
        del doe_document["edges"][0]["is_bridge"]
        edge = parse_portfolio(doe_document).edges[0]
        assert edge.is_bridge is False
        assert edge.bbl is None

    def test_null_optional_fields_default(self, doe_document):
        doe_document["edges"][0].update({"is_bridge": None, "bbl": None})
        edge = parse_portfolio(doe_document).edges[0]
        assert edge.is_bridge is False
        assert edge.bbl is None

    def test_all_fields(self, streets_document):
        edge = parse_portfolio(streets_document).edges[0]
        assert (edge.from_id, edge.to_id) == (4, 1)
        assert edge.reg_contacts == 15
        assert edge.is_bridge is True
        assert edge.bbl == "1000010001"

    def test_zero_reg_contacts_rejected(self, doe_document):
        doe_document["edges"][0]["reg_contacts"] = 0
        with pytest.raises(ParseFailure) as exc_info:
            parse_portfolio(doe_document)
        assert exc_info.value.path == "edges[0].reg_contacts"

    def test_missing_endpoint_rejected(self, doe_document):
        del doe_document["edges"][0]["to"]
        with pytest.raises(ParseFailure) as exc_info:
            parse_portfolio(doe_document)
        assert "missing required key 'to'" in str(exc_info.value)

    def test_non_boolean_bridge_rejected(self, doe_document):
        doe_document["edges"][0]["is_bridge"] = "yes"
        with pytest.raises(ParseFailure):
            parse_portfolio(doe_document)

    def test_unknown_endpoint_not_checked_here(self, doe_document):
        """Endpoint integrity is the graph builder's job."""
        doe_document["edges"][0]["to"] = 99
        portfolio = parse_portfolio(doe_document)
        assert portfolio.edges[0].to_id == 99


class TestParseDocument:
    """Top-level document shape."""

    @pytest.mark.parametrize("document", [[], "portfolio", None, 3])
    def test_non_object_rejected(self, document):
        with pytest.raises(ParseFailure):
            parse_portfolio(document)

    @pytest.mark.parametrize("key", ["title", "nodes", "edges"])
    def test_missing_key_rejected(self, doe_document, key):
        del doe_document[key]
        with pytest.raises(ParseFailure) as exc_info:
            parse_portfolio(doe_document)
        assert f"'{key}'" in str(exc_info.value)

    def test_nodes_must_be_list(self, doe_document):
        doe_document["nodes"] = {"1": "Jane"}
        with pytest.raises(ParseFailure) as exc_info:
            parse_portfolio(doe_document)
        assert exc_info.value.path == "nodes"

    def test_empty_portfolio(self):
        portfolio = parse_portfolio({"title": "Empty", "nodes": [], "edges": []})
        assert portfolio.nodes == ()
        assert portfolio.edges == ()
