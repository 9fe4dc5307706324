"""Tests for portfolio summaries and rankings."""

from portfoliograph import build, parse_portfolio, summarize
from portfoliograph.summary import RankedNode, rank_business_addresses, rank_names


class TestRankings:
    def test_business_addresses_by_contacts(self, streets_model):
        ranked = rank_business_addresses(streets_model)
        assert ranked == [
            RankedNode(1, "1 Main St", 15),
            RankedNode(2, "20 Elm St", 3),
            RankedNode(3, "300 Oak St", 1),
        ]

    def test_names_sum_incident_edges(self, streets_model):
        assert rank_names(streets_model) == [RankedNode(4, "John Smith", 19)]

    def test_limit(self, streets_model):
        assert [r.id for r in rank_business_addresses(streets_model, limit=2)] == [1, 2]

    def test_ties_broken_by_label(self):
        model = build(
            parse_portfolio(
                {
                    "title": "Ties",
                    "nodes": [
                        {"id": 1, "value": {"Name": "Zed"}},
                        {"id": 2, "value": {"Name": "Amy"}},
                        {"id": 3, "value": {"BizAddr": "1 Main St"}},
                    ],
                    "edges": [
                        {"from": 1, "to": 3, "reg_contacts": 2},
                        {"from": 2, "to": 3, "reg_contacts": 2},
                    ],
                }
            )
        )
        assert [r.label for r in rank_names(model)] == ["Amy", "Zed"]

    def test_self_loop_counted_once(self):
        model = build(
            parse_portfolio(
                {
                    "title": "Loop",
                    "nodes": [
                        {"id": 1, "value": {"Name": "Jane Doe"}},
                        {"id": 2, "value": {"BizAddr": "1 Main St"}},
                    ],
                    "edges": [
                        {"from": 1, "to": 1, "reg_contacts": 3},
                        {"from": 1, "to": 2, "reg_contacts": 2},
                    ],
                }
            )
        )
        assert rank_names(model) == [RankedNode(1, "Jane Doe", 5)]
        assert rank_business_addresses(model) == [RankedNode(2, "1 Main St", 2)]

    def test_isolated_node_has_zero_contacts(self):
        model = build(
            parse_portfolio({"title": "Solo", "nodes": [{"id": 1, "value": {"Name": "Solo"}}], "edges": []})
        )
        assert rank_names(model) == [RankedNode(1, "Solo", 0)]


class TestSummarize:
    def test_counts(self, streets_model):
        summary = summarize(streets_model)
        assert summary.title == "Streets"
        assert (summary.node_count, summary.edge_count) == (4, 3)
        assert (summary.name_count, summary.bizaddr_count) == (1, 3)
        assert summary.bridge_count == 1

    def test_top(self, streets_model):
        summary = summarize(streets_model, top=1)
        assert [r.id for r in summary.top_business_addresses] == [1]
        assert [r.id for r in summary.top_names] == [4]
