"""Portfolio CLI commands: inspect, search, mermaid, ls."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from portfoliograph.cli._config import load_config
from portfoliograph.cli._format import format_table, print_json, print_lines, truncate
from portfoliograph.exceptions import PortfolioError
from portfoliograph.graph.core import GraphModel, build
from portfoliograph.navigation.navigator import plan_view
from portfoliograph.navigation.selection import submit_query
from portfoliograph.session import pluralize, status_line
from portfoliograph.source import is_url, load_portfolio
from portfoliograph.summary import RankedNode, summarize
from portfoliograph.viz.mermaid import to_mermaid


def resolve_location(target: str) -> str:
    """Resolve a CLI target to a path or URL.

    Targets that are URLs or existing files are used as-is; anything else is
    looked up in [tool.portfolio-graph.portfolios].
    """
    if is_url(target) or Path(target).is_file():
        return target

    config = load_config()
    location = config.portfolios.get(target)
    if location is None:
        print(f"Error: '{target}' is not a file, URL, or registered portfolio")
        print("Hint: Register it in pyproject.toml:")
        print(f'  [tool.portfolio-graph.portfolios]\n  {target} = "path/to/portfolio.json"')
        raise typer.Exit(1)
    return location


def load_model(target: str) -> GraphModel:
    """Load and build a portfolio, exiting with status 1 on any failure."""
    location = resolve_location(target)
    try:
        return build(load_portfolio(location))
    except PortfolioError as e:
        print(f"Error: {e.message}")
        raise typer.Exit(1) from e


def _ranked_rows(ranked: list[RankedNode]) -> list[list[str]]:
    return [[str(r.id), truncate(r.label), str(r.reg_contacts)] for r in ranked]


def register_commands(app: typer.Typer) -> None:
    """Register portfolio commands as top-level commands on the app."""

    @app.command("inspect")
    def inspect_cmd(
        target: Annotated[str, typer.Argument(help="Portfolio path, URL, or registered name")],
        top: Annotated[int, typer.Option("--top", help="Number of ranked names and addresses")] = 5,
        as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
        output: Annotated[str | None, typer.Option("--output", help="Write JSON to file")] = None,
    ):
        """Show portfolio size, local bridges, and the busiest names and addresses."""
        model = load_model(target)
        summary = summarize(model, top=top)

        if as_json:
            data = {
                "title": summary.title,
                "nodes": summary.node_count,
                "edges": summary.edge_count,
                "names": summary.name_count,
                "business_addresses": summary.bizaddr_count,
                "local_bridges": summary.bridge_count,
                "top_business_addresses": [vars(r) for r in summary.top_business_addresses],
                "top_names": [vars(r) for r in summary.top_names],
            }
            print_json("inspect", data, output)
            return

        print(f"\n{summary.title}")
        print(f"  {status_line(model)}")
        names = pluralize(summary.name_count, "name")
        bizaddrs = pluralize(summary.bizaddr_count, "business address", "business addresses")
        print(f"  {names}, {bizaddrs}")
        if summary.bridge_count:
            print(f"  {pluralize(summary.bridge_count, 'local bridge')}")

        headers = ["Id", "Label", "Contacts"]
        if summary.top_business_addresses:
            print("\n  Most frequent business addresses:\n")
            print_lines(format_table(headers, _ranked_rows(summary.top_business_addresses)))
        if summary.top_names:
            print("\n  Most frequent names:\n")
            print_lines(format_table(headers, _ranked_rows(summary.top_names)))

    @app.command("search")
    def search_cmd(
        target: Annotated[str, typer.Argument(help="Portfolio path, URL, or registered name")],
        query: Annotated[str, typer.Argument(help="Case-insensitive label substring")] = "",
        as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    ):
        """Show which nodes a search highlights and how the view would move."""
        model = load_model(target)
        outcome = submit_query(query, model.nodes)
        action = plan_view(outcome)
        matched = [n for n in model.nodes if n.id in outcome.selection]

        if as_json:
            data = {
                "query": query,
                "status": outcome.status.value,
                "message": outcome.message,
                "view_action": action.value,
                "matches": [{"id": n.id, "label": n.label} for n in matched],
            }
            print_json("search", data)
            return

        print(f"\n  {outcome.message}")
        print(f"  View: {action.value.replace('_', ' ')}\n")
        rows = [[str(n.id), truncate(n.label), "name" if n.is_name else "business address"] for n in matched]
        print_lines(format_table(["Id", "Label", "Kind"], rows))

    @app.command("mermaid")
    def mermaid_cmd(
        target: Annotated[str, typer.Argument(help="Portfolio path, URL, or registered name")],
        direction: Annotated[str, typer.Option("--direction", help="TD, TB, BT, LR or RL")] = "LR",
        output: Annotated[str | None, typer.Option("--output", help="Write diagram to file")] = None,
    ):
        """Export the portfolio graph as a Mermaid flowchart."""
        model = load_model(target)
        try:
            diagram = to_mermaid(model, direction=direction)
        except ValueError as e:
            print(f"Error: {e}")
            raise typer.Exit(1) from e

        if output:
            Path(output).write_text(diagram.source + "\n", encoding="utf-8")
            print(f"Wrote Mermaid diagram to {output}")
        else:
            print(diagram.source)

    @app.command("ls")
    def ls_cmd(
        as_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
    ):
        """List registered portfolios from [tool.portfolio-graph.portfolios]."""
        config = load_config()

        if as_json:
            print_json("ls", {"portfolios": config.portfolios})
            return

        if not config.portfolios:
            print("\n  No portfolios registered in pyproject.toml.")
            print("  Add entries under [tool.portfolio-graph.portfolios]:")
            print('    [tool.portfolio-graph.portfolios]\n    doe = "portfolios/doe.json"')
            return

        rows = [[name, location] for name, location in sorted(config.portfolios.items())]
        print(f"\n  Registered portfolios ({len(config.portfolios)}):\n")
        print_lines(format_table(["Name", "Location"], rows))
