"""portfolio-graph CLI: render and inspect portfolio graphs.

Entry point for the `portfolio-graph` command. Requires ``pip install portfolio-graph[cli]``.

Commands:
    render      Write interactive HTML pages for portfolios
    inspect     Show portfolio size and the busiest names and addresses
    search      Show which nodes a query highlights and how the view moves
    mermaid     Export a portfolio as a Mermaid flowchart
    ls          List portfolios registered in pyproject.toml
"""


def _require_typer():
    """Check that typer is available."""
    try:
        import typer  # noqa: F401
    except ImportError:
        import sys

        print("Error: typer is required for the CLI. Install with: pip install portfolio-graph[cli]", file=sys.stderr)
        raise SystemExit(1) from None


def create_app():
    """Create the Typer app with all subcommands."""
    _require_typer()

    import logging
    from typing import Annotated

    import typer

    from portfoliograph.cli.portfolio_cmd import register_commands as register_portfolio_commands
    from portfoliograph.cli.render_cmd import register_commands as register_render_commands

    app = typer.Typer(
        name="portfolio-graph",
        help="Render and explore property-ownership portfolio graphs.",
        no_args_is_help=True,
    )

    @app.callback()
    def configure(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
        """Render and explore property-ownership portfolio graphs."""
        if verbose:
            logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
            logging.getLogger("portfoliograph").setLevel(logging.DEBUG)

    register_render_commands(app)
    register_portfolio_commands(app)

    return app


def main():
    """CLI entry point."""
    app = create_app()
    app()
