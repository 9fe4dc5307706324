"""CLI command for writing interactive portfolio pages.

Provides `portfolio-graph render` as a top-level command.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Annotated
from urllib.parse import urlparse

import typer
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn

from portfoliograph.cli._config import load_config
from portfoliograph.cli.portfolio_cmd import load_model, resolve_location
from portfoliograph.session import pluralize
from portfoliograph.source import is_url
from portfoliograph.viz.widget import visualize

_UNSAFE_FILENAME_RE = re.compile(r"[^A-Za-z0-9_.-]+")


def output_name(target: str, location: str) -> str:
    """File name for a rendered page.

    Registered names are used as-is; paths and URLs use their file stem.
    """
    if target != location:
        stem = target
    elif is_url(location):
        stem = Path(urlparse(location).path).stem or "portfolio"
    else:
        stem = Path(location).stem
    return _UNSAFE_FILENAME_RE.sub("-", stem).strip("-") + ".html"


def register_commands(app: typer.Typer) -> None:
    """Register `render` as a top-level command on the app."""

    @app.command("render")
    def render_cmd(
        targets: Annotated[list[str], typer.Argument(help="Portfolio paths, URLs, or registered names")],
        output_dir: Annotated[str | None, typer.Option("--output-dir", "-o", help="Directory for HTML pages")] = None,
        bbl_url: Annotated[str | None, typer.Option("--bbl-url", help="Edge link template containing {bbl}")] = None,
    ):
        """Write one interactive HTML page per portfolio."""
        config = load_config()
        out = Path(output_dir or config.output_dir or ".")
        out.mkdir(parents=True, exist_ok=True)
        template = bbl_url or config.bbl_url

        written: list[Path] = []
        with Progress(
            TextColumn("{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            transient=True,
        ) as progress:
            task = progress.add_task("Rendering portfolios", total=len(targets))
            for target in targets:
                location = resolve_location(target)
                model = load_model(target)
                path = out / output_name(target, location)
                visualize(model, view=config.view, bbl_url=template, filepath=path)
                written.append(path)
                progress.advance(task)

        for path in written:
            print(f"  {path}")
        print(f"Exported {pluralize(len(written), 'portfolio')}.")
