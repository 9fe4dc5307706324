"""Project-level configuration from pyproject.toml.

Reads the [tool.portfolio-graph] section to provide named portfolio
shortcuts and default settings for the CLI.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from portfoliograph.navigation.navigator import DEFAULT_DURATION_MS, DEFAULT_PADDING_PX, ViewConfig
from portfoliograph.source import is_url
from portfoliograph.viz.engine import DEFAULT_BBL_URL

SECTION = "portfolio-graph"


@dataclass(frozen=True)
class PortfolioGraphConfig:
    """Configuration from [tool.portfolio-graph] in pyproject.toml."""

    portfolios: dict[str, str] = field(default_factory=dict)
    output_dir: str | None = None
    bbl_url: str = DEFAULT_BBL_URL
    zoom_duration_ms: int = DEFAULT_DURATION_MS
    zoom_padding_px: int = DEFAULT_PADDING_PX

    @property
    def view(self) -> ViewConfig:
        return ViewConfig(
            zoom_duration_ms=self.zoom_duration_ms,
            zoom_padding_px=self.zoom_padding_px,
            center_duration_ms=self.zoom_duration_ms,
        )


def find_pyproject(start: Path | None = None) -> Path | None:
    """Nearest pyproject.toml in ``start`` (default: CWD) or one of its parents."""
    here = (start or Path.cwd()).resolve()
    return next(
        (d / "pyproject.toml" for d in (here, *here.parents) if (d / "pyproject.toml").is_file()),
        None,
    )


def _anchor(location: str, root: Path) -> str:
    # Relative paths in pyproject.toml are relative to the file, not the CWD
    if is_url(location):
        return location
    path = Path(location).expanduser()
    return str(path if path.is_absolute() else root / path)


def load_config(start: Path | None = None) -> PortfolioGraphConfig:
    """Load [tool.portfolio-graph] from the nearest pyproject.toml.

    Relative ``portfolios`` paths and ``output_dir`` are resolved against the
    directory holding pyproject.toml. Returns default config if no
    pyproject.toml or no [tool.portfolio-graph] section.
    """
    path = find_pyproject(start)
    if path is None:
        return PortfolioGraphConfig()

    if sys.version_info >= (3, 11):
        import tomllib
    else:
        import tomli as tomllib

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get(SECTION, {})
    if not section:
        return PortfolioGraphConfig()

    root = path.parent
    output_dir = section.get("output_dir")
    defaults = PortfolioGraphConfig()
    return PortfolioGraphConfig(
        portfolios={name: _anchor(loc, root) for name, loc in section.get("portfolios", {}).items()},
        output_dir=_anchor(output_dir, root) if output_dir else None,
        bbl_url=section.get("bbl_url", defaults.bbl_url),
        zoom_duration_ms=section.get("zoom_duration_ms", defaults.zoom_duration_ms),
        zoom_padding_px=section.get("zoom_padding_px", defaults.zoom_padding_px),
    )
