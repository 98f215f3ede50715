"""Report nodes: ranked bar charts, the animated trend and state maps.

Each node writes one artifact into ``reporting.output_dir`` and returns a
manifest entry.  A report that cannot be prepared, drawn or written is
logged and marked "failed" in its entry; the other reports still run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from matplotlib.animation import FuncAnimation, PillowWriter
from matplotlib.colors import Normalize

from storm_impact.pipelines.impact_analysis.nodes import rank_top_n

matplotlib.use("Agg")  # non-interactive backend for CI / headless runs

logger = logging.getLogger(__name__)

_MILLION = 1e6
_BILLION = 1e9


# ── helpers ─────────────────────────────────────────────────────
def _period_label(analysis_period: dict[str, int]) -> str:
    return f"{analysis_period['first_year']}-{analysis_period['last_year']}"


def _write_report(
    report: str,
    path: Path,
    writer: Callable[[Path], None],
) -> dict[str, Any]:
    """Run ``writer(path)`` and turn the outcome into a manifest entry.

    ``writer`` does all of the report's work (ranking, drawing, writing),
    so a failure anywhere in it is contained to this one report.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        writer(path)
    except Exception as exc:
        logger.exception("Report '%s' failed, %s not written", report, path)
        return {
            "report": report,
            "path": str(path),
            "status": "failed",
            "error": f"{type(exc).__name__}: {exc}",
        }

    logger.info("Report '%s' written to %s", report, path)
    return {"report": report, "path": str(path), "status": "written", "error": None}


def _draw_ranked_bars(
    ax: plt.Axes,
    ranked: pd.DataFrame,
    metric: str,
    xlabel: str,
    ylabel: str,
    scale: float = 1.0,
) -> None:
    """Horizontal bars, largest on top, colored on the viridis scale."""
    ordered = ranked.iloc[::-1]
    values = ordered[metric].to_numpy(dtype=float)
    colors = matplotlib.colormaps["viridis"](Normalize()(values)) if len(values) else []
    ax.barh(ordered["event_type"], values / scale, color=colors)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.spines[["top", "right"]].set_visible(False)


def _save_ranked_panels(
    path: Path,
    panels: list[tuple[pd.DataFrame, str, str, str, float]],
    title: str,
    reporting: dict[str, Any],
) -> None:
    fig, axes = plt.subplots(1, len(panels), figsize=tuple(reporting["figure_size"]))
    try:
        for ax, panel in zip(np.atleast_1d(axes), panels):
            _draw_ranked_bars(ax, *panel)
        fig.suptitle(title)
        fig.tight_layout()
        fig.savefig(path, dpi=reporting["dpi"])
    finally:
        plt.close(fig)


def _choropleth(
    per_capita: pd.DataFrame,
    column: str,
    label: str,
    title: str,
) -> go.Figure:
    hover = [
        f"{state}<br>{label} per capita: ${value:,.2f}"
        for state, value in zip(per_capita["state"], per_capita[column])
    ]
    fig = go.Figure(
        go.Choropleth(
            locations=per_capita["state"],
            locationmode="USA-states",
            z=per_capita[column],
            text=hover,
            hoverinfo="text",
            colorscale="Viridis",
            reversescale=True,
            colorbar={
                "title": {"text": "USD per capita", "font": {"size": 12}},
                "thickness": 15,
                "len": 0.6,
                "x": 1.0,
                "y": 0.5,
            },
        )
    )
    fig.update_layout(
        title={"text": title, "font": {"size": 14}},
        geo={
            "scope": "usa",
            "showlakes": True,
            "lakecolor": "rgb(255,255,255)",
            "projection": {"type": "albers usa"},
        },
        margin={"l": 0, "r": 80, "t": 50, "b": 20},
        height=500,
    )
    return fig


def _save_choropleth(
    path: Path,
    per_capita: pd.DataFrame,
    column: str,
    label: str,
    title: str,
) -> None:
    fig = _choropleth(per_capita, column, label, title)
    fig.write_html(path, include_plotlyjs=True)


# ── Node 1 ──────────────────────────────────────────────────────
def render_health_impact_chart(
    event_totals: pd.DataFrame,
    analysis_period: dict[str, int],
    reporting: dict[str, Any],
) -> dict[str, Any]:
    """Top-N event types by fatalities and by injuries, side by side."""

    def _write(path: Path) -> None:
        top_n = reporting["top_n_ranking"]
        panels = [
            (
                rank_top_n(event_totals, "fatalities", top_n),
                "fatalities",
                "Fatalities",
                "Weather Events",
                1.0,
            ),
            (rank_top_n(event_totals, "injuries", top_n), "injuries", "Injuries", "", 1.0),
        ]
        title = (
            f"Weather Events ({_period_label(analysis_period)}) "
            "with the Greatest Public Health Impact"
        )
        _save_ranked_panels(path, panels, title, reporting)

    path = Path(reporting["output_dir"]) / "storm_health_impact.png"
    return _write_report("health_impact", path, _write)


# ── Node 2 ──────────────────────────────────────────────────────
def render_economic_impact_chart(
    event_totals: pd.DataFrame,
    analysis_period: dict[str, int],
    reporting: dict[str, Any],
) -> dict[str, Any]:
    """Top-N event types by property damage and by crop damage (millions USD)."""

    def _write(path: Path) -> None:
        top_n = reporting["top_n_ranking"]
        panels = [
            (
                rank_top_n(event_totals, "damage_prop", top_n),
                "damage_prop",
                "Property Damage (in millions USD)",
                "Weather Events",
                _MILLION,
            ),
            (
                rank_top_n(event_totals, "damage_crop", top_n),
                "damage_crop",
                "Crop Damage (in millions USD)",
                "",
                _MILLION,
            ),
        ]
        title = (
            f"Weather Events ({_period_label(analysis_period)}) "
            "with Greatest Economic Impact"
        )
        _save_ranked_panels(path, panels, title, reporting)

    path = Path(reporting["output_dir"]) / "storm_economic_impact.png"
    return _write_report("economic_impact", path, _write)


# ── Node 3 ──────────────────────────────────────────────────────
def render_impact_index_chart(
    event_impact: pd.DataFrame,
    top_impact_events: list[str],
    analysis_period: dict[str, int],
    reporting: dict[str, Any],
) -> dict[str, Any]:
    """Top event types by combined impact index (billions USD, VSL-weighted)."""

    def _write(path: Path) -> None:
        ranked = (
            event_impact.set_index("event_type").loc[top_impact_events].reset_index()
        )
        panels = [
            (
                ranked,
                "impact_index",
                "Combined Impact (billions USD, VSL-weighted)",
                "Weather Event",
                _BILLION,
            )
        ]
        title = (
            f"Top {len(top_impact_events)} Weather Events by Combined Human and "
            f"Economic Impact ({_period_label(analysis_period)})"
        )
        _save_ranked_panels(path, panels, title, reporting)

    path = Path(reporting["output_dir"]) / "storm_impact_index.png"
    return _write_report("impact_index", path, _write)


# ── Node 4 ──────────────────────────────────────────────────────
def render_impact_trend_animation(
    annual_impact_trend: pd.DataFrame,
    top_impact_events: list[str],
    analysis_period: dict[str, int],
    reporting: dict[str, Any],
) -> dict[str, Any]:
    """Animated line chart revealing the annual impact index year by year.

    One line per top event in rank order; each year stays on screen for
    ``animation.frames_per_year`` frames.  The input must be densified
    (one row per event and year) so every line has a point for every year.
    """

    def _write(path: Path) -> None:
        anim_params = reporting["animation"]
        first_year = analysis_period["first_year"]
        last_year = analysis_period["last_year"]
        years = list(range(first_year, last_year + 1))
        frames_per_year = anim_params["frames_per_year"]

        series = {
            event: annual_impact_trend[annual_impact_trend["event_type"] == event]
            .sort_values("year")["impact_index"]
            .to_numpy(dtype=float)
            / _BILLION
            for event in top_impact_events
        }

        fig, ax = plt.subplots(figsize=tuple(anim_params["figure_size"]))
        try:
            colors = matplotlib.colormaps["viridis"](
                np.linspace(0, 1, max(len(top_impact_events), 1))
            )
            lines = [
                ax.plot(
                    [], [], marker="o", linewidth=1, markersize=4, color=color, label=event
                )[0]
                for event, color in zip(top_impact_events, colors)
            ]
            y_max = max(
                (values.max() for values in series.values() if len(values)), default=0.0
            )
            ax.set_xlim(first_year - 0.5, last_year + 0.5)
            ax.set_ylim(0, y_max * 1.05 if y_max > 0 else 1.0)
            ax.set_xticks(years[::2])
            ax.set_xlabel("Year")
            ax.set_ylabel("Annual Impact (billions USD, VSL-weighted)")
            ax.spines[["top", "right"]].set_visible(False)
            ax.legend(
                title="Event Type",
                loc="center left",
                bbox_to_anchor=(1.0, 0.5),
                fontsize=8,
            )
            fig.tight_layout()

            def _update(frame: int):
                shown = frame // frames_per_year + 1
                for line, event in zip(lines, top_impact_events):
                    line.set_data(years[:shown], series[event][:shown])
                ax.set_title(
                    f"Annual Weather Event Impact, {first_year}-{years[shown - 1]}"
                )
                return lines

            animation = FuncAnimation(
                fig,
                _update,
                frames=len(years) * frames_per_year,
                blit=False,
            )
            animation.save(
                path,
                writer=PillowWriter(fps=anim_params["fps"]),
                dpi=anim_params["dpi"],
            )
        finally:
            plt.close(fig)

    path = Path(reporting["output_dir"]) / "storm_impact_trend.gif"
    return _write_report("impact_trend", path, _write)


# ── Node 5 ──────────────────────────────────────────────────────
def render_property_damage_map(
    state_damage_per_capita: pd.DataFrame,
    analysis_period: dict[str, int],
    reporting: dict[str, Any],
) -> dict[str, Any]:
    """US-state choropleth of property damage per capita (standalone HTML)."""
    path = Path(reporting["output_dir"]) / "storm_property_damage_map.html"
    return _write_report(
        "property_damage_map",
        path,
        lambda p: _save_choropleth(
            p,
            state_damage_per_capita,
            "prop_per_capita",
            "Property damage",
            f"Property Damage per Capita by State ({_period_label(analysis_period)})",
        ),
    )


# ── Node 6 ──────────────────────────────────────────────────────
def render_crop_damage_map(
    state_damage_per_capita: pd.DataFrame,
    analysis_period: dict[str, int],
    reporting: dict[str, Any],
) -> dict[str, Any]:
    """US-state choropleth of crop damage per capita (standalone HTML)."""
    path = Path(reporting["output_dir"]) / "storm_crop_damage_map.html"
    return _write_report(
        "crop_damage_map",
        path,
        lambda p: _save_choropleth(
            p,
            state_damage_per_capita,
            "crop_per_capita",
            "Crop damage",
            f"Crop Damage per Capita by State ({_period_label(analysis_period)})",
        ),
    )


# ── Node 7 ──────────────────────────────────────────────────────
def collect_report_manifest(*reports: dict[str, Any]) -> list[dict[str, Any]]:
    """Gather every report's manifest entry; warn if any report failed."""
    manifest = list(reports)
    failed = [entry["report"] for entry in manifest if entry["status"] != "written"]
    if failed:
        logger.warning(
            "%d of %d reports failed: %s",
            len(failed),
            len(manifest),
            failed,
        )
    else:
        logger.info("All %d reports written", len(manifest))
    return manifest
