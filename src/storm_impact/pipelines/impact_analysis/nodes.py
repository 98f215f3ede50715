"""Normalized events → impact tables.

Aggregates the normalized event table by category (and by category-year,
category-state), converts the four impact dimensions into one monetary
index, and prepares the gap-free annual trend and the per-capita state
table used by the reports.

Architecture:
    aggregate → one groupby per grouping key
    score     → impact_index on top of an aggregate
    align     → complete key space (years × top events, states) with 0 fill
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import pandas as pd

from storm_impact.pipelines.data_processing.event_types import CATCH_ALL_EVENT_TYPE
from storm_impact.utils import align_to_key_space, cross_key_space

from .population import STATE_POPULATION

logger = logging.getLogger(__name__)

IMPACT_METRICS: list[str] = ["fatalities", "injuries", "damage_prop", "damage_crop"]


# ── helpers ─────────────────────────────────────────────────────
def aggregate_impact(df: pd.DataFrame, by: list[str]) -> pd.DataFrame:
    """Sum the four impact metrics per distinct key in ``by``.

    Only keys present in ``df`` produce a row.  Missing or non-numeric
    metric values count as zero, and rows with a missing key form their
    own group, so every input row contributes to exactly one output row.
    """
    metrics = df[IMPACT_METRICS].apply(pd.to_numeric, errors="coerce").fillna(0)
    grouped = (
        pd.concat([df[by], metrics], axis=1)
        .groupby(by, as_index=False, sort=True, dropna=False)[IMPACT_METRICS]
        .sum()
    )

    logger.info(
        "Aggregated %s rows by %s into %s groups",
        f"{len(df):,}",
        by,
        f"{len(grouped):,}",
    )
    return grouped


def rank_top_n(
    df: pd.DataFrame,
    metric: str,
    n: int,
    exclude: Sequence[str] = (CATCH_ALL_EVENT_TYPE,),
    label_column: str = "event_type",
) -> pd.DataFrame:
    """Return the ``n`` rows with the largest ``metric``, excluded labels removed.

    The sort is stable, so ties keep their input order.
    """
    candidates = df[~df[label_column].isin(list(exclude))]
    ranked = candidates.sort_values(metric, ascending=False, kind="stable")
    return ranked.head(n).reset_index(drop=True)


def compute_impact_index(
    totals: pd.DataFrame,
    value_per_fatality: float,
    injury_value_divisor: float,
) -> pd.Series:
    """Combine deaths, injuries and damage into one dollar figure.

    impact_index = fatalities × VSL + injuries × (VSL / divisor)
                   + property damage + crop damage

    VSL is the Value of a Statistical Life (EPA, ~$11.6 M); an injury is
    valued at 1/100 of it.
    """
    value_per_injury = value_per_fatality / injury_value_divisor
    return (
        totals["fatalities"] * value_per_fatality
        + totals["injuries"] * value_per_injury
        + totals["damage_prop"]
        + totals["damage_crop"]
    )


# ── Node 1 ──────────────────────────────────────────────────────
def aggregate_event_totals(storm_events_normalized: pd.DataFrame) -> pd.DataFrame:
    """Full-period totals per event type."""
    return aggregate_impact(storm_events_normalized, ["event_type"])


# ── Node 2 ──────────────────────────────────────────────────────
def aggregate_event_year_totals(storm_events_normalized: pd.DataFrame) -> pd.DataFrame:
    """Totals per (event type, year)."""
    return aggregate_impact(storm_events_normalized, ["event_type", "year"])


# ── Node 3 ──────────────────────────────────────────────────────
def aggregate_event_state_totals(storm_events_normalized: pd.DataFrame) -> pd.DataFrame:
    """Totals per (event type, state)."""
    return aggregate_impact(storm_events_normalized, ["event_type", "state"])


# ── Node 4 ──────────────────────────────────────────────────────
def score_event_impact(
    event_totals: pd.DataFrame,
    impact_valuation: dict[str, Any],
) -> pd.DataFrame:
    """Add impact_index to the per-event totals and sort by it, descending.

    Args:
        event_totals: Output of aggregate_event_totals.
        impact_valuation: Dict with value_per_fatality and
            injury_value_divisor (from parameters).

    Returns:
        Event totals with an impact_index column, highest impact first.
    """
    scored = event_totals.copy()
    scored["impact_index"] = compute_impact_index(
        scored,
        impact_valuation["value_per_fatality"],
        impact_valuation["injury_value_divisor"],
    )
    scored = scored.sort_values("impact_index", ascending=False, kind="stable")
    scored = scored.reset_index(drop=True)

    logger.info(
        "Impact index computed for %d event types — top 3: %s",
        len(scored),
        scored["event_type"].head(3).tolist(),
    )
    return scored


# ── Node 5 ──────────────────────────────────────────────────────
def select_top_impact_events(event_impact: pd.DataFrame, top_n: int) -> list[str]:
    """Names of the ``top_n`` event types by impact_index, "other" excluded."""
    top = rank_top_n(event_impact, "impact_index", top_n)["event_type"].tolist()
    logger.info("Top %d events by impact index: %s", top_n, top)
    return top


# ── Node 6 ──────────────────────────────────────────────────────
def summarize_analysis_period(
    event_year_totals: pd.DataFrame,
    cutoff_year: int,
) -> dict[str, int]:
    """Year span of the analysis: the year after the cutoff → latest year present."""
    if event_year_totals.empty:
        raise ValueError(f"No storm events found after {cutoff_year}")

    period = {
        "first_year": int(cutoff_year) + 1,
        "last_year": int(event_year_totals["year"].max()),
    }
    logger.info("Analysis period: %d–%d", period["first_year"], period["last_year"])
    return period


# ── Node 7 ──────────────────────────────────────────────────────
def build_annual_impact_trend(
    event_year_totals: pd.DataFrame,
    top_impact_events: list[str],
    analysis_period: dict[str, int],
    impact_valuation: dict[str, Any],
) -> pd.DataFrame:
    """Annual impact index for the top events, one row per (event, year).

    The line chart needs a gap-free series per event, so the result covers
    the full cross product top_impact_events × [first_year .. last_year];
    pairs with no recorded events get zero in every column.

    Args:
        event_year_totals: Output of aggregate_event_year_totals.
        top_impact_events: Event types in rank order.
        analysis_period: Dict with first_year and last_year.
        impact_valuation: Dict with value_per_fatality and
            injury_value_divisor.

    Returns:
        DataFrame ordered by event rank, then year.
    """
    annual = event_year_totals[
        event_year_totals["event_type"].isin(top_impact_events)
    ].copy()
    annual["impact_index"] = compute_impact_index(
        annual,
        impact_valuation["value_per_fatality"],
        impact_valuation["injury_value_divisor"],
    )

    years = range(analysis_period["first_year"], analysis_period["last_year"] + 1)
    key_space = cross_key_space(event_type=top_impact_events, year=years)
    key_space["year"] = key_space["year"].astype("int64")
    annual["year"] = annual["year"].astype("int64")

    trend = align_to_key_space(
        annual[["event_type", "year", *IMPACT_METRICS, "impact_index"]],
        key_space,
        on=["event_type", "year"],
        fill_value=0.0,
    )

    n_zero_filled = len(trend) - len(annual)
    logger.info(
        "Annual trend: %d events × %d years = %s rows (%s zero-filled)",
        len(top_impact_events),
        len(years),
        f"{len(trend):,}",
        f"{n_zero_filled:,}",
    )
    return trend


# ── Node 8 ──────────────────────────────────────────────────────
def aggregate_state_damage_totals(event_state_totals: pd.DataFrame) -> pd.DataFrame:
    """Collapse the (event type, state) totals to one row per state."""
    return aggregate_impact(event_state_totals, ["state"])


# ── Node 9 ──────────────────────────────────────────────────────
def compute_per_capita_damage(
    state_damage_totals: pd.DataFrame,
    population: dict[str, int] | None = None,
) -> pd.DataFrame:
    """Property and crop damage per resident, by state.

    States missing from the population table (territories, unknown codes)
    are dropped; states in the table with no recorded damage get $0.

    Args:
        state_damage_totals: Output of aggregate_state_damage_totals.
        population: State code → population (defaults to Census 2000).

    Returns:
        One row per state in the population table with damage totals,
        population, prop_per_capita and crop_per_capita.
    """
    population = STATE_POPULATION if population is None else population
    population_frame = pd.DataFrame(
        {"state": list(population), "population": list(population.values())}
    )

    totals = state_damage_totals[["state", "damage_prop", "damage_crop"]].copy()
    totals["state"] = totals["state"].astype(str)

    outside = sorted(set(totals["state"]) - set(population_frame["state"]))
    if outside:
        logger.info(
            "Per-capita: %d state codes without population dropped: %s",
            len(outside),
            outside,
        )

    per_capita = align_to_key_space(totals, population_frame, on=["state"])
    per_capita["prop_per_capita"] = per_capita["damage_prop"] / per_capita["population"]
    per_capita["crop_per_capita"] = per_capita["damage_crop"] / per_capita["population"]

    logger.info(
        "Per-capita damage for %d states — max property: %s ($%s), "
        "max crop: %s ($%s)",
        len(per_capita),
        per_capita.loc[per_capita["prop_per_capita"].idxmax(), "state"],
        f"{per_capita['prop_per_capita'].max():,.2f}",
        per_capita.loc[per_capita["crop_per_capita"].idxmax(), "state"],
        f"{per_capita['crop_per_capita'].max():,.2f}",
    )
    return per_capita
