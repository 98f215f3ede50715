"""Normalized events → impact tables pipeline.

Node dependency graph:
    storm_events_normalized -> [aggregate_event_totals]      -> event_totals
    storm_events_normalized -> [aggregate_event_year_totals] -> event_year_totals
    storm_events_normalized -> [aggregate_event_state_totals] -> event_state_totals
    event_totals -> [score_event_impact] -> event_impact
    event_impact -> [select_top_impact_events] -> top_impact_events
    event_year_totals -> [summarize_analysis_period] -> analysis_period
    event_year_totals, top_impact_events, analysis_period
        -> [build_annual_impact_trend] -> annual_impact_trend
    event_state_totals -> [aggregate_state_damage_totals] -> state_damage_totals
    state_damage_totals -> [compute_per_capita_damage] -> state_damage_per_capita
"""

from kedro.pipeline import Pipeline, node, pipeline

from .nodes import (
    aggregate_event_state_totals,
    aggregate_event_totals,
    aggregate_event_year_totals,
    aggregate_state_damage_totals,
    build_annual_impact_trend,
    compute_per_capita_damage,
    score_event_impact,
    select_top_impact_events,
    summarize_analysis_period,
)


def create_pipeline(**kwargs) -> Pipeline:  # noqa: ARG001
    """Create the impact_analysis pipeline."""
    return pipeline(
        [
            node(
                func=aggregate_event_totals,
                inputs="storm_events_normalized",
                outputs="event_totals",
                name="aggregate_event_totals",
            ),
            node(
                func=aggregate_event_year_totals,
                inputs="storm_events_normalized",
                outputs="event_year_totals",
                name="aggregate_event_year_totals",
            ),
            node(
                func=aggregate_event_state_totals,
                inputs="storm_events_normalized",
                outputs="event_state_totals",
                name="aggregate_event_state_totals",
            ),
            node(
                func=score_event_impact,
                inputs=["event_totals", "params:impact_valuation"],
                outputs="event_impact",
                name="score_event_impact",
            ),
            node(
                func=select_top_impact_events,
                inputs=["event_impact", "params:impact_ranking.top_n"],
                outputs="top_impact_events",
                name="select_top_impact_events",
            ),
            node(
                func=summarize_analysis_period,
                inputs=["event_year_totals", "params:analysis_window.cutoff_year"],
                outputs="analysis_period",
                name="summarize_analysis_period",
            ),
            node(
                func=build_annual_impact_trend,
                inputs=[
                    "event_year_totals",
                    "top_impact_events",
                    "analysis_period",
                    "params:impact_valuation",
                ],
                outputs="annual_impact_trend",
                name="build_annual_impact_trend",
            ),
            node(
                func=aggregate_state_damage_totals,
                inputs="event_state_totals",
                outputs="state_damage_totals",
                name="aggregate_state_damage_totals",
            ),
            node(
                func=compute_per_capita_damage,
                inputs="state_damage_totals",
                outputs="state_damage_per_capita",
                name="compute_per_capita_damage",
            ),
        ]
    )
