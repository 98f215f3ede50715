"""Reporting pipeline: impact tables → charts, animation and maps.

Node dependency graph:
    event_totals            -> [render_health_impact_chart]    -> health_impact_report
    event_totals            -> [render_economic_impact_chart]  -> economic_impact_report
    event_impact            -> [render_impact_index_chart]     -> impact_index_report
    annual_impact_trend     -> [render_impact_trend_animation] -> impact_trend_report
    state_damage_per_capita -> [render_property_damage_map]    -> property_damage_map_report
    state_damage_per_capita -> [render_crop_damage_map]        -> crop_damage_map_report
    all *_report            -> [collect_report_manifest]       -> report_manifest

The six render nodes are independent of each other and only read their
inputs.
"""

from kedro.pipeline import Pipeline, node, pipeline

from .nodes import (
    collect_report_manifest,
    render_crop_damage_map,
    render_economic_impact_chart,
    render_health_impact_chart,
    render_impact_index_chart,
    render_impact_trend_animation,
    render_property_damage_map,
)

_REPORT_OUTPUTS: list[str] = [
    "health_impact_report",
    "economic_impact_report",
    "impact_index_report",
    "impact_trend_report",
    "property_damage_map_report",
    "crop_damage_map_report",
]


def create_pipeline(**kwargs) -> Pipeline:  # noqa: ARG001
    """Create the reporting pipeline."""
    return pipeline(
        [
            node(
                func=render_health_impact_chart,
                inputs=["event_totals", "analysis_period", "params:reporting"],
                outputs="health_impact_report",
                name="render_health_impact_chart",
            ),
            node(
                func=render_economic_impact_chart,
                inputs=["event_totals", "analysis_period", "params:reporting"],
                outputs="economic_impact_report",
                name="render_economic_impact_chart",
            ),
            node(
                func=render_impact_index_chart,
                inputs=[
                    "event_impact",
                    "top_impact_events",
                    "analysis_period",
                    "params:reporting",
                ],
                outputs="impact_index_report",
                name="render_impact_index_chart",
            ),
            node(
                func=render_impact_trend_animation,
                inputs=[
                    "annual_impact_trend",
                    "top_impact_events",
                    "analysis_period",
                    "params:reporting",
                ],
                outputs="impact_trend_report",
                name="render_impact_trend_animation",
            ),
            node(
                func=render_property_damage_map,
                inputs=["state_damage_per_capita", "analysis_period", "params:reporting"],
                outputs="property_damage_map_report",
                name="render_property_damage_map",
            ),
            node(
                func=render_crop_damage_map,
                inputs=["state_damage_per_capita", "analysis_period", "params:reporting"],
                outputs="crop_damage_map_report",
                name="render_crop_damage_map",
            ),
            node(
                func=collect_report_manifest,
                inputs=_REPORT_OUTPUTS,
                outputs="report_manifest",
                name="collect_report_manifest",
            ),
        ]
    )
