"""Raw → normalized pipeline for the NOAA storm-event extract.

This pipeline reads the compressed extract, applies seven sequential
transformation nodes, and outputs the normalized event table (one row
per event, canonical event type, dollar damage) consumed by the
impact_analysis pipeline.
"""

from kedro.pipeline import Pipeline, node, pipeline

from .nodes import (
    decode_damage_amounts,
    drop_invalid_magnitude_codes,
    filter_analysis_window,
    load_raw_storm_data,
    normalize_event_types,
    parse_timestamps,
    select_and_clean_columns,
)


def create_pipeline(**kwargs) -> Pipeline:  # noqa: ARG001
    """Create the data_processing pipeline.

    Node chain:
        raw extract → load → select columns → parse timestamps
        → filter window → drop invalid codes → decode damage
        → normalize event types → normalized parquet
    """
    return pipeline(
        [
            node(
                func=load_raw_storm_data,
                inputs="params:raw_data_path",
                outputs="storm_events_raw",
                name="load_raw_storm_data",
            ),
            node(
                func=select_and_clean_columns,
                inputs="storm_events_raw",
                outputs="storm_events_selected",
                name="select_and_clean_columns",
            ),
            node(
                func=parse_timestamps,
                inputs="storm_events_selected",
                outputs="storm_events_dated",
                name="parse_timestamps",
            ),
            node(
                func=filter_analysis_window,
                inputs=["storm_events_dated", "params:analysis_window.cutoff_year"],
                outputs="storm_events_windowed",
                name="filter_analysis_window",
            ),
            node(
                func=drop_invalid_magnitude_codes,
                inputs=["storm_events_windowed", "params:invalid_magnitude_codes"],
                outputs="storm_events_valid_codes",
                name="drop_invalid_magnitude_codes",
            ),
            node(
                func=decode_damage_amounts,
                inputs="storm_events_valid_codes",
                outputs="storm_events_with_damage",
                name="decode_damage_amounts",
            ),
            node(
                func=normalize_event_types,
                inputs="storm_events_with_damage",
                outputs="storm_events_normalized",
                name="normalize_event_types",
            ),
        ]
    )
