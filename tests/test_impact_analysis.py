"""Tests for the impact_analysis pipeline: aggregation, ranking, scoring,
annual trend densification and per-capita damage.
"""

import numpy as np
import pandas as pd
import pytest

VALUATION = {"value_per_fatality": 11_600_000, "injury_value_divisor": 100}


@pytest.fixture()
def normalized_events():
    """A small normalized event table spanning three years and four states."""
    return pd.DataFrame(
        {
            "event_type": [
                "tornado",
                "tornado",
                "flood",
                "flood",
                "hail",
                "thunderstorm wind",
                "other",
                "flood",
            ],
            "fatalities": [2, 1, 0, 3, 0, 0, 50, 0],
            "injuries": [10, 4, 1, 0, 2, 7, 0, 0],
            "damage_prop": [1e6, 5e5, 2e7, 3e6, 1e4, 2e5, 9e9, 0.0],
            "damage_crop": [0.0, 0.0, 5e6, 0.0, 3e4, 0.0, 0.0, 1e6],
            "state": ["AL", "TX", "TX", "LA", "TX", "AL", "PR", None],
            "year": [1996, 1998, 1996, 1998, 1997, 1996, 1997, 1998],
        }
    )


# ── Test 1: Aggregation ─────────────────────────────────────────
class TestAggregateImpact:
    """aggregate_impact(df, by) sums the four metrics per key."""

    @pytest.mark.parametrize(
        "by", [["event_type"], ["event_type", "year"], ["event_type", "state"]]
    )
    def test_totals_are_conserved(self, normalized_events, by):
        from storm_impact.pipelines.impact_analysis.nodes import (
            IMPACT_METRICS,
            aggregate_impact,
        )

        grouped = aggregate_impact(normalized_events, by)

        for metric in IMPACT_METRICS:
            assert grouped[metric].sum() == pytest.approx(normalized_events[metric].sum())

    def test_only_present_keys(self, normalized_events):
        from storm_impact.pipelines.impact_analysis.nodes import aggregate_impact

        grouped = aggregate_impact(normalized_events, ["event_type"])

        assert sorted(grouped["event_type"]) == sorted(normalized_events["event_type"].unique())
        flood = grouped.set_index("event_type").loc["flood"]
        assert flood["fatalities"] == 3
        assert flood["damage_prop"] == 2.3e7
        assert flood["damage_crop"] == 6e6

    def test_missing_state_forms_its_own_group(self, normalized_events):
        from storm_impact.pipelines.impact_analysis.nodes import aggregate_impact

        grouped = aggregate_impact(normalized_events, ["event_type", "state"])

        assert grouped["state"].isna().sum() == 1
        assert len(grouped) == len(normalized_events)

    def test_non_numeric_metric_counts_as_zero(self):
        from storm_impact.pipelines.impact_analysis.nodes import aggregate_impact

        df = pd.DataFrame(
            {
                "event_type": ["hail", "hail"],
                "fatalities": [1, None],
                "injuries": ["3", "n/a"],
                "damage_prop": [10.0, 5.0],
                "damage_crop": [0.0, np.nan],
            }
        )
        grouped = aggregate_impact(df, ["event_type"])

        assert grouped.loc[0, "fatalities"] == 1
        assert grouped.loc[0, "injuries"] == 3
        assert grouped.loc[0, "damage_prop"] == 15.0
        assert grouped.loc[0, "damage_crop"] == 0.0

    def test_state_totals_conserve_event_state_totals(self, normalized_events):
        from storm_impact.pipelines.impact_analysis.nodes import (
            aggregate_event_state_totals,
            aggregate_state_damage_totals,
        )

        by_event_state = aggregate_event_state_totals(normalized_events)
        by_state = aggregate_state_damage_totals(by_event_state)

        assert by_state["damage_prop"].sum() == pytest.approx(
            normalized_events["damage_prop"].sum()
        )
        assert by_state.set_index("state").loc["TX", "damage_prop"] == 5e5 + 2e7 + 1e4


# ── Test 2: Worked example ──────────────────────────────────────
class TestThunderstormWindScenario:
    """Two raw rows that differ only in label spelling end up in one bucket."""

    def test_decode_normalize_aggregate(self):
        from storm_impact.pipelines.data_processing.nodes import (
            decode_damage_amounts,
            normalize_event_types,
        )
        from storm_impact.pipelines.impact_analysis.nodes import (
            aggregate_event_year_totals,
            score_event_impact,
        )

        raw = pd.DataFrame(
            {
                "evtype": ["tstm wind", "TSTM WIND"],
                "fatalities": [1, 0],
                "injuries": [0, 2],
                "propdmg": [10.0, 0.0],
                "propdmgexp": ["k", None],
                "cropdmg": [0.0, 5.0],
                "cropdmgexp": [None, "m"],
                "state": ["TX", "TX"],
                "bgn_date": pd.to_datetime(["2000-05-01", "2000-06-02"]),
                "year": [2000, 2000],
            }
        )

        totals = aggregate_event_year_totals(
            normalize_event_types(decode_damage_amounts(raw))
        )

        assert totals[["event_type", "year"]].values.tolist() == [["thunderstorm wind", 2000]]
        row = totals.iloc[0]
        assert row["fatalities"] == 1
        assert row["injuries"] == 2
        assert row["damage_prop"] == 10_000
        assert row["damage_crop"] == 5_000_000

        scored = score_event_impact(totals, VALUATION)
        # 1 × 11.6M + 2 × 116k + 10k + 5M
        assert scored.loc[0, "impact_index"] == pytest.approx(16_842_000)


# ── Test 3: Ranking ─────────────────────────────────────────────
class TestRankTopN:
    """rank_top_n(df, metric, n, exclude)."""

    @pytest.fixture()
    def totals(self):
        return pd.DataFrame(
            {
                "event_type": ["hail", "other", "flood", "tornado", "heat", "fog"],
                "fatalities": [5, 999, 30, 30, 12, 0],
            }
        )

    def test_descending_and_bounded(self, totals):
        from storm_impact.pipelines.impact_analysis.nodes import rank_top_n

        ranked = rank_top_n(totals, "fatalities", 3)

        assert len(ranked) == 3
        assert ranked["fatalities"].is_monotonic_decreasing

    def test_catch_all_never_ranked(self, totals):
        from storm_impact.pipelines.impact_analysis.nodes import rank_top_n

        ranked = rank_top_n(totals, "fatalities", 10)

        assert "other" not in ranked["event_type"].tolist()
        assert len(ranked) == 5

    def test_ties_keep_input_order(self, totals):
        from storm_impact.pipelines.impact_analysis.nodes import rank_top_n

        ranked = rank_top_n(totals, "fatalities", 2)
        assert ranked["event_type"].tolist() == ["flood", "tornado"]

        reversed_input = totals.iloc[::-1].reset_index(drop=True)
        ranked = rank_top_n(reversed_input, "fatalities", 2)
        assert ranked["event_type"].tolist() == ["tornado", "flood"]

    def test_custom_exclusion(self, totals):
        from storm_impact.pipelines.impact_analysis.nodes import rank_top_n

        ranked = rank_top_n(totals, "fatalities", 2, exclude=("other", "flood"))
        assert ranked["event_type"].tolist() == ["tornado", "heat"]


# ── Test 4: Impact index and top events ─────────────────────────
class TestImpactScoring:
    """score_event_impact + select_top_impact_events."""

    def test_index_formula(self):
        from storm_impact.pipelines.impact_analysis.nodes import compute_impact_index

        totals = pd.DataFrame(
            {"fatalities": [1], "injuries": [1], "damage_prop": [0.0], "damage_crop": [0.0]}
        )
        index = compute_impact_index(totals, 11_600_000, 100)
        assert index.iloc[0] == pytest.approx(11_716_000)

    def test_scored_events_sorted_descending(self, normalized_events):
        from storm_impact.pipelines.impact_analysis.nodes import (
            aggregate_event_totals,
            score_event_impact,
        )

        scored = score_event_impact(aggregate_event_totals(normalized_events), VALUATION)

        assert scored["impact_index"].is_monotonic_decreasing
        assert scored.loc[0, "event_type"] == "other"

    def test_top_events_exclude_other(self, normalized_events):
        from storm_impact.pipelines.impact_analysis.nodes import (
            aggregate_event_totals,
            score_event_impact,
            select_top_impact_events,
        )

        scored = score_event_impact(aggregate_event_totals(normalized_events), VALUATION)
        top = select_top_impact_events(scored, 2)

        # flood: 3 × 11.6M + 116k + 29M beats tornado: 3 × 11.6M + 14 × 116k + 1.5M
        assert top == ["flood", "tornado"]

    def test_top_events_fewer_than_n(self, normalized_events):
        from storm_impact.pipelines.impact_analysis.nodes import (
            aggregate_event_totals,
            score_event_impact,
            select_top_impact_events,
        )

        scored = score_event_impact(aggregate_event_totals(normalized_events), VALUATION)
        top = select_top_impact_events(scored, 10)

        assert len(top) == 4
        assert "other" not in top


# ── Test 5: Analysis period and annual trend ────────────────────
class TestAnnualTrend:
    """summarize_analysis_period + build_annual_impact_trend."""

    def test_period_spans_cutoff_to_latest_year(self, normalized_events):
        from storm_impact.pipelines.impact_analysis.nodes import (
            aggregate_event_year_totals,
            summarize_analysis_period,
        )

        period = summarize_analysis_period(
            aggregate_event_year_totals(normalized_events), 1995
        )
        assert period == {"first_year": 1996, "last_year": 1998}

    def test_empty_window_is_an_error(self):
        from storm_impact.pipelines.impact_analysis.nodes import summarize_analysis_period

        empty = pd.DataFrame(columns=["event_type", "year"])
        with pytest.raises(ValueError, match="1995"):
            summarize_analysis_period(empty, 1995)

    @pytest.fixture()
    def trend(self, normalized_events):
        from storm_impact.pipelines.impact_analysis.nodes import (
            aggregate_event_year_totals,
            build_annual_impact_trend,
        )

        return build_annual_impact_trend(
            aggregate_event_year_totals(normalized_events),
            ["flood", "tornado", "hail"],
            {"first_year": 1996, "last_year": 1999},
            VALUATION,
        )

    def test_one_row_per_event_and_year(self, trend):
        assert len(trend) == 3 * 4
        assert not trend.duplicated(["event_type", "year"]).any()

    def test_ordered_by_rank_then_year(self, trend):
        assert trend["event_type"].tolist()[:4] == ["flood"] * 4
        assert trend["event_type"].tolist()[-4:] == ["hail"] * 4
        assert trend["year"].tolist()[:4] == [1996, 1997, 1998, 1999]

    def test_missing_pairs_are_zero(self, trend):
        indexed = trend.set_index(["event_type", "year"])

        assert (indexed.loc[("flood", 1997)] == 0).all()
        assert (indexed.loc[("tornado", 1999)] == 0).all()
        assert indexed.loc[("hail", 1997), "impact_index"] == pytest.approx(
            2 * 116_000 + 1e4 + 3e4
        )
        assert trend.notna().all().all()

    def test_non_top_events_left_out(self, trend):
        assert set(trend["event_type"]) == {"flood", "tornado", "hail"}


# ── Test 6: Per-capita damage ───────────────────────────────────
class TestPerCapitaDamage:
    """compute_per_capita_damage(state_damage_totals, population)."""

    @pytest.fixture()
    def state_totals(self):
        return pd.DataFrame(
            {
                "state": ["TX", "LA", "PR", "GU"],
                "fatalities": [1, 2, 0, 0],
                "injuries": [0, 0, 0, 0],
                "damage_prop": [1_000_000.0, 500.0, 9e9, 1e3],
                "damage_crop": [200.0, 0.0, 1e6, 0.0],
            }
        )

    def test_division(self, state_totals):
        from storm_impact.pipelines.impact_analysis.nodes import compute_per_capita_damage

        per_capita = compute_per_capita_damage(
            state_totals, population={"TX": 1000, "LA": 50, "AK": 10}
        ).set_index("state")

        assert per_capita.loc["TX", "prop_per_capita"] == 1000.0
        assert per_capita.loc["TX", "crop_per_capita"] == 0.2
        assert per_capita.loc["LA", "prop_per_capita"] == 10.0

    def test_territories_dropped_and_quiet_states_zero(self, state_totals):
        from storm_impact.pipelines.impact_analysis.nodes import compute_per_capita_damage

        per_capita = compute_per_capita_damage(
            state_totals, population={"TX": 1000, "LA": 50, "AK": 10}
        )

        assert sorted(per_capita["state"]) == ["AK", "LA", "TX"]
        ak = per_capita.set_index("state").loc["AK"]
        assert ak["prop_per_capita"] == 0.0
        assert ak["crop_per_capita"] == 0.0
        assert ak["population"] == 10

    def test_default_population_table(self, state_totals):
        from storm_impact.pipelines.impact_analysis.nodes import compute_per_capita_damage
        from storm_impact.pipelines.impact_analysis.population import STATE_POPULATION

        assert len(STATE_POPULATION) == 51
        assert "DC" in STATE_POPULATION
        assert "PR" not in STATE_POPULATION
        assert all(value > 0 for value in STATE_POPULATION.values())

        per_capita = compute_per_capita_damage(state_totals)
        assert len(per_capita) == 51
        assert "PR" not in set(per_capita["state"])


# ── Test 7: Shared key-space helpers ────────────────────────────
class TestKeySpace:
    """storm_impact.utils: cross_key_space + align_to_key_space."""

    def test_cross_product(self):
        from storm_impact.utils import cross_key_space

        space = cross_key_space(event_type=["flood", "hail"], year=[2000, 2001])
        assert list(space.itertuples(index=False, name=None)) == [
            ("flood", 2000),
            ("flood", 2001),
            ("hail", 2000),
            ("hail", 2001),
        ]

    def test_align_fills_and_drops(self):
        from storm_impact.utils import align_to_key_space

        key_space = pd.DataFrame({"state": ["AK", "TX"], "population": [10, 20]})
        df = pd.DataFrame({"state": ["TX", "PR"], "damage": [4.0, 9.0]})

        aligned = align_to_key_space(df, key_space, on=["state"], fill_value=0.0)

        assert aligned["state"].tolist() == ["AK", "TX"]
        assert aligned["damage"].tolist() == [0.0, 4.0]
        assert aligned["population"].tolist() == [10, 20]

    def test_duplicate_keys_rejected(self):
        from storm_impact.utils import align_to_key_space

        key_space = pd.DataFrame({"state": ["TX"]})
        df = pd.DataFrame({"state": ["TX", "TX"], "damage": [1.0, 2.0]})

        with pytest.raises(pd.errors.MergeError):
            align_to_key_space(df, key_space, on=["state"])
