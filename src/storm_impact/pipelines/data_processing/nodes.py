"""Raw → normalized transformation nodes for the NOAA storm-event extract.

Each function is a Kedro node: pure input → output, no side effects.
Together they form the data_processing pipeline that takes the compressed
StormData extract, keeps the analysis window, decodes damage amounts and
maps event labels onto the canonical taxonomy.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

import pandas as pd

from .event_types import CATCH_ALL_EVENT_TYPE, EVENT_TYPE_MAP

logger = logging.getLogger(__name__)

# ── Columns we keep from the 37-column raw extract ──────────────────
KEEP_COLUMNS: list[str] = [
    "evtype",
    "fatalities",
    "injuries",
    "propdmg",
    "propdmgexp",
    "cropdmg",
    "cropdmgexp",
    "state",
    "bgn_date",
]

# Text columns that must not be type-inferred by the CSV reader
# ("0" is a magnitude code, not a number).
_TEXT_COLUMNS: list[str] = ["EVTYPE", "PROPDMGEXP", "CROPDMGEXP", "STATE"]

# (mantissa column, magnitude-code column, decoded column)
_DAMAGE_COLUMNS: list[tuple[str, str, str]] = [
    ("propdmg", "propdmgexp", "damage_prop"),
    ("cropdmg", "cropdmgexp", "damage_crop"),
]

NORMALIZED_COLUMNS: list[str] = [
    "event_type",
    "fatalities",
    "injuries",
    "damage_prop",
    "damage_crop",
    "state",
    "year",
]

# Every BGN_DATE in the extract has this layout, e.g. "4/18/1950 0:00:00"
BGN_DATE_FORMAT = "%m/%d/%Y %H:%M:%S"


class MagnitudeCode(Enum):
    """Order-of-magnitude suffix attached to a damage mantissa.

    ``UNRECOGNIZED`` covers absent codes and anything outside k/m/b
    ("", "0", "5", "+", "h", ...).  It has no multiplier, so it can never
    be mistaken for ×1.
    """

    THOUSAND = ("k", 1_000)
    MILLION = ("m", 1_000_000)
    BILLION = ("b", 1_000_000_000)
    UNRECOGNIZED = ("", None)

    def __init__(self, code: str, multiplier: int | None) -> None:
        self.code = code
        self.multiplier = multiplier

    @classmethod
    def from_code(cls, value: object) -> MagnitudeCode:
        """Case-insensitive lookup of a raw magnitude code."""
        if pd.isna(value):
            return cls.UNRECOGNIZED
        text = str(value).strip().lower()
        for member in (cls.THOUSAND, cls.MILLION, cls.BILLION):
            if text == member.code:
                return member
        return cls.UNRECOGNIZED


def decode_damage(mantissa: object, code: object) -> float:
    """Convert a (mantissa, magnitude code) pair to a dollar amount.

    Examples:
        (5, "K")    → 5,000.0
        (2.5, "M")  → 2,500,000.0
        (NaN, "K")  → 0.0
        (3, "+")    → 0.0  (unrecognized code contributes nothing)
    """
    if pd.isna(mantissa):
        return 0.0
    multiplier = MagnitudeCode.from_code(code).multiplier
    if multiplier is None:
        return 0.0
    return float(mantissa) * multiplier


def normalize_event_type(label: object) -> str:
    """Map one raw EVTYPE label to its canonical category ("other" if unknown)."""
    if pd.isna(label):
        return CATCH_ALL_EVENT_TYPE
    return EVENT_TYPE_MAP.get(str(label).lower(), CATCH_ALL_EVENT_TYPE)


def _normalized_code(series: pd.Series) -> pd.Series:
    return series.astype("string").str.strip().str.lower()


# ── Node 1 ───────────────────────────────────────────────────────────
def load_raw_storm_data(raw_data_path: str) -> pd.DataFrame:
    """Read the (bz2-compressed) storm-event extract into one DataFrame.

    The extract marks unknown values with "?", which is read as missing.
    Column names are lower-cased on the way in.

    Args:
        raw_data_path: Path to StormData.csv.bz2 (or an uncompressed CSV).

    Returns:
        Raw DataFrame with every source column.
    """
    path = Path(raw_data_path)
    if not path.is_file():
        raise FileNotFoundError(
            f"Storm data file not found: {path} "
            "(run download_storm_data.py to fetch it)"
        )

    df = pd.read_csv(
        path,
        na_values=["?"],
        dtype={col: "string" for col in _TEXT_COLUMNS},
        low_memory=False,
    )
    df.columns = df.columns.str.strip().str.lower()

    logger.info(
        "Loaded %s: %s rows, %s columns",
        path.name,
        f"{len(df):,}",
        len(df.columns),
    )
    return df


# ── Node 2 ───────────────────────────────────────────────────────────
def select_and_clean_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Keep only the columns needed for the impact analysis.

    Args:
        df: Raw DataFrame from the loader.

    Returns:
        DataFrame with only the columns in KEEP_COLUMNS.
    """
    missing = [c for c in KEEP_COLUMNS if c not in df.columns]
    if missing:
        raise KeyError(f"Expected columns not found in data: {missing}")

    before_cols = len(df.columns)
    df_selected = df[KEEP_COLUMNS].copy()

    logger.info(
        "Column selection: kept %d of %d columns (dropped %d)",
        len(KEEP_COLUMNS),
        before_cols,
        before_cols - len(KEEP_COLUMNS),
    )
    return df_selected


# ── Node 3 ───────────────────────────────────────────────────────────
def parse_timestamps(df: pd.DataFrame) -> pd.DataFrame:
    """Parse BGN_DATE strings (e.g. "4/18/1950 0:00:00") and extract the year.

    Dates in any other layout become NaT; they are counted here and removed by
    the analysis-window filter.
    """
    df = df.copy()

    df["bgn_date"] = pd.to_datetime(
        df["bgn_date"], format=BGN_DATE_FORMAT, errors="coerce"
    )
    n_null = df["bgn_date"].isna().sum()
    if n_null > 0:
        logger.warning(
            "bgn_date: %s values could not be parsed to datetime",
            f"{n_null:,}",
        )

    df["year"] = df["bgn_date"].dt.year.astype("Int64")

    logger.info(
        "Timestamps parsed. Year range: %s–%s",
        df["year"].min(),
        df["year"].max(),
    )
    return df


# ── Node 4 ───────────────────────────────────────────────────────────
def filter_analysis_window(df: pd.DataFrame, cutoff_year: int) -> pd.DataFrame:
    """Keep events that began strictly after 31 December of ``cutoff_year``.

    Records before 1996 are incomplete and dominated by tornado reports,
    which would inflate tornado rankings.

    Args:
        df: DataFrame with a parsed bgn_date column.
        cutoff_year: Last excluded year (1995 in the reference analysis).

    Returns:
        DataFrame restricted to the analysis window.
    """
    cutoff = pd.Timestamp(year=cutoff_year, month=12, day=31)
    mask = df["bgn_date"].dt.normalize() > cutoff
    df_window = df[mask].copy()

    total = len(df)
    dropped = total - len(df_window)
    logger.info(
        "Analysis window (after %s): kept %s of %s rows (dropped %s = %.1f%%)",
        cutoff.date(),
        f"{len(df_window):,}",
        f"{total:,}",
        f"{dropped:,}",
        (dropped / total * 100) if total > 0 else 0,
    )
    return df_window


# ── Node 5 ───────────────────────────────────────────────────────────
def drop_invalid_magnitude_codes(
    df: pd.DataFrame,
    invalid_codes: list[str],
) -> pd.DataFrame:
    """Remove rows whose property or crop magnitude code is a known entry error.

    The literal "0" is not a magnitude at all; rows carrying it are dropped
    before decoding rather than being decoded as ×0 or ×1.

    Args:
        df: Windowed DataFrame.
        invalid_codes: Codes to drop (from parameters, e.g. ["0"]).

    Returns:
        DataFrame without the offending rows.
    """
    invalid = {str(code).strip().lower() for code in invalid_codes}
    mask = pd.Series(False, index=df.index)
    for _, code_col, _ in _DAMAGE_COLUMNS:
        col_mask = _normalized_code(df[code_col]).isin(invalid).fillna(False)
        if col_mask.any():
            logger.warning(
                "%s: dropping %s rows with invalid magnitude code %s",
                code_col,
                f"{col_mask.sum():,}",
                sorted(invalid),
            )
        mask |= col_mask.astype(bool)

    return df[~mask].copy()


# ── Node 6 ───────────────────────────────────────────────────────────
def decode_damage_amounts(df: pd.DataFrame) -> pd.DataFrame:
    """Convert (PROPDMG, PROPDMGEXP) and (CROPDMG, CROPDMGEXP) to dollars.

    - (25, "K")  → 25,000.0
    - (1.5, "m") → 1,500,000.0
    - (NaN, "K") → 0.0
    - (10, "+")  → 0.0  (unrecognized code; logged as a warning)

    Adds damage_prop and damage_crop and keeps the source columns for
    auditability.
    """
    df = df.copy()

    for mantissa_col, code_col, new_col in _DAMAGE_COLUMNS:
        mantissa = pd.to_numeric(df[mantissa_col], errors="coerce")
        df[new_col] = pd.Series(
            [decode_damage(m, c) for m, c in zip(mantissa, df[code_col])],
            index=df.index,
            dtype="float64",
        )

        codes = _normalized_code(df[code_col])
        recognized = codes.isin([m.code for m in MagnitudeCode if m.multiplier])
        unrecognized = codes.notna() & (codes != "") & ~recognized.fillna(False)
        n_unrecognized = int(unrecognized.sum())
        if n_unrecognized > 0:
            bad_samples = df.loc[unrecognized, code_col].unique()[:10]
            logger.warning(
                "%s: %s rows have an unrecognized magnitude code and were "
                "decoded as $0. Samples: %s",
                code_col,
                f"{n_unrecognized:,}",
                list(bad_samples),
            )

        logger.info(
            "%s: decoded $%s total across %s rows",
            new_col,
            f"{df[new_col].sum():,.0f}",
            f"{len(df):,}",
        )

    return df


# ── Node 7 ───────────────────────────────────────────────────────────
def normalize_event_types(df: pd.DataFrame) -> pd.DataFrame:
    """Map EVTYPE labels onto the canonical taxonomy and shape the output.

    Labels are lower-cased and looked up in EVENT_TYPE_MAP; anything not
    in the table becomes "other".  Missing fatality and injury counts are
    treated as zero.

    Args:
        df: DataFrame with decoded damage columns.

    Returns:
        Normalized event table with the columns in NORMALIZED_COLUMNS.
    """
    out = pd.DataFrame(index=df.index)
    out["event_type"] = df["evtype"].map(normalize_event_type).astype(str)
    for col in ["fatalities", "injuries"]:
        out[col] = pd.to_numeric(df[col], errors="coerce").fillna(0)
    out["damage_prop"] = df["damage_prop"].fillna(0.0)
    out["damage_crop"] = df["damage_crop"].fillna(0.0)
    out["state"] = df["state"].astype("string").str.strip()
    out["year"] = df["year"].astype("int64")
    out = out.reset_index(drop=True)

    raw_labels = df["evtype"].astype("string").str.lower()
    unmapped = raw_labels.notna() & ~raw_labels.isin(list(EVENT_TYPE_MAP)).fillna(False)
    logger.info(
        "Event types normalized: %s raw labels → %d categories "
        "(%s rows with unmapped labels fell through to '%s')",
        f"{raw_labels.nunique():,}",
        out["event_type"].nunique(),
        f"{int(unmapped.sum()):,}",
        CATCH_ALL_EVENT_TYPE,
    )
    return out[NORMALIZED_COLUMNS]
