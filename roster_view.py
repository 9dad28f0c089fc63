# roster_view.py — roster table, marks tiers, search filter and stats display
# ----------------------------------------------------------------------------

import re

import numpy as np
import pandas as pd

COLUMNS = ["roll", "name", "age", "branch", "marks"]
SEARCH_COLUMNS = ["name", "roll", "branch"]

TIER_LOW, TIER_MEDIUM, TIER_HIGH = "low", "medium", "high"
TIER_COLORS = {TIER_LOW: "red", TIER_MEDIUM: "orange", TIER_HIGH: "green"}

STAT_LABELS = {
    "total": "Total Students",
    "avg_marks": "Average Marks",
    "top_marks": "Top Marks",
    "branches": "Branches",
}
PERCENT_STATS = {"avg_marks", "top_marks"}

LEADING_INT = r"^\s*([+-]?\d+)"
_MD_SPECIAL = re.compile(r"([\\`*_{}\[\]()#+\-.!|~<>$:])")


def roster_frame(students) -> pd.DataFrame:
    """Roster as a DataFrame indexed by roster position, with a marks `tier` column.

    Values keep their backend types (object columns). Marks are read by their
    leading integer ("85abc" -> 85, "1e2" -> 1); with no leading integer they
    become NaN, fail both comparisons and end up "low".
    """
    df = pd.DataFrame(list(students or []), columns=COLUMNS, dtype=object)
    marks = pd.to_numeric(
        df["marks"].astype(str).str.extract(LEADING_INT, expand=False), errors="coerce"
    )
    df["tier"] = np.select(
        [marks >= 75, marks >= 50], [TIER_HIGH, TIER_MEDIUM], default=TIER_LOW
    )
    return df


def normalize_query(query) -> str:
    return (query or "").lower().strip()


def filter_roster(df: pd.DataFrame, query) -> pd.DataFrame:
    # index is kept: row labels stay roster positions after filtering
    query = normalize_query(query)
    if not query:
        return df
    mask = pd.Series(False, index=df.index)
    for col in SEARCH_COLUMNS:
        mask |= df[col].fillna("").astype(str).str.lower().str.contains(query, regex=False)
    return df[mask]


def format_stats(stats: dict) -> dict:
    """Display label -> display string, values verbatim (marks get a % suffix)."""
    out = {}
    for key, label in STAT_LABELS.items():
        value = stats.get(key, 0)
        out[label] = f"{value}%" if key in PERCENT_STATS else f"{value}"
    return out


def escape_markdown(text) -> str:
    return _MD_SPECIAL.sub(r"\\\1", "" if text is None else str(text))


def marks_badge(marks, tier: str) -> str:
    return f":{TIER_COLORS[tier]}[**{escape_markdown(marks)}%**]"
