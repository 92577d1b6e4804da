"""
Conversion of historical OHLCV quotes into pandas DataFrames.
"""

from typing import Any

import pandas as pd

OHLCV_COLUMNS = ["open", "high", "low", "close", "volume", "market_cap"]


def _quotes_of(data: Any) -> list[dict]:
    """Find the list of quotes inside an OHLCV historical payload."""
    if isinstance(data, list):
        # Symbol lookups return a list of matching assets
        if data and isinstance(data[0], dict) and "quotes" in data[0]:
            return data[0]["quotes"]
        return data

    if isinstance(data, dict):
        if "quotes" in data:
            return data["quotes"]
        # Payload keyed by id or symbol when a single asset was requested
        if len(data) == 1:
            return _quotes_of(next(iter(data.values())))

    return []


def ohlcv_frame(data: Any, currency: str | int = "USD") -> pd.DataFrame:
    """
    Convert historical OHLCV quotes to a DataFrame.

    Accepts the payload of an OHLCV historical call for a single asset,
    either the asset record itself, a payload keyed by id/symbol, or the
    bare list of quotes.

    Args:
        data: OHLCV historical payload
        currency: Quote currency symbol or id to extract (default: "USD")

    Returns:
        DataFrame indexed by open time (UTC) with OHLCV columns,
        empty when there are no quotes
    """
    records = []
    for entry in _quotes_of(data):
        values = (entry.get("quote") or {}).get(str(currency))
        if not values:
            continue
        record = {column: values.get(column) for column in OHLCV_COLUMNS}
        record["time_open"] = entry.get("time_open")
        record["time_close"] = entry.get("time_close")
        records.append(record)

    if not records:
        return pd.DataFrame(columns=OHLCV_COLUMNS + ["time_close"])

    df = pd.DataFrame(records)
    df["date"] = pd.to_datetime(df["time_open"], utc=True)
    df["time_close"] = pd.to_datetime(df["time_close"], utc=True)
    df = df.set_index("date").sort_index()

    return df[OHLCV_COLUMNS + ["time_close"]]
