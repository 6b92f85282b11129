"""Loader for the district absenteeism CSV file."""

import io
import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd
import requests
import streamlit as st

from config.settings import get_settings, is_remote_source

from .models import DistrictDataset, DistrictRecord

logger = logging.getLogger(__name__)

Source = Union[str, Path]


class LoadError(Exception):
    """The district data file could not be fetched or parsed."""


def load_districts(source: Optional[Source] = None) -> DistrictDataset:
    """
    Fetch and parse the district data file into an immutable snapshot.

    The first row is the header. Every later non-blank row becomes one
    DistrictRecord with its values kept as raw strings ("NA" and "" are not
    converted).

    Raises:
        LoadError: if the file cannot be fetched, decoded or parsed, or the
            header has no name column.
    """
    settings = get_settings()
    source = str(source if source is not None else settings.DATA_SOURCE)

    logger.info("Loading district data from %s", source)
    text = _read_source(source, timeout=settings.REQUEST_TIMEOUT_SECONDS)
    records = _parse_records(text, name_field=settings.NAME_FIELD)
    logger.info("Loaded %d district records", len(records))

    return DistrictDataset(records=records, source=source)


@st.cache_resource(ttl=get_settings().CACHE_TTL_SECONDS, show_spinner=False)
def get_district_dataset(source: Optional[str] = None) -> DistrictDataset:
    """Cached load_districts; the snapshot is shared by reference, failures are not cached."""
    return load_districts(source)


def _read_source(source: str, timeout: float) -> str:
    """Return the raw text of a local file or http(s) URL."""
    if is_remote_source(source):
        try:
            response = requests.get(source, timeout=timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("Failed to fetch district data from %s: %s", source, e)
            raise LoadError(f"Could not fetch district data: {e}") from e
        return response.text

    try:
        return Path(source).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read district data file %s: %s", source, e)
        raise LoadError(f"Could not read district data file: {e}") from e


def _parse_records(text: str, name_field: str) -> tuple[DistrictRecord, ...]:
    """Parse CSV text into records, keeping every value as a raw string."""
    try:
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        logger.error("Failed to parse district data: %s", e)
        raise LoadError(f"Could not parse district data: {e}") from e

    if name_field not in df.columns:
        logger.error("District data has no '%s' column (columns: %s)", name_field, list(df.columns))
        raise LoadError(f"District data is missing the '{name_field}' column")

    # Short rows come back as NaN even with NA conversion disabled
    df = df.fillna("")
    value_columns = [c for c in df.columns if c != name_field]

    records = []
    for row in df.to_dict(orient="records"):
        records.append(
            DistrictRecord(
                name=row[name_field],
                yearly_values={col: row[col] for col in value_columns},
            )
        )
    return tuple(records)
