import numpy as np
import pandas as pd

from datetime import datetime
from typing import Tuple

from libs.config.config_errors import DateParseError
from libs.config.config_variables import (
    DATE_FILTER,
    BOUNDING_BOX,
    EVENT_TIME_FORMAT,
    EVENT_TIME_COLUMNS,
    REQUIRED_NUMERIC_COLUMNS,
)
from libs.helpers.df_helpers import coerce_numeric, filter_between
from modules.seismic_analysis.magnitude_category import assign_magnitude_category

from libs.config.config_logger import get_logger

logger = get_logger()


def filter_by_date(
    df: pd.DataFrame,
    year: int = DATE_FILTER["year"],
    min_month: int = DATE_FILTER["min_month"],
) -> pd.DataFrame:
    """Mantiene los eventos del año indicado a partir de `min_month`."""
    return df[(df["Year"] == year) & (df["Month"] >= min_month)]


def filter_by_region(
    df: pd.DataFrame,
    min_lat: float = BOUNDING_BOX["min_lat"],
    max_lat: float = BOUNDING_BOX["max_lat"],
    min_lon: float = BOUNDING_BOX["min_lon"],
    max_lon: float = BOUNDING_BOX["max_lon"],
) -> pd.DataFrame:
    """Mantiene los eventos dentro del recuadro (límites incluidos)."""
    df = filter_between(df, "Latitude", min_lat, max_lat)
    return filter_between(df, "Longitude", min_lon, max_lon)


def compose_event_time(year, month, day, hour, minute, second) -> str:
    """Compone `YYYY-MM-DD HH:MM:SS`; los segundos decimales se truncan."""
    parts = [int(v) for v in (year, month, day, hour, minute, second)]
    return "%04d-%02d-%02d %02d:%02d:%02d" % tuple(parts)


def parse_event_time(value: str) -> datetime:
    try:
        return datetime.strptime(value, EVENT_TIME_FORMAT)
    except ValueError as e:
        raise DateParseError(f"Fecha inválida '{value}': {e}") from e


def split_event_time(value: datetime) -> Tuple[int, int, int, int, int, int]:
    """Inverso de `compose_event_time` para una fecha ya interpretada."""
    return (
        value.year,
        value.month,
        value.day,
        value.hour,
        value.minute,
        value.second,
    )


def add_event_time(df: pd.DataFrame) -> pd.DataFrame:
    """
    Añade la columna `DateTime` a partir de los seis campos de fecha y hora.

    Raises:
        DateParseError: Si algún campo falta, no es finito o la fecha compuesta no existe.
    """
    df = df.copy()
    times = df[EVENT_TIME_COLUMNS].astype("float64")
    missing = ~np.isfinite(times).all(axis=1)
    if missing.any():
        rows = list(df.index[missing])
        raise DateParseError(f"Campos de fecha/hora ausentes en las filas {rows}")

    event_times = []
    for idx, row in df[EVENT_TIME_COLUMNS].iterrows():
        composed = compose_event_time(*row.tolist())
        try:
            event_times.append(parse_event_time(composed))
        except DateParseError as e:
            logger.error(f"Fila {idx}: {e.message}")
            raise

    df["DateTime"] = pd.to_datetime(pd.Series(event_times, index=df.index, dtype=object))
    return df


def split_strongest(df: pd.DataFrame) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Separa el catálogo en (ordinarios, más fuertes).

    Los más fuertes son todos los eventos empatados en la magnitud máxima.
    Ambas particiones conservan el orden original.
    """
    if df.empty:
        return df, df
    is_strongest = df["Magnitude"] == df["Magnitude"].max()
    return df[~is_strongest], df[is_strongest]


def prepare_catalog(df: pd.DataFrame) -> pd.DataFrame:
    """Filtra por fecha y región, asigna categorías y compone la fecha del evento."""
    n_total = len(df)
    df = coerce_numeric(df, REQUIRED_NUMERIC_COLUMNS)
    n_dropped = n_total - len(df)
    if n_dropped:
        logger.warning(f"Descartadas {n_dropped} filas con valores no numéricos")

    df = filter_by_date(df)
    logger.info(f"{len(df)} eventos desde {DATE_FILTER}")

    df = filter_by_region(df)
    logger.info(f"{len(df)} eventos dentro de la región {BOUNDING_BOX}")

    df = assign_magnitude_category(df)
    df = add_event_time(df)
    return df
