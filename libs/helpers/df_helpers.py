import numpy as np
import pandas as pd

from typing import List


def normalize_row(tokens: List[str], n_fields: int) -> List:
    """Ajusta una fila a `n_fields` campos: rellena con NaN o trunca el exceso."""
    if len(tokens) >= n_fields:
        return list(tokens[:n_fields])
    return list(tokens) + [np.nan] * (n_fields - len(tokens))


def rows_to_numeric_df(rows: List[List], columns: List[str]) -> pd.DataFrame:
    """Construye un DataFrame numérico; los valores no numéricos quedan como NaN.

    "inf" y "-inf" también se tratan como no numéricos.
    """
    df = pd.DataFrame(rows, columns=columns, dtype=object)
    for col in columns:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    return df.astype("float64").replace([np.inf, -np.inf], np.nan)


def coerce_numeric(df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
    """Convierte columnas a numérico y descarta filas con NaN o infinitos en ellas."""
    df = df.copy()
    for col in columns:
        df[col] = pd.to_numeric(df[col], errors="coerce").replace([np.inf, -np.inf], np.nan)
    return df.dropna(subset=columns)


def filter_between(df: pd.DataFrame, column: str, lower, upper) -> pd.DataFrame:
    """Filtra filas con `lower <= column <= upper` (límites incluidos)."""
    return df[(df[column] >= lower) & (df[column] <= upper)]
