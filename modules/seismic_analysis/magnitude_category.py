import pandas as pd

from typing import Optional

from libs.config.config_variables import (
    MAGNITUDE_BINS,
    MAGNITUDE_COLORS,
    UNCATEGORIZED_COLOR,
)

CATEGORY_LABELS = [label for _, _, label, _ in MAGNITUDE_BINS]


def categorize_magnitude(magnitude: float) -> Optional[str]:
    """
    Devuelve la categoría de una magnitud según los intervalos [inferior, superior).

    Retorna None si la magnitud es NaN o queda fuera de [1.0, 6.0).
    """
    if pd.isnull(magnitude):
        return None
    for lower, upper, label, _ in MAGNITUDE_BINS:
        if lower <= magnitude < upper:
            return label
    return None


def category_color(category: Optional[str]) -> str:
    """Color de relleno de una categoría; gris para eventos sin categoría."""
    if category is None or pd.isnull(category):
        return UNCATEGORIZED_COLOR
    return MAGNITUDE_COLORS[category]


def assign_magnitude_category(df: pd.DataFrame) -> pd.DataFrame:
    """Añade la columna ordenada `Magnitude_Category` al DataFrame."""
    df = df.copy()
    labels = [categorize_magnitude(m) for m in df["Magnitude"]]
    df["Magnitude_Category"] = pd.Categorical(
        labels, categories=CATEGORY_LABELS, ordered=True
    )
    return df
