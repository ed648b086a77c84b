import pandas as pd

from datetime import datetime

from typing import List, Optional

from dataclasses import dataclass


def _optional_float(value) -> Optional[float]:
    return None if pd.isnull(value) else float(value)


@dataclass(frozen=True)
class SeismicEvent:
    """Modelo de datos para eventos sísmicos"""

    event_time: datetime
    latitude: float
    longitude: float
    depth: float
    magnitude: float
    magnitude_category: Optional[str] = None
    rms: Optional[float] = None
    dx: Optional[float] = None
    dy: Optional[float] = None
    dz: Optional[float] = None
    np: Optional[float] = None
    na: Optional[float] = None
    gap: Optional[float] = None

    @classmethod
    def from_row(cls, row) -> "SeismicEvent":
        """Crea un evento desde una fila del catálogo ya filtrado."""
        category = row.get("Magnitude_Category")
        return cls(
            event_time=pd.Timestamp(row["DateTime"]).to_pydatetime(),
            latitude=float(row["Latitude"]),
            longitude=float(row["Longitude"]),
            depth=float(row["Depth"]),
            magnitude=float(row["Magnitude"]),
            magnitude_category=None if pd.isnull(category) else str(category),
            rms=_optional_float(row.get("RMS")),
            dx=_optional_float(row.get("dx")),
            dy=_optional_float(row.get("dy")),
            dz=_optional_float(row.get("dz")),
            np=_optional_float(row.get("Np")),
            na=_optional_float(row.get("Na")),
            gap=_optional_float(row.get("Gap")),
        )


def events_from_df(df: pd.DataFrame) -> List[SeismicEvent]:
    return [SeismicEvent.from_row(row) for _, row in df.iterrows()]
