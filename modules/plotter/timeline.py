import numpy as np
import pandas as pd
import matplotlib.dates as mdates
import matplotlib.pyplot as plt

from statsmodels.nonparametric.smoothers_lowess import lowess

from modules.plotter.base_plotter import BasePlotter
from modules.seismic_analysis.magnitude_category import category_color
from libs.config.config_plot import PlotConfig, PlotType
from libs.config.config_variables import (
    TIMELINE_FIGSIZE,
    TIMELINE_TITLE,
    TIMELINE_MARKER_SIZE,
    POINT_ALPHA,
    LOWESS_FRACTION,
    CONFIDENCE_Z,
    MIN_RECORDS_FOR_TREND,
)

from libs.config.config_logger import get_logger

logger = get_logger()


def lowess_band(x, y, frac: float = LOWESS_FRACTION, z: float = CONFIDENCE_Z):
    """
    Ajuste LOWESS con banda de confianza aproximada.

    La varianza local se estima suavizando los residuos al cuadrado con la misma
    ventana; el error estándar usa `frac * n` como tamaño efectivo de la ventana.

    Returns:
        tuple: (x ordenado, ajuste, límite inferior, límite superior)
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    order = np.argsort(x, kind="stable")
    xs, ys = x[order], y[order]

    fit = lowess(ys, xs, frac=frac, it=0, return_sorted=False)
    variance = lowess((ys - fit) ** 2, xs, frac=frac, it=0, return_sorted=False)
    variance = np.clip(variance, 0.0, None)

    n_local = max(frac * len(xs), 1.0)
    half_width = z * np.sqrt(variance / n_local)
    return xs, fit, fit - half_width, fit + half_width


class EarthquakeTimeline(BasePlotter):
    def __init__(self, figsize: tuple = TIMELINE_FIGSIZE, **kwargs):
        """Serie temporal de magnitudes coloreada por categoría."""
        self.trend = None
        super().__init__(figsize=figsize, **kwargs)

    def _initialize_plot(self, **kwargs):
        if self.ax is None:
            self.fig, self.ax = plt.subplots(figsize=self.figsize)
        kwargs.setdefault("rotate_xticks", 45)
        self.plot_config = PlotConfig(plot_type=PlotType.TIMESERIES, **kwargs)

    def add_events(self, df: pd.DataFrame):
        self.ax.scatter(
            df["DateTime"],
            df["Magnitude"],
            s=TIMELINE_MARKER_SIZE**2,
            c=[category_color(c) for c in df["Magnitude_Category"]],
            alpha=POINT_ALPHA,
            edgecolors="none",
            zorder=2,
        )

    def add_trend(self, df: pd.DataFrame, color: str = "black"):
        """Añade la curva LOWESS y su banda de confianza."""
        x = mdates.date2num(df["DateTime"].to_numpy())
        if len(df) < MIN_RECORDS_FOR_TREND or np.ptp(x) == 0:
            logger.warning(
                f"Tendencia omitida: se requieren al menos {MIN_RECORDS_FOR_TREND} "
                f"eventos en fechas distintas ({len(df)} disponibles)"
            )
            return

        xs, fit, lower, upper = lowess_band(x, df["Magnitude"].to_numpy())
        self.ax.fill_between(xs, lower, upper, color="gray", alpha=0.3, zorder=3)
        self.ax.plot(xs, fit, color=color, linewidth=1.5, zorder=4)
        self.trend = (xs, fit, lower, upper)

    def draw(self, df: pd.DataFrame, title: str = TIMELINE_TITLE):
        """Compone el gráfico temporal. Sin leyenda: los colores se explican en el mapa."""
        self.add_events(df)
        self.add_trend(df)
        self.ax.set_xlabel("Date & Time")
        self.ax.set_ylabel("Magnitude")
        self.ax.grid(True)
        self.set_title(title)
        return self
