import numpy as np
import pandas as pd
import cartopy.crs as ccrs
import matplotlib.pyplot as plt
import cartopy.feature as cfeature

from matplotlib.lines import Line2D

from modules.plotter.base_plotter import BasePlotter
from modules.seismic_analysis.event_filter import split_strongest
from modules.seismic_analysis.magnitude_category import (
    CATEGORY_LABELS,
    category_color,
)
from libs.config.config_plot import PlotConfig, PlotType, LegendPosition
from libs.config.config_variables import (
    MAP_EXTENT,
    MAP_FIGSIZE,
    MAP_TITLE,
    MAGNITUDE_COLORS,
    MARKER_SIZE_RANGE,
    SIZE_LEGEND_BREAKS,
    SIZE_LEGEND_LABELS,
    POINT_ALPHA,
    STRONGEST_ALPHA,
    BASEMAP_FILL,
    BASEMAP_EDGE,
    BASEMAP_SCALE,
)


def size_legend_entries(limits, breaks=SIZE_LEGEND_BREAKS, labels=SIZE_LEGEND_LABELS):
    """
    Entradas (magnitud, etiqueta) de la leyenda de tamaños.

    Solo se muestran los cortes dentro de `limits`; si ninguno cae en el rango
    se usa una única entrada en la magnitud máxima.
    """
    lower, upper = limits
    entries = [(b, label) for b, label in zip(breaks, labels) if lower <= b <= upper]
    if not entries:
        entries = [(upper, f"{upper:.1f}")]
    return entries


def magnitude_to_marker_size(magnitudes, limits, size_range=MARKER_SIZE_RANGE):
    """
    Diámetro del marcador (pt) proporcional en área a la magnitud.

    La magnitud se reescala a [0, 1] dentro de `limits` y el diámetro crece con
    su raíz cuadrada. Si los límites coinciden se usa el punto medio.
    """
    values = np.asarray(magnitudes, dtype=float)
    lower, upper = limits
    if upper > lower:
        frac = np.clip((values - lower) / (upper - lower), 0.0, 1.0)
    else:
        frac = np.full_like(values, 0.5)
    min_size, max_size = size_range
    return min_size + (max_size - min_size) * np.sqrt(frac)


class EarthquakeMap(BasePlotter):
    def __init__(
        self,
        extent: list = MAP_EXTENT,
        figsize: tuple = MAP_FIGSIZE,
        **kwargs,
    ):
        """
        Inicializa el mapa de eventos.

        Args:
            extent (list): Límites del mapa [lon_min, lon_max, lat_min, lat_max].
        """
        self.extent = extent
        self.size_limits = None
        self.draw_order = []

        super().__init__(figsize=figsize, **kwargs)

    def _initialize_plot(self, **kwargs):
        """Inicializa la figura con proyección cartográfica."""
        if self.ax is None:
            self.fig, self.ax = plt.subplots(
                figsize=self.figsize, subplot_kw={"projection": ccrs.PlateCarree()}
            )
        self.ax.set_extent(self.extent, crs=ccrs.PlateCarree())
        self.plot_config = PlotConfig(plot_type=PlotType.MAP, **kwargs)

    def add_base_map(
        self,
        scale: str = BASEMAP_SCALE,
        facecolor: str = BASEMAP_FILL,
        edgecolor: str = BASEMAP_EDGE,
        linewidth: float = 0.5,
    ):
        """Añade los polígonos de países de Natural Earth como fondo."""
        countries = cfeature.NaturalEarthFeature(
            category="cultural", name="admin_0_countries", scale=scale
        )
        self.ax.add_feature(
            countries,
            facecolor=facecolor,
            edgecolor=edgecolor,
            linewidth=linewidth,
            zorder=0,
        )

    def add_gridlines(self, color: str = "gray", alpha: float = 0.4, **kwargs):
        """Añade líneas de cuadrícula con etiquetas de latitud y longitud."""
        gridlines = self.ax.gridlines(
            draw_labels=True, color=color, alpha=alpha, linewidth=0.3, **kwargs
        )
        gridlines.top_labels = False
        gridlines.right_labels = False

    def _scatter_events(self, df: pd.DataFrame, alpha: float, zorder: int):
        if df.empty:
            return
        sizes = magnitude_to_marker_size(df["Magnitude"], self.size_limits)
        self.ax.scatter(
            df["Longitude"],
            df["Latitude"],
            s=sizes**2,
            facecolor=[category_color(c) for c in df["Magnitude_Category"]],
            edgecolor="black",
            linewidths=0.5,
            marker="o",
            alpha=alpha,
            zorder=zorder,
            transform=ccrs.PlateCarree(),
        )
        self.draw_order.extend(df.index)

    def add_events(self, df: pd.DataFrame):
        """
        Dibuja los eventos en dos pasadas: primero los ordinarios y al final
        los de magnitud máxima, opacos y por encima del resto.
        """
        self.size_limits = (df["Magnitude"].min(), df["Magnitude"].max())
        ordinary, strongest = split_strongest(df)
        self._scatter_events(ordinary, alpha=POINT_ALPHA, zorder=2)
        self._scatter_events(strongest, alpha=STRONGEST_ALPHA, zorder=3)

    def add_legends(self):
        """Añade la leyenda de tamaños y la de categorías a la derecha del mapa."""
        limits = self.size_limits or (min(SIZE_LEGEND_BREAKS), max(SIZE_LEGEND_BREAKS))
        entries = size_legend_entries(limits)
        sizes = magnitude_to_marker_size([m for m, _ in entries], limits)
        size_handles = [
            Line2D(
                [],
                [],
                linestyle="",
                marker="o",
                markersize=size,
                markerfacecolor="white",
                markeredgecolor="black",
                label=label,
            )
            for size, (_, label) in zip(sizes, entries)
        ]
        size_legend = self.ax.legend(
            handles=size_handles,
            title="Magnitude",
            labelspacing=1.2,
            **PlotConfig.legend_config(LegendPosition.OUTSIDE_RIGHT_TOP),
        )
        self.ax.add_artist(size_legend)

        category_handles = [
            Line2D(
                [],
                [],
                linestyle="",
                marker="o",
                markersize=12,
                markerfacecolor=MAGNITUDE_COLORS[label],
                markeredgecolor="black",
                label=label,
            )
            for label in CATEGORY_LABELS
        ]
        self.ax.legend(
            handles=category_handles,
            title="Magnitude Category",
            labelspacing=1.0,
            **PlotConfig.legend_config(LegendPosition.OUTSIDE_RIGHT_BOTTOM),
        )

    def draw(self, df: pd.DataFrame, title: str = MAP_TITLE):
        """Compone el mapa completo."""
        self.add_base_map()
        self.add_events(df)
        self.add_gridlines()
        self.add_legends()
        self.set_title(title)
        return self
