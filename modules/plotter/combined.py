import pandas as pd
import cartopy.crs as ccrs
import matplotlib.pyplot as plt

from modules.plotter.map import EarthquakeMap
from modules.plotter.base_plotter import BasePlotter
from modules.plotter.timeline import EarthquakeTimeline
from libs.config.config_variables import COMBINED_FIGSIZE


class CombinedPlot(BasePlotter):
    """Mapa (izquierda) y serie temporal (derecha) en una sola figura."""

    def __init__(self, figsize: tuple = COMBINED_FIGSIZE, **kwargs):
        self.map = None
        self.timeline = None
        super().__init__(figsize=figsize, **kwargs)

    def _initialize_plot(self, **kwargs):
        self.fig = plt.figure(figsize=self.figsize)
        ax_map = self.fig.add_subplot(1, 2, 1, projection=ccrs.PlateCarree())
        ax_timeline = self.fig.add_subplot(1, 2, 2)

        self.map = EarthquakeMap(ax=ax_map)
        self.timeline = EarthquakeTimeline(ax=ax_timeline, **kwargs)
        self.ax = ax_map

    def apply_config(self):
        self.map.apply_config()
        self.timeline.apply_config()

    def draw(self, df: pd.DataFrame):
        self.map.draw(df)
        self.timeline.draw(df)
        return self
