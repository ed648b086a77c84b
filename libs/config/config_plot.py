import matplotlib.pyplot as plt

from matplotlib.axes import Axes
from typing import Optional, List

from libs.config.config_variables import DEFAULT_FONT, DATE_FORMAT

from libs.config.config_logger import get_logger

logger = get_logger()


class PlotType:
    """Clase tipo enum para tipos de gráficos."""

    TIMESERIES = "timeseries"
    MAP = "map"


class LegendPosition:
    """Leyendas apiladas fuera del eje, a su derecha."""

    OUTSIDE_RIGHT_TOP = "outside_right_top"
    OUTSIDE_RIGHT_BOTTOM = "outside_right_bottom"


# Tamaños base en puntos; se multiplican por `fmt_scale`
_SCALED_SIZES = {
    "font.size": 8,
    "figure.titlesize": 12,
    "axes.titlesize": 12,
    "axes.labelsize": 10,
    "axes.titlepad": 6,
    "xtick.labelsize": 9,
    "ytick.labelsize": 9,
    "legend.fontsize": 8,
}

_BASE_STYLE = {
    "backend": "Agg",
    "font.family": DEFAULT_FONT,
    "figure.constrained_layout.use": True,
    "figure.facecolor": "white",
    "figure.titleweight": "bold",
    "axes.edgecolor": "black",
    "axes.titleweight": "bold",
    "legend.facecolor": "white",
    "legend.framealpha": 0.8,
    "legend.edgecolor": "None",
    "legend.fancybox": False,
    "grid.alpha": 0.4,
    "grid.color": "gray",
    "grid.linestyle": "-",
}

_STYLE_BY_TYPE = {
    PlotType.TIMESERIES: {
        "axes.grid": True,
        "axes.xmargin": 0.02,
        "xtick.minor.visible": False,
        "ytick.minor.visible": True,
        "xtick.direction": "out",
        "ytick.direction": "out",
        "date.autoformatter.day": DATE_FORMAT,
        "date.autoformatter.month": DATE_FORMAT,
        "date.autoformatter.year": DATE_FORMAT,
    },
    PlotType.MAP: {
        "axes.grid": False,
        "axes.xmargin": 0,
        "axes.ymargin": 0,
        "xtick.minor.visible": False,
        "ytick.minor.visible": False,
    },
}

_OUTSIDE_LEGENDS = {
    LegendPosition.OUTSIDE_RIGHT_TOP: {"loc": "upper left", "bbox_to_anchor": (1.02, 1.0)},
    LegendPosition.OUTSIDE_RIGHT_BOTTOM: {"loc": "lower left", "bbox_to_anchor": (1.02, 0.0)},
}


class PlotConfig:
    """
    Estilo global de matplotlib por tipo de gráfico y ajuste de ejes antes de guardar.

    Uso:
        config = PlotConfig(plot_type=PlotType.TIMESERIES, dates=fechas, rotate_xticks=45)
        fig, ax = plt.subplots()
        ax.scatter(fechas, magnitudes)
        config.apply(ax)
        fig.savefig("serie.png")
    """

    def __init__(
        self,
        plot_type: str = PlotType.TIMESERIES,
        dates: Optional[List] = None,
        n_xticks: int = 6,
        ymargin: float = 0.10,
        fmt_scale: float = 1.0,
        rotate_xticks: Optional[float] = None,
    ):
        """
        Parámetros
        ----------
        plot_type : str
            PlotType.TIMESERIES o PlotType.MAP
        dates : list, optional
            Fechas ordenadas de la serie; sin ellas se dejan los ticks automáticos
        n_xticks : int
            Máximo de ticks del eje x en series temporales
        ymargin : float
            Margen vertical (los mapas usan 0)
        fmt_scale : float
            Factor de escala para fuentes y grilla
        rotate_xticks : float, optional
            Ángulo de las etiquetas del eje x
        """
        self.plot_type = plot_type
        self.dates = dates
        self.n_xticks = n_xticks
        self.ymargin = ymargin
        self.fmt_scale = fmt_scale
        self.rotate_xticks = rotate_xticks

        if plot_type == PlotType.TIMESERIES and dates is None:
            logger.warning(
                "Serie temporal sin 'dates': se usarán los ticks por defecto de matplotlib."
            )

        plt.rcParams.update(self.style())

    def style(self) -> dict:
        """rcParams resultantes para el tipo de gráfico y la escala."""
        params = dict(_BASE_STYLE)
        params.update(
            {key: int(size * self.fmt_scale) for key, size in _SCALED_SIZES.items()}
        )
        params["grid.linewidth"] = 0.3 * self.fmt_scale
        params["axes.ymargin"] = self.ymargin
        params.update(_STYLE_BY_TYPE[self.plot_type])
        return params

    @staticmethod
    def legend_config(position: str) -> dict:
        """Argumentos de `ax.legend`; una posición estándar se pasa tal cual como `loc`."""
        return dict(_OUTSIDE_LEGENDS.get(position, {"loc": position}))

    def apply(self, ax: Axes):
        """Fija los ticks de fecha y la rotación de etiquetas del eje."""
        if self.plot_type == PlotType.TIMESERIES and self.dates:
            ax.set_xticks(self.pick_ticks(self.dates, self.n_xticks))

        if self.rotate_xticks is not None:
            ax.tick_params(axis="x", rotation=self.rotate_xticks)

    @staticmethod
    def pick_ticks(dates: List, n_ticks: int) -> List:
        """
        Elige hasta `n_ticks` fechas repartidas uniformemente.
        La primera y la última siempre se incluyen.
        """
        if len(dates) <= n_ticks:
            return list(dates)
        if n_ticks < 2:
            return [dates[0], dates[-1]]

        step = (len(dates) - 1) / (n_ticks - 1)
        indices = sorted({int(round(i * step)) for i in range(n_ticks)})
        return [dates[i] for i in indices]
