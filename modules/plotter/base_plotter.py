import matplotlib.pyplot as plt

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from libs.config.config_plot import PlotConfig
from libs.config.config_variables import OUTPUT_DPI, OUTPUT_FORMATS
from libs.helpers.storage_helpers import validate_file

from libs.config.config_logger import get_logger

logger = get_logger()


class BasePlotter(ABC):
    """
    Clase base abstracta para los gráficos del catálogo.

    Proporciona funcionalidad común para crear, configurar y guardar gráficos.
    Si recibe `ax`, dibuja sobre ese eje de una figura existente (paneles del
    gráfico combinado) y no es dueño de la figura.
    """

    def __init__(
        self,
        figsize: tuple = (10, 10),
        ax=None,
        **kwargs,
    ):
        """
        Inicializa el plotter base.

        Args:
            figsize (tuple): Tamaño de la figura (ancho, alto).
            ax (Axes, optional): Eje existente donde dibujar.
            **kwargs: Argumentos adicionales para PlotConfig.
        """
        self.figsize = figsize
        self.fig = ax.figure if ax is not None else None
        self.ax = ax
        self._owns_figure = ax is None
        self.plot_config: Optional[PlotConfig] = None
        self._initialize_plot(**kwargs)

    @abstractmethod
    def _initialize_plot(self, **kwargs):
        """
        Inicializa la figura y los ejes.
        Debe ser implementado por las subclases.
        """
        pass

    def close(self):
        """Cierra la figura si fue creada por este plotter."""
        if self.fig is not None and self._owns_figure:
            plt.close(self.fig)

    def apply_config(self):
        if self.plot_config is not None and self.ax is not None:
            self.plot_config.apply(self.ax)

    def save_plot(
        self,
        filename: str | Path,
        formats: List[str] = OUTPUT_FORMATS,
        dpi: int = OUTPUT_DPI,
        **kwargs,
    ) -> List[Path]:
        """
        Guarda el gráfico en los formatos especificados.

        Args:
            filename (str | Path): Nombre base del archivo sin extensión.
            formats (List[str]): Lista de formatos para guardar ('png', 'svg', 'pdf', etc.).
            dpi (int): Resolución en puntos por pulgada.
            **kwargs: Argumentos adicionales para fig.savefig().

        Returns:
            List[Path]: Rutas escritas.
        """
        self.apply_config()
        kwargs.setdefault("bbox_inches", "tight")

        paths = []
        for fmt in formats:
            fpath = validate_file(f"{filename}.{fmt}", create_parents=True)
            self.fig.savefig(fpath, format=fmt, dpi=dpi, **kwargs)
            paths.append(fpath)
            logger.info(f"Gráfico guardado: {fpath}")

        return paths

    def set_title(self, title: str, **kwargs):
        """Establece el título del gráfico."""
        if self.ax is not None:
            self.ax.set_title(title, **kwargs)

    def __enter__(self):
        """Permite usar el plotter como context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Cierra la figura al salir del contexto."""
        self.close()
