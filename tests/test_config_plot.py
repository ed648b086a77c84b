import os
import sys

# Agregar el path para importar módulos
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../")))

import importlib

import numpy as np
import pytest
import matplotlib.pyplot as plt

from libs.config.config_variables import DEFAULT_FONT, DATE_FORMAT


@pytest.fixture
def fresh_config_plot(mocker):
    # Patch logger before importing the module under test
    mock_logger = mocker.MagicMock()
    mocker.patch("libs.config.config_logger.get_logger", return_value=mock_logger)

    # Force fresh import to pick up patched logger
    if "libs.config.config_plot" in sys.modules:
        del sys.modules["libs.config.config_plot"]
    cp = importlib.import_module("libs.config.config_plot")
    plt.close("all")

    yield cp, mock_logger

    plt.close("all")
    # Restore the module with the real logger for later tests
    del sys.modules["libs.config.config_plot"]
    importlib.import_module("libs.config.config_plot")


class TestPlotConfig:
    def test_global_rcparams_apply_defaults_and_scaling(self, fresh_config_plot):
        cp, _ = fresh_config_plot

        scale = 2.0
        cp.PlotConfig(plot_type=cp.PlotType.MAP, fmt_scale=scale)

        assert plt.rcParams["backend"].lower() == "agg"

        ff = plt.rcParams["font.family"]
        if isinstance(ff, (list, tuple)):
            assert DEFAULT_FONT in ff
        else:
            assert ff == DEFAULT_FONT

        assert plt.rcParams["font.size"] == int(8 * scale)
        assert plt.rcParams["axes.titlesize"] == int(12 * scale)
        assert plt.rcParams["axes.labelsize"] == int(10 * scale)
        assert plt.rcParams["grid.linewidth"] == pytest.approx(0.3 * scale)

    def test_map_disables_grid_and_margins(self, fresh_config_plot):
        cp, _ = fresh_config_plot

        cp.PlotConfig(plot_type=cp.PlotType.MAP)

        assert plt.rcParams["axes.grid"] is False
        assert plt.rcParams["axes.xmargin"] == 0
        assert plt.rcParams["axes.ymargin"] == 0

    def test_timeseries_ticks_include_first_and_last_date(self, fresh_config_plot):
        cp, _ = fresh_config_plot

        dates = list(range(10))
        fig, ax = plt.subplots()
        config = cp.PlotConfig(plot_type=cp.PlotType.TIMESERIES, dates=dates, n_xticks=4)
        config.apply(ax)

        assert plt.rcParams["date.autoformatter.day"] == DATE_FORMAT
        assert list(np.round(ax.get_xticks())) == [0, 3, 6, 9]

        plt.close(fig)

    def test_timeseries_with_few_dates_uses_all_of_them(self, fresh_config_plot):
        cp, _ = fresh_config_plot

        dates = [0, 1, 2]
        fig, ax = plt.subplots()
        cp.PlotConfig(plot_type=cp.PlotType.TIMESERIES, dates=dates, n_xticks=6).apply(ax)

        assert list(np.round(ax.get_xticks())) == dates

        plt.close(fig)

    def test_timeseries_with_no_dates_keeps_default_ticks(self, fresh_config_plot):
        cp, _ = fresh_config_plot

        fig, ax = plt.subplots()
        before = list(ax.get_xticks())
        cp.PlotConfig(plot_type=cp.PlotType.TIMESERIES, dates=[]).apply(ax)

        assert list(ax.get_xticks()) == before

        plt.close(fig)

    def test_timeseries_without_dates_logs_warning(self, fresh_config_plot):
        cp, mock_logger = fresh_config_plot

        cp.PlotConfig(plot_type=cp.PlotType.TIMESERIES, dates=None)

        assert mock_logger.warning.called

    def test_rotate_xticks(self, fresh_config_plot):
        cp, _ = fresh_config_plot

        dates = list(range(5))
        fig, ax = plt.subplots()
        ax.plot(dates, dates)
        cp.PlotConfig(
            plot_type=cp.PlotType.TIMESERIES, dates=dates, rotate_xticks=45
        ).apply(ax)

        assert all(int(lbl.get_rotation()) == 45 for lbl in ax.get_xticklabels())

        plt.close(fig)

    def test_legend_config_positions(self, fresh_config_plot):
        cp, _ = fresh_config_plot

        top = cp.PlotConfig.legend_config(cp.LegendPosition.OUTSIDE_RIGHT_TOP)
        bottom = cp.PlotConfig.legend_config(cp.LegendPosition.OUTSIDE_RIGHT_BOTTOM)

        assert top == {"loc": "upper left", "bbox_to_anchor": (1.02, 1.0)}
        assert bottom == {"loc": "lower left", "bbox_to_anchor": (1.02, 0.0)}
        assert cp.PlotConfig.legend_config("upper right") == {"loc": "upper right"}

    def test_legend_config_returns_a_copy(self, fresh_config_plot):
        cp, _ = fresh_config_plot

        config = cp.PlotConfig.legend_config(cp.LegendPosition.OUTSIDE_RIGHT_TOP)
        config["loc"] = "center"

        again = cp.PlotConfig.legend_config(cp.LegendPosition.OUTSIDE_RIGHT_TOP)
        assert again["loc"] == "upper left"

    @pytest.mark.parametrize(
        "n_dates, n_ticks, expected",
        [
            (10, 4, [0, 3, 6, 9]),
            (3, 6, [0, 1, 2]),
            (7, 1, [0, 6]),
            (11, 6, [0, 2, 4, 6, 8, 10]),
        ],
    )
    def test_pick_ticks_keeps_first_and_last(self, fresh_config_plot, n_dates, n_ticks, expected):
        cp, _ = fresh_config_plot

        assert cp.PlotConfig.pick_ticks(list(range(n_dates)), n_ticks) == expected

    def test_style_depends_on_plot_type(self, fresh_config_plot):
        cp, _ = fresh_config_plot

        series = cp.PlotConfig(plot_type=cp.PlotType.TIMESERIES, dates=[0, 1]).style()
        geo = cp.PlotConfig(plot_type=cp.PlotType.MAP).style()

        assert series["axes.grid"] is True
        assert geo["axes.grid"] is False
        assert series["axes.ymargin"] == pytest.approx(0.10)
        assert geo["axes.ymargin"] == 0
