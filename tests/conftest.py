import pytest
import matplotlib

matplotlib.use("Agg")

HEADER = "Year Mo Dy Hr Mi Sec Lat Lon Depth Mag RMS dx dy dz Np Na Gap"


def make_catalog(*rows):
    return "\n".join([HEADER, *rows]) + "\n"


@pytest.fixture
def catalog_text():
    return make_catalog(
        "2025 2 3 14 30 0 36.40 25.43 5.0 3.7 0.2 0 0 0 5 5 10",
        "2025 2 4 01 12 5 36.55 25.70 9.1 4.9 0.3 1.1 1.2 2.0 12 10 80",
        "2025 2 5 08 00 30 36.60 25.60 7.0 1.4 0.1 0.5 0.5 1.0 6 4 120",
        "2025 2 6 22 45 10 36.45 25.50 11.2 2.6 0.2 0.8 0.7 1.4 8 8 95",
        "2025 2 7 11 05 59 36.70 25.80 4.3 0.8 0.2 0.9 0.9 1.8 4 3 150",
        "2025 2 8 16 20 0 36.50 25.40 8.8 3.1 0.2 0.6 0.6 1.1 9 9 70",
        "2025 1 31 10 0 0 36.40 25.43 5.0 4.0 0.2 0 0 0 5 5 10",
        "2025 2 9 10 0 0 38.00 25.43 5.0 4.0 0.2 0 0 0 5 5 10",
    )
