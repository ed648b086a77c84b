import os
import sys

# Agregar el path para importar módulos
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../")))

import pytest
import requests

from libs.config.config_errors import FetchError
from libs.config.config_variables import CATALOG_URL, TIMEOUT_API_REQUEST
from modules.catalog_scraper.api_extractor import NOAExtractor


@pytest.fixture
def mock_get(mocker):
    return mocker.patch("modules.catalog_scraper.api_extractor.requests.get")


class TestNOAExtractor:
    def test_fetch_text_returns_utf8_body(self, mock_get, mocker, catalog_text):
        response = mocker.MagicMock()
        response.text = catalog_text
        mock_get.return_value = response

        text = NOAExtractor.fetch_text()

        assert text == catalog_text
        assert response.encoding == "utf-8"
        response.raise_for_status.assert_called_once()
        mock_get.assert_called_once_with(CATALOG_URL, timeout=TIMEOUT_API_REQUEST)

    def test_http_error_status_raises_fetch_error(self, mock_get, mocker):
        response = mocker.MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
        mock_get.return_value = response

        with pytest.raises(FetchError) as excinfo:
            NOAExtractor.fetch_text()

        assert excinfo.value.stage == "fetch"
        assert isinstance(excinfo.value.__cause__, requests.HTTPError)

    def test_connection_error_raises_fetch_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("Name or service not known")

        with pytest.raises(FetchError):
            NOAExtractor.fetch_text()

    def test_timeout_raises_fetch_error(self, mock_get):
        mock_get.side_effect = requests.Timeout("read timed out")

        with pytest.raises(FetchError):
            NOAExtractor.fetch_text(url="http://example.invalid/cat", timeout=1)

        mock_get.assert_called_once_with("http://example.invalid/cat", timeout=1)
