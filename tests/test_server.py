# tests/test_server.py
import xml.etree.ElementTree as ET
from unittest.mock import patch

import pytest

from config import ReportConfig
from records import FlightRecord
from server import create_app, run_server

FLIGHTS = (
    FlightRecord(air_time=120, distance=500, fl_date="2023-01-01"),
    FlightRecord(air_time=30, distance=100, fl_date="2023-01-02"),
)


@pytest.fixture
def client():
    return create_app(FLIGHTS).test_client()


def test_filters_and_shows_date(client):
    response = client.get("/?airtime_min=60&date=true")
    assert response.status_code == 200
    assert response.headers["Content-Type"] == "application/xml; charset=utf-8"

    flights = ET.fromstring(response.get_data(as_text=True)).findall("flight")
    assert len(flights) == 1
    assert flights[0].findtext("date") == "2023-01-01"
    assert flights[0].findtext("air_time") == "120"
    assert flights[0].findtext("distance") == "500"


def test_no_params_returns_all_without_date(client):
    root = ET.fromstring(client.get("/").get_data(as_text=True))
    flights = root.findall("flight")
    assert len(flights) == 2
    assert flights[0].find("date") is None


@pytest.mark.parametrize("query", ["?date=True", "?date=1", "?date="])
def test_date_requires_literal_true(client, query):
    root = ET.fromstring(client.get("/" + query).get_data(as_text=True))
    assert root.find("flight/date") is None


@pytest.mark.parametrize("value", ["", "abc"])
def test_unparseable_airtime_min_means_no_filter(client, value):
    root = ET.fromstring(client.get(f"/?airtime_min={value}").get_data(as_text=True))
    assert len(root.findall("flight")) == 2


def test_empty_record_set():
    response = create_app(()).test_client().get("/")
    assert response.status_code == 200
    root = ET.fromstring(response.get_data(as_text=True))
    assert root.tag == "flights"
    assert root.findall("flight") == []


def test_results_capped_at_1000():
    records = tuple(FlightRecord(air_time=i + 1, distance=i) for i in range(1500))
    response = create_app(records).test_client().get("/")
    flights = ET.fromstring(response.get_data(as_text=True)).findall("flight")
    assert len(flights) == 1000
    assert flights[-1].findtext("air_time") == "1000"


def test_handler_error_returns_500_and_keeps_serving(client):
    with patch("server.render_xml", side_effect=RuntimeError("boom")):
        response = client.get("/")
    assert response.status_code == 500
    assert response.headers["Content-Type"] == "text/plain; charset=utf-8"
    assert response.get_data(as_text=True) == "Internal Server Error"

    assert client.get("/").status_code == 200


def test_run_server_prints_banner_and_binds(capsys):
    config = ReportConfig(input_path="flights.json", host="127.0.0.1", port=8080)
    with patch("flask.Flask.run") as mock_run:
        run_server(config, FLIGHTS)

    mock_run.assert_called_once_with(host="127.0.0.1", port=8080)
    out = capsys.readouterr().out
    assert "Server running at http://127.0.0.1:8080/" in out
    assert "Using file: flights.json" in out


def test_airtime_min_with_trailing_text_still_filters(client):
    root = ET.fromstring(client.get("/?airtime_min=60abc").get_data(as_text=True))
    flights = root.findall("flight")
    assert len(flights) == 1
    assert flights[0].findtext("air_time") == "120"
