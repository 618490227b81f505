import logging

import pytest
from fastapi.testclient import TestClient

from physcalc.api.app import app
from physcalc.version import __version__

pytestmark = pytest.mark.usefixtures("clean_settings")

client = TestClient(app)


def test_evaluate_endpoint_returns_quantity():
    response = client.post("/v1/evaluate", json={"text": "15 N m * 12 kg * 92"})
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["magnitude"] == 16560.0
    assert data["dimension"]["mass"] == 2
    assert data["unit"] == "kg^2 m^2 s^-2"
    assert data["kind"] is None
    assert data["display"] == "16560 kg^2 m^2 s^-2"


def test_evaluate_endpoint_names_kind():
    data = client.post("/v1/evaluate", json={"text": "3 kg m s^-2"}).json()
    assert data["unit"] == "N"
    assert data["kind"] == "Force"


def test_evaluate_endpoint_reports_errors():
    response = client.post("/v1/evaluate", json={"text": "(3 m + 4 kg)"})
    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "adding-different-units"

    response = client.post("/v1/evaluate", json={"text": "3 m @"})
    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "parse-error"


def test_evaluate_endpoint_handles_infinite_result():
    data = client.post("/v1/evaluate", json={"text": "1 m / 0"}).json()
    assert data["magnitude"] == "inf"


def test_batch_endpoint_keeps_order():
    response = client.post("/v1/evaluate/batch", json={"texts": ["3 s", "5 foo", "(23 + 58)"]})
    assert response.status_code == 200
    results = response.json()["results"]
    assert [r["ok"] for r in results] == [True, False, True]
    assert results[1]["error"]["code"] == "unknown-unit"
    assert results[2]["display"] == "81 dimensionless"


def test_units_endpoint_lists_table():
    units = client.get("/v1/units").json()["units"]
    by_symbol = {unit["symbol"]: unit for unit in units}
    assert by_symbol["kat"]["dimension"]["amount"] == 1
    assert by_symbol["Pa"]["kind"] == "Pressure"
    assert len(units) == 22


def test_health():
    assert client.get("/health").json() == {"status": "ok", "version": __version__}


def test_evaluate_endpoint_logs_outcome(caplog):
    with caplog.at_level(logging.INFO, logger="physcalc"):
        client.post("/v1/evaluate", json={"text": "3 m"})
        client.post("/v1/evaluate", json={"text": "3 m @"})
    payloads = [record.payload for record in caplog.records if hasattr(record, "payload")]
    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("evaluation.ok") for message in messages)
    assert any(message.startswith("evaluation.failed") for message in messages)
    assert len(payloads) == 2
    assert all(payload["evaluation_id"] for payload in payloads)
