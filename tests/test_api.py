"""API 测试"""

import pytest
from fastapi.testclient import TestClient
from chartsvc.api.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_health(client):
    response = client.get("/health")
    assert response.json() == {"status": "healthy"}


def test_scatter(client):
    """2D 图表请求"""
    response = client.get("/chart/scatter", params={
        "chtt": "Power Curve",
        "chs": "200x150",
        "chd": "t:0,1|2,3|4,5|6,7",
        "chdl": "A|B",
    })
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Power Curve"
    assert body["width"] == 200
    assert body["height"] == 150
    assert body["legend"] is True
    assert [s["label"] for s in body["series"]] == ["A", "B"]
    assert body["series"][1]["xs"] == [4.0, 5.0]
    assert body["line_styles"] == [{"width": 1.0, "dash_length": 1.0, "space_length": 1.0}]


def test_scatter3d(client):
    """3D 图表请求"""
    response = client.get("/chart/scatter3d", params={"chd": "t:1,2|3,4|5,6"})
    assert response.status_code == 200
    series = response.json()["series"]
    assert len(series) == 1
    assert series[0]["zs"] == [5.0, 6.0]


def test_first_value_wins(client):
    """重复参数只取第一个值"""
    response = client.get("/chart/scatter", params=[("chtt", "first"), ("chtt", "second")])
    assert response.json()["title"] == "first"


def test_malformed_data_returns_400(client):
    response = client.get("/chart/scatter", params={"chd": "t:1,2,a|3,4"})
    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "MALFORMED_DATA"
    assert body["message"] == "invalid data specification (chd)"
    assert body["detail"]["char"] == "a"


def test_malformed_size_returns_400(client):
    response = client.get("/chart/scatter", params={"chs": "widexhigh"})
    assert response.status_code == 400
    assert response.json()["code"] == "MALFORMED_SIZE"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
