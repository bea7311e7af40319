"""Unit tests for the pricing API endpoints and error mapping."""

import pytest
from fastapi.testclient import TestClient

from stableswap.api.endpoints import get_well_function
from stableswap.api.main import app
from stableswap.lut import Stable2LUT1
from stableswap.well_function import Stable2

E = "1000000000000000000"


@pytest.fixture
def client():
    """Create a test client for the API."""
    yield TestClient(app)
    app.dependency_overrides.clear()


class TwoAmpTable(Stable2LUT1):
    """The shipped rows reported under a different amplification coefficient."""

    A_PARAMETER = 2


class TestHealth:
    """Tests for the health check."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "aParameter": 1}

    def test_health_reports_served_well_function(self, client):
        """An overridden well function is the one whose a is reported."""
        well_function = Stable2.from_lookup_table(TwoAmpTable())
        app.dependency_overrides[get_well_function] = lambda: well_function

        response = client.get("/health")
        assert response.json() == {"status": "ok", "aParameter": 2}


class TestPricingEndpoints:
    """Happy-path tests; amounts travel as decimal strings."""

    def test_lp_token_supply(self, client):
        response = client.post("/lp-token-supply", json={"reserves": [E, "1061208000000000000"]})
        assert response.status_code == 200
        assert response.json() == {"lpTokenSupply": "2060904913372200742"}

    def test_lp_token_supply_mixed_decimals(self, client):
        """Decimals default to [18, 18] and can be overridden per token."""
        body = {"reserves": ["1000000000000", "1050000000000000000000000"], "decimals": [6, 18]}
        response = client.post("/lp-token-supply", json=body)
        assert response.status_code == 200
        assert response.json()["lpTokenSupply"] == "2049796677408189462543189"

    def test_int_amounts_accepted(self, client):
        response = client.post("/lp-token-supply", json={"reserves": [10**18, 10**18]})
        assert response.json() == {"lpTokenSupply": "2000000000000000000"}

    def test_reserve(self, client):
        body = {"reserves": [E, "0"], "j": 1, "lpTokenSupply": "2060904913372200742"}
        response = client.post("/reserve", json=body)
        assert response.status_code == 200
        assert response.json() == {"reserve": "1061208000000000000"}

    def test_rate(self, client):
        body = {"reserves": [E, "1061208000000000000"], "i": 0, "j": 1}
        response = client.post("/rate", json=body)
        assert response.status_code == 200
        assert response.json() == {"rate": "980380"}

    def test_reserve_at_ratio_swap(self, client):
        body = {"reserves": [E, E], "j": 1, "ratios": ["5", "7"]}
        response = client.post("/reserve-at-ratio/swap", json=body)
        assert response.status_code == 200
        assert response.json() == {"reserve": "1464968920812123759"}

    def test_reserve_at_ratio_liquidity(self, client):
        body = {"reserves": [E, E], "j": 1, "ratios": ["5", "7"]}
        response = client.post("/reserve-at-ratio/liquidity", json=body)
        assert response.status_code == 200
        assert response.json() == {"reserve": "2433565212157675068"}


class TestErrorMapping:
    """Well function errors map to 400; malformed bodies to 422."""

    def test_wrong_reserve_count(self, client):
        response = client.post("/lp-token-supply", json={"reserves": [E, E, E]})
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidReservesLength"

    def test_decimals_above_18(self, client):
        response = client.post("/lp-token-supply", json={"reserves": [E, E], "decimals": [19, 18]})
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidTokenDecimals"

    def test_same_token_rate(self, client):
        response = client.post("/rate", json={"reserves": [E, E], "i": 0, "j": 0})
        assert response.status_code == 400
        assert response.json()["error"] == "ValueError"

    def test_one_sided_pool(self, client):
        """Checked arithmetic faults are reported, not turned into 500s."""
        response = client.post("/lp-token-supply", json={"reserves": ["0", E]})
        assert response.status_code == 400
        assert response.json()["error"] == "DivisionByZero"

    def test_result_above_uint256(self, client):
        body = {"reserves": [str(2**255), str(2**255)]}
        response = client.post("/lp-token-supply", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "Uint256Overflow"

    def test_error_body_documented(self, client):
        """Every pricing route advertises the 400 error body in its schema."""
        paths = client.get("/openapi.json").json()["paths"]
        routes = ["/lp-token-supply", "/reserve", "/rate", "/reserve-at-ratio/swap", "/reserve-at-ratio/liquidity"]
        for path in routes:
            schema = paths[path]["post"]["responses"]["400"]["content"]["application/json"]["schema"]
            assert schema["$ref"].endswith("/ErrorResponse")

    def test_convergence_failure(self, client):
        """A table that cannot steer the search surfaces as ConvergenceFailure."""
        rows = [(1, 10**18, 10**18 + 1), (10**9, 10**18, 10**18)]
        stalled = Stable2.from_lookup_table(Stable2LUT1(swap_breakpoints=rows))
        app.dependency_overrides[get_well_function] = lambda: stalled

        body = {"reserves": [E, E], "j": 1, "ratios": ["5", "7"]}
        response = client.post("/reserve-at-ratio/swap", json=body)
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "ConvergenceFailure"
        assert "did not converge" in data["detail"]

    @pytest.mark.parametrize(
        "body",
        [
            {"reserves": ["-1", E]},
            {"reserves": ["1.5", E]},
            {"reserves": [str(2**256), E]},
            {"reserves": [E, E], "decimals": [18]},
            {},
        ],
    )
    def test_invalid_schema(self, client, body):
        response = client.post("/lp-token-supply", json=body)
        assert response.status_code == 422

    def test_missing_index(self, client):
        response = client.post("/reserve-at-ratio/swap", json={"reserves": [E, E], "ratios": ["1", "1"]})
        assert response.status_code == 422
