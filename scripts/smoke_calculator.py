"""Smoke script for the calculator API.

Demonstrates:
 1. Comparison against the built-in bank table.
 2. Saving an edited table and recomputing against it.
 3. Resetting back to defaults.

NOTE: This is a lightweight diagnostic and not a formal test.
"""

from fxcalc.main import create_app
from fastapi.testclient import TestClient
from fxcalc.core.config import Settings
import tempfile
import json


def run():
    with tempfile.TemporaryDirectory() as d:
        settings = Settings(data_dir=d)
        app = create_app(settings_override=settings)
        client = TestClient(app)

        results = {}
        default_calc = client.get("/calculate").json()
        results["default_best"] = default_calc["best_bank"]
        results["default_worst"] = default_calc["worst_bank"]
        results["saved"] = client.put(
            "/banks",
            json=[
                {"name": "A", "usd_to_twd_rate": 31.6, "aud_to_twd_rate": 21.9, "in_fee_twd": 0},
                {"name": "B", "usd_to_twd_rate": 31.6, "aud_to_twd_rate": 21.9, "in_fee_twd": 0},
            ],
        ).json()
        # A and B tie; A must win both flags
        results["tie_calc"] = client.get("/calculate", params={"aud_amount": 500}).json()
        results["reset"] = client.delete("/banks").json()["is_default"]
        print(json.dumps(results, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    run()
