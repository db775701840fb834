import unittest

from fastapi.testclient import TestClient

import main


def report_body(severity="critical", district="Ernakulam", area="Kakkanad", **overrides):
    body = {
        "symptoms": ["fever", "breathing"],
        "severity": severity,
        "duration": "1-2 weeks",
        "location": {"district": district, "area": area, "coordinates": {"lat": 10.0, "lng": 76.3}},
        "occupation": "construction",
    }
    body.update(overrides)
    return body


class ApiTests(unittest.TestCase):
    def setUp(self):
        main.STORE.clear()

    def wait_for_surveillance(self, client, district):
        client.portal.call(main.SURVEILLANCE_QUEUES[district].join)

    def test_healthz(self):
        with TestClient(main.app) as client:
            response = client.get("/healthz")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")

    def test_submit_report(self):
        with TestClient(main.app) as client:
            response = client.post("/reports/anonymous", json=report_body())

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data["success"])
        self.assertTrue(data["report_id"].startswith("ANM-"))
        self.assertEqual(data["risk_score"], 28)

        stored = main.STORE.reports[0]
        self.assertEqual(stored.district, "ernakulam")
        self.assertNotIn("coordinates", stored.model_dump())

    def test_missing_field_is_rejected(self):
        with TestClient(main.app) as client:
            response = client.post("/reports/anonymous", json=report_body(duration=None))

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Duration is required", "field": "duration"})
        self.assertEqual(main.STORE.reports, [])

    def test_hotspot_detection_and_resolution(self):
        with TestClient(main.app) as client:
            for _ in range(3):
                client.post("/reports/anonymous", json=report_body())
            self.wait_for_surveillance(client, "ernakulam")

            hotspots = client.get("/hotspots", params={"status": "active"}).json()["hotspots"]
            self.assertEqual(len(hotspots), 1)
            self.assertEqual(hotspots[0]["alert_level"], "critical")
            self.assertEqual(hotspots[0]["total_reports"], 3)

            response = client.post("/hotspots/ernakulam/Kakkanad/resolve")
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.json()["hotspot"]["status"], "resolved")

            response = client.post("/hotspots/kollam/Chavara/resolve")
            self.assertEqual(response.status_code, 404)

    def test_statistics(self):
        with TestClient(main.app) as client:
            client.post("/reports/anonymous", json=report_body(severity="mild"))
            client.post("/reports/anonymous", json=report_body(district="Kollam", area="Chavara"))

            data = client.get("/reports/anonymous", params={"district": "Ernakulam", "timeframe": "1d"}).json()

        self.assertTrue(data["success"])
        self.assertEqual(data["data"]["total_reports"], 1)
        self.assertEqual(data["data"]["severity_breakdown"]["mild"], 1)

    def test_symptom_extract_and_check(self):
        with TestClient(main.app) as client:
            extracted = client.post("/symptoms/extract",
                                    json={"text": "Cough and fever, I live in Thrissur", "language": "en"}).json()
            checked = client.post("/symptoms/check", json={
                "symptoms": [{"symptom_id": "fever", "severity": "moderate"},
                             {"symptom_id": "cough", "severity": "moderate"}],
            }).json()

        self.assertEqual({s["symptom"] for s in extracted["symptoms"]}, {"cough", "fever"})
        self.assertEqual(extracted["district"], "thrissur")
        self.assertEqual(checked["matches"][0]["condition_id"], "acute_respiratory_infection")
        self.assertEqual(checked["urgency"], "high")

    def test_catalog_routes(self):
        with TestClient(main.app) as client:
            self.assertEqual(client.get("/symptoms/fever").json()["symptom"]["id"], "fever")
            self.assertEqual(client.get("/symptoms/unknown").status_code, 404)
            self.assertEqual(client.get("/conditions/dengue").status_code, 200)
            search = client.get("/symptoms/search", params={"q": "temperature"}).json()
            self.assertIn("fever", [s["id"] for s in search["symptoms"]])

    def test_occupational_predict(self):
        profile = {
            "worker_id": "worker-1",
            "job_title": "Mason",
            "industry": "construction",
            "work_environment": {"temperature": "extreme_heat", "physical_demands": {"heavy_lifting": True}},
            "work_history": [{"id": "wh1", "job_title": "Helper", "industry": "construction", "duration": 72}],
        }

        with TestClient(main.app) as client:
            response = client.post("/occupational/predict", json={"profile": profile})
            factors = client.get("/occupational/risk-factors/construction").json()

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["worker_id"], "worker-1")
        self.assertTrue(data["alerts"])
        self.assertEqual(len(factors["risk_factors"]), 3)


if __name__ == "__main__":
    unittest.main()
