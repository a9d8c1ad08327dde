import unittest

from loan_schedule_web.app import app


class TestWebApp(unittest.TestCase):
    def setUp(self):
        app.config["TESTING"] = True
        self.client = app.test_client()

    def test_index_uses_default_inputs(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        body = response.get_data(as_text=True)
        self.assertIn("$1,266.71", body)
        self.assertIn("360 payments", body)
        self.assertIn("30 years", body)
        self.assertIn("240 more rows truncated", body)

    def test_app_keeps_no_session_secret(self):
        self.assertIsNone(app.secret_key)

    def test_post_recomputes(self):
        response = self.client.post("/", data={"principal": "1200", "rate": "0", "term": "12"})
        body = response.get_data(as_text=True)
        self.assertIn("$100.00", body)
        self.assertIn("12 payments", body)

    def test_post_full_schedule(self):
        response = self.client.post(
            "/", data={"principal": "250000", "rate": "4.5", "term": "360", "show_full_schedule": "1"}
        )
        self.assertNotIn("more rows truncated", response.get_data(as_text=True))

    def test_post_invalid_input_shows_empty_state(self):
        response = self.client.post("/", data={"principal": "0", "rate": "4.5", "term": "360"})
        body = response.get_data(as_text=True)
        self.assertEqual(response.status_code, 200)
        self.assertIn("Loan Amount is not valid", body)
        self.assertIn("Enter loan details to generate payment schedule", body)

    def test_post_unparseable_input(self):
        response = self.client.post("/", data={"principal": "1200", "rate": "abc", "term": "12"})
        self.assertIn("Invalid interest rate", response.get_data(as_text=True))

    def test_api_schedule(self):
        response = self.client.get("/api/schedule?principal=1200&rate=0&term=12")
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data["summary"]["monthly_payment"], 100.0)
        self.assertEqual(len(data["schedule"]), 12)
        self.assertEqual(data["schedule"][-1]["remaining_balance"], 0.0)
        self.assertEqual(data["years"], "1 years")

    def test_api_invalid_input_is_empty(self):
        data = self.client.get("/api/schedule?principal=1200&rate=5&term=0").get_json()
        self.assertIsNone(data["summary"])
        self.assertEqual(data["schedule"], [])
        self.assertEqual(data["invalid_field"], "term_months")

    def test_api_unparseable_input(self):
        response = self.client.get("/api/schedule?principal=lots")
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.get_json())


if __name__ == "__main__":
    unittest.main()
