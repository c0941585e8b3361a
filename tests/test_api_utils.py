import unittest
from unittest.mock import MagicMock, patch
import requests
from utilities.api_utils import ApiUtils
from utilities.browser_token_helper import BrowserTokenHelper


def make_response(status_code, body):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    return response


class TestApiUtils(unittest.TestCase):
    @patch("utilities.api_utils.requests.request")
    def test_send_request_success(self, mock_request):
        mock_request.return_value = make_response(200, {"status": "Success", "appointmentId": "1412345"})

        with self.assertLogs(level="INFO") as logs:
            body = ApiUtils.send_request("post", "https://api.example.com/appointments",
                                         {"Authorization": "Bearer token"}, {"appointmentId": "1412345"},
                                         200, {"status": "Success"})

        self.assertEqual(body["appointmentId"], "1412345")
        mock_request.assert_called_once_with(
            "POST", "https://api.example.com/appointments", headers={"Authorization": "Bearer token"},
            json={"appointmentId": "1412345"}, timeout=60)
        self.assertTrue(any("API Request Successful" in line for line in logs.output))
        self.assertIn("*** End of API Request ***", logs.output[-1])

    @patch("utilities.api_utils.requests.request")
    def test_unexpected_status_code(self, mock_request):
        mock_request.return_value = make_response(500, {"status": "Error"})
        with self.assertLogs(level="INFO") as logs:
            with self.assertRaises(AssertionError) as context:
                ApiUtils.send_request("GET", "https://api.example.com/health")
        self.assertEqual(str(context.exception), "Expected status code 200, got 500")
        self.assertTrue(any("API Request Failed" in line for line in logs.output))
        self.assertIn("*** End of API Request ***", logs.output[-1])

    @patch("utilities.api_utils.requests.request")
    def test_unexpected_response_value(self, mock_request):
        mock_request.return_value = make_response(200, {"status": "Duplicate"})
        with self.assertRaises(AssertionError):
            ApiUtils.send_request("POST", "https://api.example.com/appointments", body={},
                                  expected_response_keys={"status": "Success"})

    @patch("utilities.api_utils.requests.request")
    def test_connection_error_is_reraised(self, mock_request):
        mock_request.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(requests.ConnectionError):
            ApiUtils.send_request("GET", "https://api.example.com/health")


class TestBrowserTokenHelper(unittest.TestCase):
    def test_local_storage_first(self):
        driver = MagicMock()
        driver.execute_script.side_effect = ["local-token"]
        self.assertEqual(BrowserTokenHelper.extract_token(driver, "appointmentToken"), "local-token")
        driver.get_cookie.assert_not_called()

    def test_session_storage_then_cookie(self):
        driver = MagicMock()
        driver.execute_script.side_effect = [None, "session-token"]
        self.assertEqual(BrowserTokenHelper.extract_token(driver, "appointmentToken"), "session-token")

        driver = MagicMock()
        driver.execute_script.side_effect = [None, None]
        driver.get_cookie.return_value = {"name": "appointmentToken", "value": "cookie-token"}
        self.assertEqual(BrowserTokenHelper.extract_token(driver, "appointmentToken"), "cookie-token")

    def test_missing_token_returns_none(self):
        driver = MagicMock()
        driver.execute_script.side_effect = [None, None]
        driver.get_cookie.return_value = None
        with self.assertLogs(level="ERROR"):
            self.assertIsNone(BrowserTokenHelper.extract_token(driver, "appointmentToken"))


if __name__ == "__main__":
    unittest.main()
