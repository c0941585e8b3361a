import json
import logging
from datetime import datetime
import requests

REQUEST_TIMEOUT = 60


class ApiUtils:
    @staticmethod
    def send_request(method: str, url: str, headers: dict = None, body=None,
                     expected_status_code: int = 200, expected_response_keys: dict = None):
        """
        Send an HTTP request and assert the status code and the expected top-level
        response values. Returns the decoded JSON body.
        """
        headers = headers or {}
        expected_response_keys = expected_response_keys or {}
        logging.info(f"API Request: {method.upper()} {url}")
        logging.info(f"Headers: {json.dumps(headers)}")
        if body is not None:
            logging.info(f"Body: {json.dumps(body)}")

        try:
            response = requests.request(method.upper(), url, headers=headers, json=body, timeout=REQUEST_TIMEOUT)
            logging.info(f"Response status: {response.status_code}")
            response_body = response.json()
            logging.info(f"Response body: {json.dumps(response_body)}")

            if response.status_code != expected_status_code:
                raise AssertionError(f"Expected status code {expected_status_code}, got {response.status_code}")
            for key, expected_value in expected_response_keys.items():
                actual_value = response_body.get(key)
                if actual_value != expected_value:
                    raise AssertionError(f"Expected '{key}' to be {expected_value!r}, got {actual_value!r}")

            logging.info("API Request Successful")
            return response_body
        except (requests.RequestException, ValueError, AssertionError) as e:
            logging.error(f"API Request Failed: {str(e)}")
            raise
        finally:
            logging.info(f"*** End of API Request *** [Date: {datetime.now().isoformat()}]")
