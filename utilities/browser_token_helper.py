import logging


class BrowserTokenHelper:
    @staticmethod
    def extract_token(driver, key: str):
        """
        Look up a token by key in localStorage, then sessionStorage, then cookies.
        Returns None when the token is not found.
        """
        try:
            token = driver.execute_script("return window.localStorage.getItem(arguments[0]);", key)
            if token:
                logging.info(f"Token '{key}' found in localStorage")
                return token

            token = driver.execute_script("return window.sessionStorage.getItem(arguments[0]);", key)
            if token:
                logging.info(f"Token '{key}' found in sessionStorage")
                return token

            cookie = driver.get_cookie(key)
            if cookie and cookie.get("value"):
                logging.info(f"Token '{key}' found in cookies")
                return cookie["value"]

            logging.error(f"Token '{key}' not found in localStorage, sessionStorage or cookies")
            return None
        except Exception as e:
            logging.error(f"Error extracting token '{key}': {str(e)}")
            raise
