import os
import re
import logging
from datetime import datetime

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
screenshot_dir = os.path.join(ROOT_DIR, "Reports", "screenshots")
failed_screenshot_dir = os.path.join(screenshot_dir, "failed")
report_dir = os.path.join(ROOT_DIR, "Reports", "xml")


def screenshot_timestamp() -> str:
    return datetime.now().isoformat().replace(":", "_").replace(".", "_")


def capture_screenshot(driver, action: str, directory: str = None) -> str:
    """
    Save a PNG of the current browser window as <action>_<timestamp>.png
    """
    directory = directory or screenshot_dir
    os.makedirs(directory, exist_ok=True)
    safe_action = re.sub(r"[^\w-]+", "_", action).strip("_")
    file_path = os.path.join(directory, f"{safe_action}_{screenshot_timestamp()}.png")
    driver.save_screenshot(file_path)
    logging.info(f"Screenshot captured: {file_path}")
    return file_path
