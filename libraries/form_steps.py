from utilities.base_commands import BaseCommandCaller

MAT_OPTIONS = 'PG_Common.list_matoptions'


def is_blank(value) -> bool:
    return value is None or value in ('', 'null', 'undefined')


def replace_field(driver, locator_key: str, value, capture: bool = False):
    BaseCommandCaller.clear_text_field(driver, locator_key)
    BaseCommandCaller.fill(driver, locator_key, value, capture)


def choose_mat_option(driver, locator_key: str, value: str):
    """Open an autocomplete field and pick the option whose text equals value."""
    BaseCommandCaller.clear_text_field(driver, locator_key)
    BaseCommandCaller.click(driver, locator_key)
    BaseCommandCaller.select_mat_option_by_text(driver, MAT_OPTIONS, value)


def expand_section(driver, locator_key: str, wait: int):
    if BaseCommandCaller.is_locator_present(driver, locator_key, wait, 'hard'):
        BaseCommandCaller.click(driver, locator_key)


def assert_fields(driver, expected_by_locator: dict):
    for locator_key, expected_value in expected_by_locator.items():
        BaseCommandCaller.get_input_data_and_assert(driver, locator_key, expected_value)
