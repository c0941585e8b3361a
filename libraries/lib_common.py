import logging
from utilities.base_commands import BaseCommandCaller
from utilities.locator_helper import LocatorHelper


class LibCommon:
    """
    Steps shared by every journey: login, welcome page, navigation menu and logout.
    """

    @staticmethod
    def bc_open_url(driver, url: str, expected_url: str):
        driver.get(url)
        current_url = driver.current_url
        if expected_url not in current_url:
            raise AssertionError(f"Expected URL to contain {expected_url}, got {current_url}")
        logging.info(f"Opened {url}")

    @staticmethod
    def bc_is_logged(driver) -> bool:
        return BaseCommandCaller.is_locator_present(driver, 'PG_Common.link_opennav', 3000, 'soft')

    @staticmethod
    def bc_login(driver, country: str, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_Login.label_country', wait, 'soft')
        BaseCommandCaller.click(driver, 'PG_Login.input_countrydropdown')
        country_option = LocatorHelper.get_locator_with_dynamic_value(
            LocatorHelper.resolve_locator('PG_Login.select_dropdownvalue'), 'countryName', country)
        BaseCommandCaller.is_locator_present(driver, country_option, wait, 'soft')
        BaseCommandCaller.click(driver, country_option)
        BaseCommandCaller.is_locator_present(driver, 'PG_Login.button_login', wait, 'soft')
        BaseCommandCaller.assert_button_visibility(driver, 'PG_Login.button_login', wait)
        BaseCommandCaller.click(driver, 'PG_Login.button_login')

    @staticmethod
    def bc_microsoft_login(driver, email: str, password: str, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_MicrosoftLogin.label_signin', wait, 'hard')
        BaseCommandCaller.fill(driver, 'PG_MicrosoftLogin.input_email', email)
        BaseCommandCaller.click(driver, 'PG_MicrosoftLogin.button_next')
        BaseCommandCaller.is_locator_present(driver, 'PG_MicrosoftLogin.label_enterpassword', wait, 'hard')
        BaseCommandCaller.fill(driver, 'PG_MicrosoftLogin.input_password', password)
        BaseCommandCaller.click(driver, 'PG_MicrosoftLogin.button_signin')
        BaseCommandCaller.capture_screenshot_with_title(driver, 'After The Perform the Sign In Button Click')

    @staticmethod
    def bc_proceed_welcome(driver, welcome_message: str, welcome_url: str, country: str, hospital: str,
                           department: str, wait: int):
        """
        Pass the welcome page: pick hospital and department, accept the terms and
        confirm the selected facility in the header.
        """
        if BaseCommandCaller.is_locator_present(driver, 'PG_Welcome.button_loginhere', wait, 'soft'):
            for attempt in range(3):
                BaseCommandCaller.click(driver, 'PG_Welcome.button_loginhere')
                if welcome_url in driver.current_url:
                    break
                logging.warning(f"Welcome page not reached after login click {attempt + 1}")
        if welcome_url not in driver.current_url:
            raise AssertionError(f"Expected URL to contain {welcome_url}, got {driver.current_url}")

        BaseCommandCaller.is_locator_present(driver, 'PG_Welcome.header_welcome', wait, 'hard')
        BaseCommandCaller.assert_text_match(driver, 'PG_Welcome.header_welcome', welcome_message, True)
        BaseCommandCaller.assert_text_match(driver, 'PG_Welcome.header_country', country, True)
        BaseCommandCaller.select_option(driver, 'PG_Welcome.select_hospital', hospital)
        BaseCommandCaller.select_option(driver, 'PG_Welcome.select_department', department)

        if BaseCommandCaller.is_locator_present(driver, 'PG_Welcome.input_iagreecheckbox_checked', wait, 'soft'):
            BaseCommandCaller.capture_screenshot_with_title(driver, 'I Agree Check Boxs are Checked')
        else:
            BaseCommandCaller.is_locator_present(driver, 'PG_Welcome.input_iagreecheckbox', wait, 'hard')
            BaseCommandCaller.click(driver, 'PG_Welcome.input_iagreecheckbox')

        LibCommon.bc_handle_click_on_skip_tour_popup(driver, wait)
        BaseCommandCaller.click(driver, 'PG_Welcome.button_submit')
        BaseCommandCaller.assert_text_match(driver, 'PG_Common.header_hospital', f"{hospital} ({department})")

    @staticmethod
    def bc_handle_click_on_menu(driver, navigation_link_name: str, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_Common.link_opennav', wait, 'hard')
        BaseCommandCaller.click(driver, 'PG_Common.link_opennav')
        BaseCommandCaller.hard_pause(driver, wait)
        link = LibCommon.resolve_navigation_link(navigation_link_name)
        BaseCommandCaller.is_locator_present(driver, link, wait, 'hard')
        BaseCommandCaller.hard_pause(driver, wait)

    @staticmethod
    def bc_handle_main_navigation_link_click(driver, navigation_link_name: str, wait: int):
        LibCommon.bc_handle_click_on_menu(driver, navigation_link_name, wait)
        BaseCommandCaller.click(driver, LibCommon.resolve_navigation_link(navigation_link_name))

    @staticmethod
    def bc_handle_sub_navigation_link_click(driver, navigation_link_name: str, wait: int):
        link = LibCommon.resolve_navigation_link(navigation_link_name)
        BaseCommandCaller.is_locator_present(driver, link, wait, 'hard')
        BaseCommandCaller.hard_pause(driver, wait)
        BaseCommandCaller.click(driver, link)

    @staticmethod
    def resolve_navigation_link(navigation_link_name: str) -> str:
        return LocatorHelper.get_locator_with_dynamic_value(
            LocatorHelper.resolve_locator('PG_Common.link_anynavigationtext'), 'navigationLinkName', navigation_link_name)

    @staticmethod
    def bc_log_out(driver, wait: int = 3000):
        BaseCommandCaller.click(driver, 'PG_Common.link_logouttogal')
        BaseCommandCaller.click(driver, 'PG_Common.link_logout')
        BaseCommandCaller.is_locator_present(driver, 'PG_Login.label_country', wait, 'soft')
        logging.info("Logged out")

    @staticmethod
    def bc_resolve_parameter_and_arrow_down(driver, locator_key: str, value: str, wait: int):
        """Type into a parameterised locator and accept the first suggestion."""
        locator = LocatorHelper.get_locator_with_dynamic_value(
            LocatorHelper.resolve_locator(locator_key), 'parameter', value)
        BaseCommandCaller.hard_pause(driver, wait)
        BaseCommandCaller.arrow_down(driver, locator)
        BaseCommandCaller.hard_pause(driver, wait)
        BaseCommandCaller.enter(driver, locator)

    @staticmethod
    def bc_resolve_parameter(driver, locator_key: str, value: str):
        locator = LocatorHelper.get_locator_with_dynamic_value(
            LocatorHelper.resolve_locator(locator_key), 'parameter', value)
        BaseCommandCaller.enter(driver, locator)

    @staticmethod
    def bc_handle_click_on_navigation_cancel_button(driver, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_Common.button_cancelnav', wait, 'soft')
        BaseCommandCaller.click(driver, 'PG_Common.button_cancelnav')
        BaseCommandCaller.is_locator_present(driver, 'PG_RequestForAdmission.label_cancelationconfirmation', wait, 'hard')
        BaseCommandCaller.click(driver, 'PG_RequestForAdmission.button_okcancelationconfirmation')

    @staticmethod
    def bc_handle_click_on_skip_tour_popup(driver, wait: int):
        BaseCommandCaller.hard_pause(driver, wait)
        if BaseCommandCaller.is_locator_present(driver, 'PG_Common.iframe_popupskip', wait, 'soft'):
            BaseCommandCaller.click_inside_iframe(driver, 'PG_Common.iframe_popupskip', 'PG_Common.button_skiptour')

    @staticmethod
    def bc_handle_click_on_nav_edit_button(driver, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_Common.button_edittopnav', wait, 'hard')
        BaseCommandCaller.click(driver, 'PG_Common.button_edittopnav')
        BaseCommandCaller.is_locator_present(driver, 'PG_Common.button_edittopnavdisabled', wait, 'hard')

    @staticmethod
    def bc_handle_click_on_nav_save_button(driver, wait: int):
        BaseCommandCaller.is_locator_present(driver, 'PG_Common.button_savetopnav', wait, 'hard')
        BaseCommandCaller.click(driver, 'PG_Common.button_savetopnav')
        BaseCommandCaller.hard_pause(driver, wait)
