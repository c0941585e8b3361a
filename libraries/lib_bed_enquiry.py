from utilities.base_commands import BaseCommandCaller
from utilities.locator_helper import LocatorHelper


class LibBedEnquiry:
    @staticmethod
    def bc_get_vacant_beds(driver, ward_type: str, file_name: str, index: int, wait: int = 3000):
        """
        Filter the bed enquiry by ward type and store the bed type of the first
        vacant bed as "bedType".
        """
        BaseCommandCaller.click(driver, 'PG_BedEnquiry.link_filter')
        BaseCommandCaller.click(driver, 'PG_BedEnquiry.button_wardtype')
        ward_option = LocatorHelper.get_locator_with_dynamic_value(
            LocatorHelper.resolve_locator('PG_BedEnquiry.check_wardtype'), 'wardType', ward_type)
        BaseCommandCaller.click(driver, ward_option)
        BaseCommandCaller.click(driver, 'PG_BedEnquiry.button_search')
        BaseCommandCaller.is_locator_present(driver, 'PG_BedEnquiry.td_vacant', wait, 'hard')
        return BaseCommandCaller.get_input_data_and_store_in_json(
            driver, 'PG_BedEnquiry.td_bedtype', file_name, 'bedType', index)
