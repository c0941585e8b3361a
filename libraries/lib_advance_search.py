from utilities.base_commands import BaseCommandCaller


class LibAdvanceSearch:
    @staticmethod
    def bc_search_by_ic_no(driver, nic: str, wait: int):
        """Search patients by IC number and return the indices of the result rows."""
        BaseCommandCaller.is_locator_present(driver, 'PG_MrnSearch.input_uidno', wait, 'soft')
        BaseCommandCaller.clear_text_field(driver, 'PG_MrnSearch.input_icno')
        BaseCommandCaller.fill(driver, 'PG_MrnSearch.input_icno', nic)
        BaseCommandCaller.click(driver, 'PG_MrnSearch.button_search')
        return BaseCommandCaller.get_all_indices(driver, 'PG_MrnSearch.rows_searchresults')
