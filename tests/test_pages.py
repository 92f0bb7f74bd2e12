"""Tests for the page objects against the fake driver."""

import pytest

from fakes import FakeElement, FastConfig
from storefront_harness.core import conditions
from storefront_harness.core.exceptions import UnknownCategoryError, WaitTimeoutError
from storefront_harness.pages import support
from storefront_harness.pages.home_page import HomePage
from storefront_harness.pages.location_page import LocationPage
from storefront_harness.pages.menu_page import MenuPage


@pytest.fixture
def home(session, waits, logger) -> HomePage:
    return HomePage(session, waits, config=FastConfig, logger=logger)


@pytest.fixture
def locations(session, waits, logger) -> LocationPage:
    return LocationPage(session, waits, config=FastConfig, logger=logger)


@pytest.fixture
def menu(session, waits, logger) -> MenuPage:
    return MenuPage(session, waits, config=FastConfig, logger=logger)


def mutate_body(driver):
    def mutate():
        driver.body_html += '<div class="menu-item"></div>'
    return mutate


class TestPageSupport:
    def test_navigate_waits_for_document_ready(self, driver, home):
        states = iter(['loading', 'complete'])
        driver.ready_state = lambda: next(states, 'complete')

        home.navigate_to()

        assert driver.current_url == FastConfig.BASE_URL

    def test_page_not_ready_is_a_hard_failure(self, driver, home):
        driver.ready_state = 'loading'

        with pytest.raises(WaitTimeoutError):
            home.navigate_to()

    def test_spinner_that_never_clears_is_not_an_error(self, driver, home):
        driver.register(support.LOADING_INDICATOR, FakeElement())

        assert home.common.wait_for_loading_to_complete(timeout=0.1) is False

    def test_layout_queries_are_idempotent(self, driver, home):
        driver.register(support.HEADER, FakeElement('header'))

        assert home.common.is_header_present() is True
        assert home.common.is_header_present() is True
        assert home.common.is_footer_present() is False
        assert home.common.is_footer_present() is False

    def test_click_falls_back_to_script_when_intercepted(self, driver, home):
        button = FakeElement('a', intercepted=True)
        driver.register(HomePage._MENU_BUTTON, button)

        home.click_menu_button()

        assert button.js_clicks == 1

    def test_type_into_clears_and_submits(self, driver, menu):
        search_box = FakeElement('input')
        driver.register(MenuPage._SEARCH_BOX, search_box)

        menu.search_menu_item('pancakes')

        assert search_box.cleared
        assert search_box.sent_keys[0] == 'pancakes'
        assert len(search_box.sent_keys) == 2

    def test_resize_waits_for_viewport(self, driver, home):
        assert home.common.resize(375, 812) is True
        assert driver.window_size == (375, 812)

    def test_footer_link_statuses(self, driver, home, monkeypatch):
        driver.register(support.FOOTER_LINKS,
                        FakeElement('a', {'href': 'https://www.example.com/privacy'}),
                        FakeElement('a', {'href': 'https://www.example.com/privacy'}),
                        FakeElement('a', {'href': 'https://www.example.com/terms'}))
        monkeypatch.setattr(support, 'get_status_chain', lambda href, base_url=None: [200])

        statuses = home.common.footer_link_statuses()

        assert statuses == {'https://www.example.com/privacy': [200], 'https://www.example.com/terms': [200]}


class TestHomePage:
    def test_missing_elements_are_false_not_errors(self, home):
        assert home.is_hero_banner_displayed() is False
        assert home.is_order_now_button_visible() is False
        assert home.is_logo_displayed() is False

    def test_hidden_element_is_not_displayed(self, driver, home):
        driver.register(HomePage._HERO_BANNER, FakeElement(displayed=False))

        assert home.is_hero_banner_displayed() is False

    def test_missing_element_fails_action(self, home):
        with pytest.raises(WaitTimeoutError):
            home.click_order_now()

    def test_order_now_changes_url(self, driver, home, waits):
        original_url = 'https://www.example.com/en'
        driver.register(HomePage._HERO_BANNER, FakeElement('section'))
        driver.register(HomePage._ORDER_NOW_BUTTON,
                        FakeElement('a', on_click=lambda: driver.get('https://order.example.com/')))

        home.navigate_to()
        assert home.is_hero_banner_displayed() is True
        assert home.is_order_now_button_visible() is True
        home.click_order_now()

        assert waits.wait_until(conditions.url_changed(original_url)) == 'https://order.example.com/'

    def test_subscribe_to_newsletter(self, driver, home):
        email = FakeElement('input')
        submit = FakeElement('button')
        driver.register(HomePage._NEWSLETTER_EMAIL_INPUT, email)
        driver.register(HomePage._NEWSLETTER_SUBMIT_BUTTON, submit)

        home.subscribe_to_newsletter('guest@example.com')

        assert email.sent_keys == ['guest@example.com']
        assert submit.clicks == 1

    def test_menu_categories_displayed_requires_all(self, driver, home):
        driver.register(home._menu_categories.lookup('pancakes'), FakeElement('a'))
        driver.register(home._menu_categories.lookup('combos'), FakeElement('a'))
        assert home.are_menu_categories_displayed() is False

        driver.register(home._menu_categories.lookup('burgers'), FakeElement('a'))
        assert home.are_menu_categories_displayed() is True

    def test_unknown_menu_category(self, home):
        with pytest.raises(UnknownCategoryError, match='waffles'):
            home.navigate_to_menu_category('waffles')

    def test_social_link_opening_new_tab(self, driver, home):
        driver.register(home._social_links.lookup('facebook'),
                        FakeElement('a', on_click=lambda: driver.handles.append('facebook-tab')))

        assert home.click_social_media_link('facebook') is True
        assert driver.current_window_handle == 'main'
        assert driver.handles == ['main']

    def test_repeated_social_clicks_do_not_pile_up_tabs(self, driver, home):
        opened = []

        def open_tab():
            opened.append(f'tab-{len(opened)}')
            driver.handles.append(opened[-1])

        driver.register(home._social_links.lookup('twitter'), FakeElement('a', on_click=open_tab))

        assert home.validate_external_link_opens_in_new_tab('twitter') is True
        assert home.validate_external_link_opens_in_new_tab('twitter') is True
        assert len(opened) == 2
        assert driver.handles == ['main']

    def test_social_link_in_same_tab(self, driver, home, monkeypatch):
        monkeypatch.setattr('storefront_harness.pages.home_page.NEW_TAB_GRACE', 0.1)
        driver.register(home._social_links.lookup('instagram'), FakeElement('a'))

        assert home.validate_external_link_opens_in_new_tab('instagram') is False

    def test_missing_social_link_is_false(self, home):
        assert home.validate_external_link_opens_in_new_tab('twitter') is False

    def test_unknown_platform_propagates_from_query(self, home):
        with pytest.raises(UnknownCategoryError) as exc_info:
            home.validate_external_link_opens_in_new_tab('myspace')

        assert exc_info.value.kind == 'social media platform'


class TestLocationPage:
    def test_search_and_results(self, driver, locations, monkeypatch):
        monkeypatch.setattr('storefront_harness.pages.location_page.SEARCH_START_GRACE', 0.1)
        zip_input = FakeElement('input')
        first = FakeElement('li')
        first.add_child(LocationPage._LOCATION_NAME, FakeElement('h3', text='IHOP Downtown'))
        first.add_child(LocationPage._LOCATION_ADDRESS, FakeElement('p', text='1 Main St'))
        driver.register(LocationPage._ZIP_CODE_INPUT, zip_input)
        driver.register(LocationPage._SEARCH_BUTTON, FakeElement('button'))
        driver.register(LocationPage._LOCATION_RESULTS, FakeElement('ul'))
        driver.register(LocationPage._LOCATION_ITEMS, first, FakeElement('li'))
        driver.register(LocationPage._FIRST_LOCATION, first)

        assert locations.validate_zip_code_search('10001') is True
        assert zip_input.sent_keys == ['10001']
        assert locations.get_location_results_count() == 2
        assert locations.get_first_location_name() == 'IHOP Downtown'
        assert locations.get_first_location_address() == '1 Main St'

    def test_search_waits_for_spinner_to_clear(self, driver, locations):
        polls = []

        def spinner():
            polls.append(1)
            return [FakeElement()] if len(polls) <= 3 else []

        driver.register(LocationPage._ZIP_CODE_INPUT, FakeElement('input'))
        driver.register(LocationPage._SEARCH_BUTTON, FakeElement('button'))
        driver.register_dynamic(LocationPage._LOADING_INDICATOR, spinner)

        locations.search_by_zip_code('90210')

        assert len(polls) >= 4

    def test_invalid_zip_shows_error(self, driver, locations, monkeypatch):
        monkeypatch.setattr('storefront_harness.pages.location_page.SEARCH_START_GRACE', 0.1)
        driver.register(LocationPage._ZIP_CODE_INPUT, FakeElement('input'))
        driver.register(LocationPage._SEARCH_BUTTON, FakeElement('button'))
        driver.register(LocationPage._ERROR_MESSAGE, FakeElement(text='Please enter a valid ZIP code'))

        assert locations.validate_zip_code_search('00000') is False
        assert locations.get_error_message() == 'Please enter a valid ZIP code'

    def test_missing_search_form_is_false(self, locations):
        assert locations.validate_zip_code_search('10001') is False

    def test_queries_without_results(self, locations):
        assert locations.get_location_results_count() == 0
        assert locations.get_first_location_name() == ''
        assert locations.get_error_message() == ''


class TestMenuPage:
    def test_navigate_to_category(self, driver, menu):
        link = FakeElement('a', on_click=mutate_body(driver))
        driver.register(menu._categories.lookup('drinks'), link)

        menu.navigate_to_category('drinks')

        assert link.clicks == 1

    def test_unknown_category_names_key(self, menu):
        with pytest.raises(UnknownCategoryError) as exc_info:
            menu.navigate_to_category('waffles')

        assert exc_info.value.key == 'waffles'
        assert 'waffles' in str(exc_info.value)

    def test_unknown_dietary_filter(self, menu):
        with pytest.raises(UnknownCategoryError, match='keto'):
            menu.apply_dietary_filter('keto')

    def test_apply_dietary_filter(self, driver, menu):
        chip = FakeElement('button', on_click=mutate_body(driver))
        driver.register(menu._dietary_filters.lookup('gluten-free'), chip)

        menu.apply_dietary_filter('Gluten-Free')

        assert chip.clicks == 1

    def test_item_names_and_details(self, driver, menu):
        complete = FakeElement()
        complete.add_child(MenuPage._MENU_ITEM_NAME, FakeElement(text='Original Buttermilk'))
        complete.add_child(MenuPage._MENU_ITEM_PRICE, FakeElement(text='$9.99'))
        complete.add_child(MenuPage._MENU_ITEM_IMAGE, FakeElement('img'))
        unpriced = FakeElement()
        unpriced.add_child(MenuPage._MENU_ITEM_NAME, FakeElement(text='Seasonal Special'))
        driver.register(MenuPage._MENU_ITEMS, complete, unpriced)

        assert menu.get_menu_items_count() == 2
        assert menu.get_menu_item_names() == ['Original Buttermilk', 'Seasonal Special']
        assert menu.validate_menu_item_details(0) is True
        assert menu.validate_menu_item_details(1) is False
        assert menu.validate_menu_item_details(5) is False

    def test_images_loaded(self, driver, menu):
        driver.register(MenuPage._MENU_ITEM_IMAGE, FakeElement('img'), FakeElement('img'))
        assert menu.are_menu_item_images_loaded() is True

    def test_add_first_item_to_cart(self, driver, menu):
        button = FakeElement('button')
        driver.register(MenuPage._MENU_ITEMS, FakeElement().add_child(MenuPage._ADD_TO_CART_BUTTON, button))

        menu.add_first_item_to_cart()

        assert button.clicks == 1

    def test_add_first_item_waits_for_items_to_render(self, driver, menu):
        button = FakeElement('button')
        item = FakeElement().add_child(MenuPage._ADD_TO_CART_BUTTON, button)
        polls = []

        def rendered_items():
            polls.append(1)
            return [item] if len(polls) > 2 else []

        driver.register_dynamic(MenuPage._MENU_ITEMS, rendered_items)

        menu.add_first_item_to_cart()

        assert len(polls) >= 3
        assert button.clicks == 1

    def test_add_first_item_without_items_times_out(self, menu):
        with pytest.raises(WaitTimeoutError, match='menu items'):
            menu.add_first_item_to_cart()

    def test_add_first_item_without_button_times_out(self, driver, menu):
        driver.register(MenuPage._MENU_ITEMS, FakeElement())

        with pytest.raises(WaitTimeoutError, match='Add to Cart button'):
            menu.add_first_item_to_cart()

    def test_stale_items_are_negative_results(self, driver, menu):
        driver.register(MenuPage._MENU_ITEMS, FakeElement(stale=True))

        assert menu.get_menu_item_names() == []
        assert menu.validate_menu_item_details(0) is False

    def test_validate_all_menu_categories(self, driver, menu):
        for key in ('pancakes', 'combos', 'burgers'):
            driver.register(menu._categories.lookup(key), FakeElement('a', on_click=mutate_body(driver)))
        driver.register(MenuPage._MENU_ITEMS, FakeElement())

        assert menu.validate_all_menu_categories() is True

    def test_validate_all_menu_categories_with_missing_link(self, driver, menu):
        driver.register(menu._categories.lookup('pancakes'), FakeElement('a', on_click=mutate_body(driver)))
        driver.register(MenuPage._MENU_ITEMS, FakeElement())

        assert menu.validate_all_menu_categories(('pancakes', 'combos')) is False
