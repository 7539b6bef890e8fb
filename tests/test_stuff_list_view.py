import pytest

from conftest import RenderedPage, make_stuff
from stuff_manager.applications.client.stuff_state import StuffState
from stuff_manager.domain.models.stuff import Stuff
from stuff_manager.presentation.views.stuff_list_view import render_stuff_list


def render(state: StuffState) -> RenderedPage:
    return RenderedPage(render_stuff_list(state))


def test_page_chrome():
    page = render(StuffState(items=tuple(make_stuff(3))))

    assert page.has_text("<h1>Stuff Manager</h1>")
    assert page.has_text("Manage your stuff items")
    assert page.has_text("<h2>Stuff List</h2>")
    assert page.has_text("Page 1")


def test_loading_hides_everything_else():
    page = render(StuffState(items=tuple(make_stuff(10)), loading=True, error="stale"))

    assert page.has_role("status")
    assert page.has_text('aria-label="Loading"')
    assert not page.has_role("alert")
    assert not page.has_table()


def test_error_alert():
    page = render(StuffState(error="Failed to fetch stuff items"))

    assert page.has_role("alert")
    assert page.has_text("<strong>Error!</strong>")
    assert page.has_text("Failed to fetch stuff items")
    assert not page.has_role("status")
    assert not page.has_table()


def test_empty_state():
    page = render(StuffState())

    assert page.has_text("No stuff items found.")
    assert not page.has_table()


def test_table_rows_follow_received_order():
    items = tuple(reversed(make_stuff(3)))
    page = render(StuffState(items=items))

    for header in ("ID", "Name", "Description"):
        assert page.has_text(f'<th scope="col">{header}</th>')
    rows = page.body_rows()
    assert len(rows) == 3
    assert "Stuff Item 3" in rows[0]
    assert "Stuff Item 1" in rows[2]


def test_item_text_is_escaped():
    page = render(StuffState(items=(Stuff(id=1, name="<b>bold</b>", description="a & b"),)))

    assert page.has_text("&lt;b&gt;bold&lt;/b&gt;")
    assert page.has_text("a &amp; b")


@pytest.mark.parametrize(
    "state, previous_disabled, next_disabled",
    [
        (StuffState(items=tuple(make_stuff(10)), current_page=1), True, False),
        (StuffState(items=tuple(make_stuff(2)), current_page=2), False, True),
        (StuffState(items=tuple(make_stuff(10)), current_page=3), False, False),
        (StuffState(current_page=1), True, True),
    ],
)
def test_pagination_controls(state, previous_disabled, next_disabled):
    page = render(state)

    assert page.is_disabled("Previous") is previous_disabled
    assert page.is_disabled("Next") is next_disabled


def test_controls_submit_adjacent_pages():
    page = render(StuffState(items=tuple(make_stuff(10)), current_page=4))

    assert 'value="3"' in page.button("Previous")
    assert 'value="5"' in page.button("Next")
