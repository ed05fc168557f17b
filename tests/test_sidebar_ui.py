"""
UI tests for the sidebar shopping list using Streamlit's AppTest harness.
"""

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = "../streamlit_app/app.py"


@pytest.fixture
def app():
    """App on the upload view with an empty shopping list."""
    return AppTest.from_file(APP_PATH, default_timeout=30).run()


def _submit_item(at: AppTest, name: str) -> None:
    at.text_input(key="shopping_new_item").input(name)
    submit = next(b for b in at.sidebar.button if b.label == "➕")
    submit.click().run()


class TestShoppingListForm:
    """Adding items through the sidebar form."""

    def test_added_item_rendered_on_same_run(self, app):
        """Test that a submitted item shows up as a checkbox right away."""
        _submit_item(app, "eggs")

        assert not app.exception
        assert [c.label for c in app.sidebar.checkbox] == ["eggs"]
        assert any("(1 left)" in m.value for m in app.sidebar.markdown)
        assert [i.name for i in app.session_state["app_state"].shopping_list] == ["eggs"]

    def test_input_cleared_after_submit(self, app):
        _submit_item(app, "eggs")
        assert app.text_input(key="shopping_new_item").value == ""

    def test_blank_submission_ignored(self, app):
        _submit_item(app, "   ")

        assert app.session_state["app_state"].shopping_list == ()
        assert not app.sidebar.checkbox
        assert any("List is empty" in c.value for c in app.sidebar.caption)

    def test_add_then_remove(self, app):
        _submit_item(app, "bread")
        _submit_item(app, "eggs")
        assert [c.label for c in app.sidebar.checkbox] == ["bread", "eggs"]

        eggs_id = app.session_state["app_state"].shopping_list[-1].id
        app.button(key=f"shopping_remove_{eggs_id}").click().run()

        assert [c.label for c in app.sidebar.checkbox] == ["bread"]
