"""
Tests for the Streamlit session_state wrapper.

st is patched with a stand-in whose session_state is a plain dict, so the
wrapper can be exercised without a running Streamlit script.
"""

from unittest.mock import Mock, patch

import pytest

from fridgechef.cooking import next_step, toggle_read_aloud
from fridgechef.ingestion import EncodedImage
from fridgechef.models import DietaryFilter
from fridgechef.state import AppState, toggle_filter
from streamlit_app.utils import state as ui_state


@pytest.fixture
def session_state():
    fake_st = Mock()
    fake_st.session_state = {}
    with patch.object(ui_state, "st", fake_st):
        yield fake_st.session_state


class TestDispatch:
    def test_initializes_empty_state(self, session_state):
        assert ui_state.get_app_state() == AppState()
        assert ui_state.get_upload_nonce() == 0

    def test_dispatch_stores_new_state(self, session_state):
        new_state = ui_state.dispatch(toggle_filter, DietaryFilter.VEGAN)
        assert session_state[ui_state.APP_STATE_KEY] is new_state
        assert ui_state.get_app_state().active_filters == (DietaryFilter.VEGAN,)


class TestCookingSession:
    """Test cases for entering, navigating and leaving cooking mode."""

    def test_no_session_without_active_recipe(self, session_state):
        assert ui_state.get_cooking_session() is None

    def test_enter_starts_at_first_step(self, session_state, sample_recipe):
        ui_state.enter_cooking_mode(sample_recipe)
        session = ui_state.get_cooking_session()
        assert ui_state.get_app_state().active_recipe == sample_recipe
        assert session.current_step == 0

    def test_update_applies_transition(self, session_state, sample_recipe):
        ui_state.enter_cooking_mode(sample_recipe)
        ui_state.update_cooking_session(toggle_read_aloud)
        ui_state.update_cooking_session(next_step)
        session = ui_state.get_cooking_session()
        assert session.current_step == 1
        assert not session.is_speaking

    def test_reentering_restarts(self, session_state, sample_recipe):
        ui_state.enter_cooking_mode(sample_recipe)
        ui_state.update_cooking_session(next_step)
        ui_state.exit_cooking_mode()
        ui_state.enter_cooking_mode(sample_recipe)
        assert ui_state.get_cooking_session().current_step == 0

    def test_stale_session_for_other_recipe_replaced(self, session_state, sample_recipes):
        ui_state.enter_cooking_mode(sample_recipes[0])
        ui_state.update_cooking_session(next_step)
        ui_state.dispatch(lambda s: AppState(recipes=s.recipes, active_recipe=sample_recipes[1]))
        session = ui_state.get_cooking_session()
        assert session.recipe.id == sample_recipes[1].id
        assert session.current_step == 0

    def test_exit_clears_and_requests_speech_reset(self, session_state, sample_recipe):
        ui_state.enter_cooking_mode(sample_recipe)
        ui_state.exit_cooking_mode()
        assert ui_state.get_app_state().active_recipe is None
        assert ui_state.COOKING_KEY not in session_state
        assert ui_state.pop_speech_reset() is True
        assert ui_state.pop_speech_reset() is False


class TestUploadPlumbing:
    def test_pending_image_popped_once(self, session_state):
        image = EncodedImage(data="AAAA", mime_type="image/png")
        ui_state.set_pending_image(image)
        assert ui_state.pop_pending_image() == image
        assert ui_state.pop_pending_image() is None

    def test_bump_nonce(self, session_state):
        ui_state.bump_upload_nonce()
        ui_state.bump_upload_nonce()
        assert ui_state.get_upload_nonce() == 2
