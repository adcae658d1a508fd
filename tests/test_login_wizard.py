"""
Tests para cli/login.py y cli/wizard.py con interacción simulada.
"""

from unittest.mock import MagicMock, patch

import pytest

from dynaform.cli.form_viewer import FormAction
from dynaform.cli.login import login_view
from dynaform.cli.wizard import BACK_TO_LOGIN, QUIT, build_session, wizard_main
from dynaform.config import Settings
from dynaform.core import NavResult
from dynaform.models import LoginResult
from dynaform.session import FormSession, SessionStatus


def scripted(*answers):
    """Función ask que devuelve respuestas predefinidas."""
    it = iter(answers)
    return lambda message: next(it)


def select_returning(value):
    question = MagicMock()
    question.ask.return_value = value
    return MagicMock(return_value=question)


class TestLoginView:
    """Tests para login_view."""

    def test_retries_until_success(self, schema):
        service = MagicMock(return_value=LoginResult(success=True, message="Welcome"))
        session = FormSession(service, MagicMock(return_value=schema))

        ok = login_view(session, ask=scripted("R42", "", "R42", "Ada"))

        assert ok
        service.assert_called_once()
        assert session.user.name == "Ada"

    def test_rejected_then_abort(self, schema):
        service = MagicMock(return_value=LoginResult(success=False, message="Nope"))
        session = FormSession(service, MagicMock(return_value=schema))

        assert not login_view(session, ask=scripted("R42", "Ada", None))
        assert session.user is None

    def test_abort_on_name(self, schema):
        session = FormSession(MagicMock(), MagicMock())
        assert not login_view(session, ask=scripted("R42", None))
        session.login_service.assert_not_called()


@pytest.fixture
def offline_settings(tmp_path):
    return Settings(output_dir=tmp_path / "out")


class TestWizard:
    """Tests para wizard_main."""

    def test_build_session_offline(self, offline_settings, schema_file):
        session = build_session(offline_settings, schema_file)
        session.login("R42", "Ada")
        assert session.activate() == SessionStatus.FILLING

    def test_error_then_quit(self, offline_settings, tmp_path):
        missing = tmp_path / "missing.json"
        login = MagicMock(side_effect=lambda s: s.login("R42", "Ada").ok)
        select = select_returning(QUIT)

        with patch("dynaform.cli.wizard.login_view", login), \
             patch("dynaform.cli.wizard.questionary.select", select), \
             patch("dynaform.cli.wizard.interactive_form") as form:
            wizard_main(offline_settings, schema_file=missing)

        form.assert_not_called()
        assert select.call_args.kwargs["choices"] == [BACK_TO_LOGIN, QUIT]

    def test_error_back_to_login(self, offline_settings, tmp_path):
        missing = tmp_path / "missing.json"
        attempts = []
        select = select_returning(BACK_TO_LOGIN)

        def fake_login(session):
            attempts.append(session.status)
            if len(attempts) > 1:
                return False
            return session.login("R42", "Ada").ok

        with patch("dynaform.cli.wizard.login_view", side_effect=fake_login), \
             patch("dynaform.cli.wizard.questionary.select", select):
            wizard_main(offline_settings, schema_file=missing)

        assert attempts == [SessionStatus.LOGGED_OUT, SessionStatus.LOGGED_OUT]

    def test_submit_saves_file(self, offline_settings, schema_file, fill):
        def fake_form(navigator, user_name, roll_number, submit_action):
            assert user_name == "Ada"
            fill.personal(navigator.store)
            navigator.next()
            fill.preferences(navigator.store)
            assert submit_action() == NavResult.SUBMITTED
            return FormAction.SUBMITTED

        with patch("dynaform.cli.wizard.login_view",
                   side_effect=lambda s: s.login("R42", "Ada").ok), \
             patch("dynaform.cli.wizard.interactive_form", side_effect=fake_form), \
             patch("dynaform.cli.wizard.questionary.select", select_returning(QUIT)):
            wizard_main(offline_settings, schema_file=schema_file)

        saved = list((offline_settings.output_dir).glob("student_info_v1_R42_*.json"))
        assert len(saved) == 1

    def test_logout_returns_to_login(self, offline_settings, schema_file):
        calls = []

        def fake_login(session):
            calls.append(session.status)
            if len(calls) > 1:
                return False
            return session.login("R42", "Ada").ok

        with patch("dynaform.cli.wizard.login_view", side_effect=fake_login), \
             patch("dynaform.cli.wizard.interactive_form", return_value=FormAction.LOGOUT):
            wizard_main(offline_settings, schema_file=schema_file)

        assert calls == [SessionStatus.LOGGED_OUT, SessionStatus.LOGGED_OUT]

    def test_cancel_exits(self, offline_settings, schema_file):
        login = MagicMock(side_effect=lambda s: s.login("R42", "Ada").ok)
        with patch("dynaform.cli.wizard.login_view", login), \
             patch("dynaform.cli.wizard.interactive_form", return_value=FormAction.CANCEL):
            wizard_main(offline_settings, schema_file=schema_file)
        assert login.call_count == 1
        assert not offline_settings.output_dir.exists()
