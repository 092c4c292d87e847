import pytest

from sitecms.application import users as user_service
from sitecms.application.exceptions import ValidationFailed


def test_create_and_verify(store):
    user = user_service.create_user(store=store, username="alex", password="pw")

    assert user == {"id": user["id"], "username": "alex"}
    assert store.users.get_by_id(user["id"])["password"] != "pw"
    assert user_service.verify_user(store=store, username="alex", password="pw") is True
    assert user_service.verify_user(store=store, username="alex", password="nope") is False
    assert user_service.verify_user(store=store, username="ghost", password="pw") is False


def test_lookups_hide_password(store):
    user = user_service.create_user(store=store, username="alex", password="pw")

    assert user_service.get_user(store=store, user_id=user["id"]) == user
    assert user_service.get_user_by_username(store=store, username="alex") == user
    assert user_service.get_user(store=store, user_id=999) is None


def test_duplicate_username(store):
    user_service.create_user(store=store, username="alex", password="pw")

    with pytest.raises(ValidationFailed) as exc_info:
        user_service.create_user(store=store, username="alex", password="other")

    assert exc_info.value.errors[0]["type"] == "unique"


@pytest.mark.parametrize("username, password", [("", "pw"), ("   ", "pw"), ("alex", "")])
def test_blank_credentials(store, username, password):
    with pytest.raises(ValidationFailed):
        user_service.create_user(store=store, username=username, password=password)


def test_create_user_command(app, store):
    result = app.test_cli_runner().invoke(args=["create-user", "alex", "--password", "pw"])

    assert result.exit_code == 0, result.output
    assert "Created user alex" in result.output
    assert user_service.verify_user(store=store, username="alex", password="pw") is True


def test_create_user_command_reports_duplicates(app, store):
    user_service.create_user(store=store, username="alex", password="pw")

    result = app.test_cli_runner().invoke(args=["create-user", "alex", "--password", "other"])

    assert result.exit_code != 0
    assert "Username already taken" in result.output
    assert user_service.verify_user(store=store, username="alex", password="pw") is True
