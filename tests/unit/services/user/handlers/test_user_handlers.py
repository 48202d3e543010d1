import json

import pytest

from services.shared.domain import Role
from services.user.applications.add_user import AddUserService
from services.user.applications.change_password import ChangePasswordService
from services.user.applications.list_users import ListUsersService
from services.user.applications.register_user import RegisterUserService
from services.user.applications.update_user import UpdateUserService
from services.user.handlers import (
    add,
    change_password,
    list_users,
    register,
    update_user,
)


@pytest.fixture(autouse=True)
def handlers(monkeypatch, user_repository, user_factory, password_hasher, clock):
    """各ハンドラーのサービスをインメモリのレポジトリで組み立て直す"""
    monkeypatch.setattr(
        register,
        "service",
        RegisterUserService(user_repository, user_factory, clock=clock),
    )
    monkeypatch.setattr(
        add, "service", AddUserService(user_repository, user_factory, clock=clock)
    )
    monkeypatch.setattr(list_users, "service", ListUsersService(user_repository))
    monkeypatch.setattr(update_user, "service", UpdateUserService(user_repository))
    monkeypatch.setattr(
        change_password,
        "service",
        ChangePasswordService(user_repository, password_hasher),
    )


def _body(response: dict) -> dict:
    return json.loads(response["body"])


@pytest.fixture
def register_body():
    def _factory(**overrides) -> dict:
        body = {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "ada@example.com",
            "password": "secret1",
            "confirmPassword": "secret1",
        }
        body.update(overrides)
        return body

    return _factory


class TestRegisterHandler:
    def test_register(self, api_event, lambda_context, register_body):
        response = register.lambda_handler(
            api_event(body=register_body(), method="POST"), lambda_context
        )

        assert response["statusCode"] == 201
        body = _body(response)
        assert body["message"] == "Account created successfully!"
        assert body["data"]["fullName"] == "Ada Lovelace"
        assert body["data"]["role"] == "User"
        assert "passwordHash" not in body["data"]

    def test_missing_fields(self, api_event, lambda_context, register_body):
        response = register.lambda_handler(
            api_event(body=register_body(lastName=""), method="POST"), lambda_context
        )

        assert response["statusCode"] == 400
        assert _body(response)["message"] == "Please fill in all fields"

    def test_password_mismatch(self, api_event, lambda_context, register_body):
        response = register.lambda_handler(
            api_event(body=register_body(confirmPassword="other1"), method="POST"),
            lambda_context,
        )

        assert response["statusCode"] == 400
        assert _body(response)["message"] == "Passwords do not match"

    def test_duplicate_email(self, api_event, lambda_context, register_body):
        event = api_event(body=register_body(), method="POST")
        register.lambda_handler(event, lambda_context)

        response = register.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400
        assert _body(response)["message"] == "Email already exists"

    def test_invalid_email(self, api_event, lambda_context, register_body):
        response = register.lambda_handler(
            api_event(body=register_body(email="not-an-email"), method="POST"),
            lambda_context,
        )
        assert response["statusCode"] == 400


class TestAddUserHandler:
    def test_admin_gets_temporary_password(self, api_event, lambda_context, admin):
        response = add.lambda_handler(
            api_event(
                body={
                    "firstName": "Grace",
                    "lastName": "Hopper",
                    "email": "grace@example.com",
                    "role": "Admin",
                },
                caller=admin,
                method="POST",
            ),
            lambda_context,
        )

        assert response["statusCode"] == 201
        body = _body(response)
        assert body["data"]["role"] == "Admin"
        assert len(body["temporaryPassword"]) == 12

    def test_member_is_forbidden(self, api_event, lambda_context, member):
        response = add.lambda_handler(
            api_event(
                body={"firstName": "G", "lastName": "H", "email": "g@example.com"},
                caller=member,
                method="POST",
            ),
            lambda_context,
        )
        assert response["statusCode"] == 403

    def test_missing_fields(self, api_event, lambda_context, admin):
        response = add.lambda_handler(
            api_event(body={"firstName": "Grace"}, caller=admin, method="POST"),
            lambda_context,
        )

        assert response["statusCode"] == 400
        assert _body(response)["message"] == "Missing required fields"


class TestListUsersHandler:
    def test_filter_by_role(
        self, api_event, lambda_context, user_repository, create_user
    ):
        user_repository.save(create_user())
        user_repository.save(
            create_user(user_id="admin-1", email="root@example.com", role=Role.ADMIN)
        )

        response = list_users.lambda_handler(
            api_event(query_string_parameters={"role": "Admin"}), lambda_context
        )

        body = _body(response)
        assert response["statusCode"] == 200
        assert body["count"] == 1
        assert body["data"][0]["id"] == "admin-1"

    def test_invalid_role(self, api_event, lambda_context):
        response = list_users.lambda_handler(
            api_event(query_string_parameters={"role": "Pilot"}), lambda_context
        )
        assert response["statusCode"] == 400


class TestUpdateUserHandler:
    def test_unknown_user(self, api_event, lambda_context):
        response = update_user.lambda_handler(
            api_event(
                body={"firstName": "A", "lastName": "B", "email": "a@example.com"},
                path_parameters={"id": "nobody"},
                method="PUT",
            ),
            lambda_context,
        )

        assert response["statusCode"] == 404
        assert _body(response)["message"] == "User not found"


class TestChangePasswordHandler:
    @pytest.fixture
    def change(self, api_event, lambda_context):
        def _change(body: dict, caller=None) -> dict:
            event = api_event(body=body, caller=caller, method="POST")
            return change_password.lambda_handler(event, lambda_context)

        return _change

    @pytest.fixture(autouse=True)
    def stored_user(self, user_repository, create_user):
        user_repository.save(create_user(password="secret1"))

    def test_change(self, change, member):
        response = change(
            {
                "currentPassword": "secret1",
                "newPassword": "secret2",
                "confirmNewPassword": "secret2",
            },
            caller=member,
        )

        assert response["statusCode"] == 200
        assert _body(response)["message"] == "Password successfully changed."

    def test_guest_is_unauthorized(self, change):
        response = change({"currentPassword": "secret1"})
        assert response["statusCode"] == 401

    def test_missing_fields(self, change, member):
        response = change({"currentPassword": "secret1"}, caller=member)

        assert response["statusCode"] == 400
        assert _body(response)["message"] == "All password fields are required."

    def test_wrong_current_password(self, change, member):
        response = change(
            {
                "currentPassword": "wrong1",
                "newPassword": "secret2",
                "confirmNewPassword": "secret2",
            },
            caller=member,
        )

        assert response["statusCode"] == 401
        assert _body(response)["message"] == "Invalid current password."
