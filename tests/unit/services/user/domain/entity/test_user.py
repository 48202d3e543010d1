import pytest

from services.shared.domain import Role
from services.user.domain.value_object import Email


class TestUser:
    def test_full_name(self, create_user):
        assert create_user().full_name == "Ada Lovelace"

    def test_is_admin(self, create_user):
        assert create_user(role=Role.ADMIN).is_admin is True
        assert create_user().is_admin is False

    def test_names_are_required(self, create_user):
        with pytest.raises(ValueError, match="first_name"):
            create_user(first_name=" ")

    def test_update_profile(self, create_user):
        user = create_user(profile_image="old.png")

        user.update_profile(
            first_name="Grace",
            last_name="Hopper",
            email=Email("grace@example.com"),
            role=Role.ADMIN,
        )

        assert user.full_name == "Grace Hopper"
        assert user.email == Email("grace@example.com")
        assert user.role == Role.ADMIN
        assert user.profile_image == "old.png"

    def test_update_profile_replaces_image_when_given(self, create_user):
        user = create_user(profile_image="old.png")

        user.update_profile(
            first_name="Ada",
            last_name="Lovelace",
            email=user.email,
            role=user.role,
            profile_image="new.png",
        )

        assert user.profile_image == "new.png"

    def test_change_password_hash(self, create_user):
        user = create_user()
        user.change_password_hash("hashed:new")
        assert user.password_hash == "hashed:new"
