import pytest

from services.shared.domain import Role
from services.shared.domain.exception import BusinessRuleViolationException
from services.user.applications.register_user import RegisterUserService
from services.user.domain.exception import EmailAlreadyExistsException
from services.user.domain.value_object import Email


@pytest.fixture
def service(user_repository, user_factory, clock):
    return RegisterUserService(
        repository=user_repository, factory=user_factory, clock=clock
    )


class TestRegisterUserService:
    def test_register_saves_user_with_hashed_password(self, service, user_repository):
        user = service.register(
            "Ada", "Lovelace", "ada@example.com", "pw1234", "pw1234"
        )

        stored = user_repository.find_by_email(Email("ada@example.com"))
        assert stored.id == user.id
        assert stored.password_hash == "hashed:pw1234"
        assert stored.role == Role.USER

    def test_passwords_must_match(self, service, user_repository):
        with pytest.raises(
            BusinessRuleViolationException, match="Passwords do not match"
        ):
            service.register("Ada", "Lovelace", "ada@example.com", "pw1234", "pw9999")
        assert user_repository.find_all() == []

    def test_email_must_be_unique(self, service, user_repository, create_user):
        user_repository.save(create_user(email="ada@example.com"))

        with pytest.raises(EmailAlreadyExistsException, match="Email already exists"):
            service.register("Ada", "Byron", "ADA@example.com", "pw1234", "pw1234")
