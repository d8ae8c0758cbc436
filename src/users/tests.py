import pytest
from django.contrib.auth import get_user_model

from src.spaces.factories import SpaceFactory

User = get_user_model()


@pytest.mark.django_db
class TestCustomUserManager:
    def test_create_user_uses_email_as_identifier(self):
        user = User.objects.create_user(email="Media.Owner@EXAMPLE.com", password="pass12345")
        assert user.email == "Media.Owner@example.com"
        assert user.check_password("pass12345")
        assert not user.is_staff

    def test_create_user_without_password_is_unusable(self):
        user = User.objects.create_user(email="owner@example.com")
        assert not user.has_usable_password()

    def test_email_is_required(self):
        with pytest.raises(ValueError):
            User.objects.create_user(email="")

    def test_create_superuser(self):
        admin = User.objects.create_superuser(email="admin@example.com", password="pass12345")
        assert admin.is_staff and admin.is_superuser

    def test_create_superuser_requires_staff_flag(self):
        with pytest.raises(ValueError):
            User.objects.create_superuser(email="admin@example.com", password="x", is_staff=False)

    def test_display_name_and_managed_spaces(self):
        user = User.objects.create_user(email="ops@example.com", company_name="Bright Outdoor")
        SpaceFactory(managed_by=user)
        assert str(user) == "Bright Outdoor"
        assert user.managed_spaces.count() == 1
