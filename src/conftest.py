import pytest
from django.core.cache import caches
from django.conf import settings
from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def clear_all_caches():
    """Reset throttle history and any per-site cache before every test."""
    for alias in settings.CACHES.keys():
        caches[alias].clear()


@pytest.fixture
def api_client():
    return APIClient()
