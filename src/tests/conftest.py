"""
pytest configuration and shared fixtures for PropertyHub backend tests.
"""

import os
from decimal import Decimal

import pytest

os.environ.setdefault("DJANGO_ENV", "test")


@pytest.fixture(autouse=True)
def enable_db_access(db):
    """Enable database access for all tests."""
    pass


@pytest.fixture
def api_client():
    """API client for testing endpoints."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def make_user():
    """Factory creating users with a given role."""
    from propertyhub.models import User

    def _make_user(email, role="User", full_name=None, **extra):
        return User.objects.create_user(
            email=email,
            password="testpass123",
            full_name=full_name or email.split("@")[0].title(),
            role=role,
            **extra,
        )

    return _make_user


@pytest.fixture
def test_user(make_user):
    """Create a regular (non-agent) user."""
    return make_user("testuser@example.com", role="User", full_name="Test User")


@pytest.fixture
def reporters(make_user):
    """Five distinct regular users for report tests."""
    return [
        make_user(f"reporter{i}@example.com", role="User", full_name=f"Reporter {i}")
        for i in range(1, 6)
    ]


@pytest.fixture
def agent_user(make_user):
    """Create an agent."""
    return make_user(
        "agent@example.com",
        role="Agent",
        full_name="Agent Smith",
        organization="Smith Realty",
        license_number="LIC-1001",
    )


@pytest.fixture
def other_agent(make_user):
    """Create a second agent."""
    return make_user("other.agent@example.com", role="Agent", full_name="Other Agent")


@pytest.fixture
def admin_user():
    """Create an admin user."""
    from propertyhub.models import User

    return User.objects.create_superuser(
        email="admin@example.com",
        password="adminpass123",
        full_name="Admin User",
    )


@pytest.fixture
def listing_data():
    """Valid listing fields as sent by an agent."""
    return {
        "title": "Sunny two bedroom apartment",
        "description": "Bright corner unit close to the park and schools.",
        "price": Decimal("250000.00"),
        "address": "12 Elm Street",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62701",
        "bedrooms": 2,
        "bathrooms": Decimal("1.5"),
        "area": 950,
        "property_type": "Apartment",
        "listing_status": "For Sale",
        "features": ["balcony", "parking"],
    }


@pytest.fixture
def make_listing(agent_user, listing_data):
    """Factory creating listings directly in the database."""
    from propertyhub.models import Listing

    def _make_listing(agent=None, moderation_status="Approved", **overrides):
        fields = {**listing_data, **overrides}
        agent = agent or agent_user
        return Listing.objects.create(
            agent=agent,
            moderation_status=moderation_status,
            created_by=agent.user_id,
            **fields,
        )

    return _make_listing


@pytest.fixture
def approved_listing(make_listing):
    return make_listing(moderation_status="Approved")


@pytest.fixture
def pending_listing(make_listing):
    return make_listing(moderation_status="Pending", title="Pending townhouse")


@pytest.fixture
def rejected_listing(make_listing):
    return make_listing(moderation_status="Rejected", title="Rejected condo")


def _authenticate(client, user):
    from rest_framework_simplejwt.tokens import RefreshToken

    refresh = RefreshToken.for_user(user)
    refresh["role"] = user.role

    # Each access_token read mints a new jti
    access = str(refresh.access_token)
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
    return {"client": client, "user": user, "token": access}


@pytest.fixture
def auth_client(test_user):
    """Authenticated API client for the regular test_user."""
    from rest_framework.test import APIClient

    return _authenticate(APIClient(), test_user)


@pytest.fixture
def agent_client(agent_user):
    """Authenticated API client for the agent."""
    from rest_framework.test import APIClient

    return _authenticate(APIClient(), agent_user)


@pytest.fixture
def admin_client(admin_user):
    """Authenticated API client with admin privileges."""
    from rest_framework.test import APIClient

    return _authenticate(APIClient(), admin_user)


@pytest.fixture
def client_for():
    """Factory returning an authenticated API client for any user."""
    from rest_framework.test import APIClient

    def _client_for(user):
        return _authenticate(APIClient(), user)["client"]

    return _client_for


class RecordingNotifier:
    """NotificationService stand-in that records calls."""

    def __init__(self, fail=False):
        self.fail = fail
        self.admin_calls = []
        self.user_calls = []

    def notify_admins(self, **kwargs):
        if self.fail:
            raise RuntimeError("notification backend down")
        self.admin_calls.append(kwargs)
        return []

    def create_notification(self, **kwargs):
        if self.fail:
            raise RuntimeError("notification backend down")
        self.user_calls.append(kwargs)
        return None


@pytest.fixture
def recording_notifier():
    return RecordingNotifier()


@pytest.fixture
def failing_notifier():
    return RecordingNotifier(fail=True)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
