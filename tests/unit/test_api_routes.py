"""
Unit tests for the reservation API route.

Tests endpoint responses with mocked dependencies.
"""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from prereg.api.dependencies import get_email_sender, get_reservation_service
from prereg.api.errors import install_exception_handlers
from prereg.api.routes import router
from prereg.adapters.smtp import ConsoleEmailSender, SmtpEmailSender
from prereg.config.settings import Settings, get_settings
from prereg.domain.exceptions import EmailDeliveryError, EmailNotConfigured
from prereg.domain.registration import ReservationService

PAYLOAD = {"name": "Taro", "email": "taro@example.com", "interests": ["habit", "work"]}


@pytest.fixture
def service() -> MagicMock:
    return MagicMock(spec=ReservationService)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, environment="production")


@pytest.fixture
def app(service: MagicMock, settings: Settings) -> FastAPI:
    """Create test FastAPI application."""
    test_app = FastAPI()
    install_exception_handlers(test_app)
    test_app.include_router(router, prefix="/api")
    test_app.dependency_overrides[get_reservation_service] = lambda: service
    test_app.dependency_overrides[get_settings] = lambda: settings
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client for the application."""
    return TestClient(app)


class TestReservationSuccess:
    """Tests for POST /api/reservation success."""

    def test_returns_200_with_echo(self, client: TestClient, service: MagicMock) -> None:
        """Valid body returns 200 with the accepted data."""
        response = client.post("/api/reservation", json=PAYLOAD)

        assert response.status_code == 200
        assert response.json() == {
            "message": "Reservation successful and confirmation email sent",
            "data": PAYLOAD,
        }
        service.register.assert_called_once_with("Taro", "taro@example.com", ["habit", "work"])


class TestReservationValidation:
    """Tests for request validation failures."""

    def test_invalid_body_returns_400(self, client: TestClient, service: MagicMock) -> None:
        """Field errors are returned under details with status 400."""
        response = client.post("/api/reservation", json={"name": "T", "email": "bad", "interests": []})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation failed"
        assert body["details"] == {
            "name": ["Your name must be at least 2 characters"],
            "email": ["Please enter a valid email address"],
            "interests": ["Please select at least one interest"],
        }
        service.register.assert_not_called()

    def test_missing_fields_return_400(self, client: TestClient) -> None:
        """An empty object reports every required field."""
        response = client.post("/api/reservation", json={})

        assert response.status_code == 400
        assert set(response.json()["details"]) == {"name", "email", "interests"}

    def test_non_json_body_returns_400(self, client: TestClient, service: MagicMock) -> None:
        """A body that is not JSON is a validation failure, not a 500."""
        response = client.post(
            "/api/reservation", content=b"not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Validation failed"
        service.register.assert_not_called()


class TestReservationDeliveryFailure:
    """Tests for email delivery failures."""

    def test_delivery_error_returns_500_without_details(self, client: TestClient, service: MagicMock) -> None:
        """Production responses hide the underlying error."""
        service.register.side_effect = EmailDeliveryError("relay down")

        response = client.post("/api/reservation", json=PAYLOAD)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to send confirmation email"}

    def test_delivery_error_details_in_development(
        self, client: TestClient, service: MagicMock, settings: Settings
    ) -> None:
        """Development responses include the error text."""
        settings.environment = "development"
        service.register.side_effect = EmailDeliveryError("relay down")

        response = client.post("/api/reservation", json=PAYLOAD)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to send confirmation email", "details": "relay down"}

    def test_not_configured_returns_500(self, client: TestClient, service: MagicMock) -> None:
        """Missing email configuration is reported distinctly."""
        service.register.side_effect = EmailNotConfigured("no host")

        response = client.post("/api/reservation", json=PAYLOAD)

        assert response.status_code == 500
        assert response.json() == {"error": "Email delivery is not configured"}

    def test_unexpected_error_returns_500(self, client: TestClient, service: MagicMock) -> None:
        """Any other exception is caught and reported as a delivery failure."""
        service.register.side_effect = RuntimeError("boom")

        response = client.post("/api/reservation", json=PAYLOAD)

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to send confirmation email"


class TestEmailSenderSelection:
    """Tests for the email sender dependency."""

    def test_console_by_default(self) -> None:
        """The console backend is the default."""
        sender = get_email_sender(Settings(_env_file=None))
        assert isinstance(sender, ConsoleEmailSender)

    def test_smtp_backend(self) -> None:
        """email_backend=smtp builds an SmtpEmailSender from settings."""
        settings = Settings(_env_file=None, email_backend="smtp", smtp_host="mail.example.com", smtp_port=2525)

        sender = get_email_sender(settings)

        assert isinstance(sender, SmtpEmailSender)
        assert sender.host == "mail.example.com"
        assert sender.port == 2525

    def test_service_wired_with_admin_email(self) -> None:
        """The admin address comes from settings."""
        settings = Settings(_env_file=None, admin_email="admin@example.com")
        service = get_reservation_service(ConsoleEmailSender(), settings)
        assert service.admin_email == "admin@example.com"
