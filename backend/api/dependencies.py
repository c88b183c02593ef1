"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations around a single shared MongoDB handle. Each module exposes
its service through an interface, and this file creates the concrete
implementations.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings
from shared.database import MongoDatabase, get_database

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.users.interfaces import IUserService
    from modules.surveys.interfaces import ISurveyService
    from modules.reports.interfaces import IReportService
    from modules.payments.interfaces import IPaymentService


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access and cached
    as singletons within the container.

    The database handle is passed in explicitly (or taken from
    shared.database on first use) and owned by the application lifespan.
    """

    def __init__(
        self,
        database: Optional[MongoDatabase] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._database = database
        self._settings = settings
        self._user_service: "IUserService | None" = None
        self._auth_service: "IAuthService | None" = None
        self._survey_service: "ISurveyService | None" = None
        self._report_service: "IReportService | None" = None
        self._payment_service: "IPaymentService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def database(self) -> MongoDatabase:
        if self._database is None:
            self._database = get_database()
        return self._database

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.repository import UserRepository
            from modules.users.service import UserService
            self._user_service = UserService(UserRepository(self.database.db))
        return self._user_service

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.repository import RevokedTokenRepository
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                settings=self.settings,
                users=self.users,
                revocations=RevokedTokenRepository(self.database.db),
            )
        return self._auth_service

    @property
    def reports(self) -> "IReportService":
        """Get the report service instance."""
        if self._report_service is None:
            from modules.reports.repository import ReportRepository
            from modules.reports.service import ReportService
            from modules.surveys.repository import SurveyRepository
            self._report_service = ReportService(
                repository=ReportRepository(self.database.db),
                surveys=SurveyRepository(self.database.db),
            )
        return self._report_service

    @property
    def surveys(self) -> "ISurveyService":
        """Get the survey service instance."""
        if self._survey_service is None:
            from modules.surveys.repository import SurveyRepository, CommentRepository
            from modules.surveys.service import SurveyService
            self._survey_service = SurveyService(
                repository=SurveyRepository(self.database.db),
                comments=CommentRepository(self.database.db),
                auth=self.auth,
                reports=self.reports,
            )
        return self._survey_service

    @property
    def payments(self) -> "IPaymentService":
        """Get the payment service instance."""
        if self._payment_service is None:
            from modules.payments.gateway import StripePaymentGateway
            from modules.payments.repository import PaymentRepository
            from modules.payments.service import PaymentService
            self._payment_service = PaymentService(
                repository=PaymentRepository(self.database.db),
                gateway=StripePaymentGateway(self.settings.stripe_secret_key),
                auth=self.auth,
            )
        return self._payment_service

    def ensure_indexes(self) -> None:
        """Create the indexes every repository relies on."""
        from modules.auth.repository import RevokedTokenRepository
        from modules.payments.repository import PaymentRepository
        from modules.reports.repository import ReportRepository
        from modules.surveys.repository import SurveyRepository, CommentRepository
        from modules.users.repository import UserRepository

        db = self.database.db
        for repository_class in (
            UserRepository,
            RevokedTokenRepository,
            SurveyRepository,
            CommentRepository,
            ReportRepository,
            PaymentRepository,
        ):
            repository_class(db).ensure_indexes()

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_service = None
        self._auth_service = None
        self._survey_service = None
        self._report_service = None
        self._payment_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def set_container(container: ServiceContainer) -> None:
    """Install a container built by the application lifespan."""
    global _container
    _container = container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() will create a fresh container with
    new service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_survey_service() -> "ISurveyService":
    """FastAPI dependency for survey service."""
    return get_container().surveys


def get_report_service() -> "IReportService":
    """FastAPI dependency for report service."""
    return get_container().reports


def get_payment_service() -> "IPaymentService":
    """FastAPI dependency for payment service."""
    return get_container().payments


def get_mongo_database() -> MongoDatabase:
    """FastAPI dependency for the shared database handle."""
    return get_container().database
