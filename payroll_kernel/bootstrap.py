"""
Startup wiring -- choose a backend once and hand it to the session model.

Responsibility:
    Initializes logging and the engine from a PayrollConfig, probes the
    store, and builds the RepositorySet every later call uses.  The choice
    between the store-backed and the stand-in backend happens here, once;
    no operation re-probes or switches backends afterwards.

Architecture position:
    Outermost kernel layer.  The only kernel module that reads a
    PayrollConfig.  Presentation code depends on PayrollSystem and
    UserSession, never on repositories directly.

Failure modes:
    - StoreUnavailableError from build_repositories() when the probe fails
      and the configuration forbids the stand-in backend.
    - An engine that cannot be built (unknown dialect, driver not installed)
      is treated like a failed probe.
"""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from payroll_config import PayrollConfig
from payroll_kernel.db.engine import (
    get_session_factory,
    init_engine_from_url,
    probe_connection,
    reset_engine,
)
from payroll_kernel.domain.session import UserSession, open_session
from payroll_kernel.exceptions import StoreUnavailableError
from payroll_kernel.logging_config import (
    LogContext,
    configure_logging,
    get_logger,
    new_correlation_id,
)
from payroll_kernel.repositories import (
    RepositorySet,
    SqlAuthRepository,
    SqlEmployeeRepository,
    SqlPayrollRepository,
    StandInAuthRepository,
    StandInEmployeeRepository,
    StandInPayrollRepository,
)
from payroll_kernel.services.credential_validator import CredentialValidator

logger = get_logger("bootstrap")


def sql_repositories(session_factory: sessionmaker[Session]) -> RepositorySet:
    """Store-backed repositories sharing one session factory."""
    return RepositorySet(
        auth=SqlAuthRepository(session_factory),
        employees=SqlEmployeeRepository(session_factory),
        payroll=SqlPayrollRepository(session_factory),
        backend="sql",
    )


def standin_repositories() -> RepositorySet:
    """Repositories over the fixed sample data."""
    return RepositorySet(
        auth=StandInAuthRepository(),
        employees=StandInEmployeeRepository(),
        payroll=StandInPayrollRepository(),
        backend="standin",
    )


def _connect(config: PayrollConfig) -> bool:
    """Build the engine and probe it; False when either step fails."""
    try:
        engine = init_engine_from_url(
            config.database_url,
            echo=config.echo,
            pool_size=config.pool_size,
            max_overflow=config.max_overflow,
            pool_timeout=config.pool_timeout,
            pool_recycle=config.pool_recycle,
            connect_timeout=config.connect_timeout,
        )
    except (SQLAlchemyError, ModuleNotFoundError):
        # unknown dialect or a database driver that is not installed
        logger.warning(
            "engine_initialization_failed",
            extra={"database_url": config.masked_database_url},
            exc_info=True,
        )
        return False
    return probe_connection(engine)


def build_repositories(config: PayrollConfig) -> RepositorySet:
    """
    Probe the configured store and return the backend to use for the run.

    An engine that cannot even be built counts as an unreachable store.

    Raises:
        StoreUnavailableError: the store is unreachable and
            config.allow_standin is False.
    """
    configure_logging(level=config.log_level_number)

    if _connect(config):
        repositories = sql_repositories(get_session_factory())
    elif config.allow_standin:
        reset_engine()
        repositories = standin_repositories()
        logger.warning(
            "standin_backend_selected",
            extra={"database_url": config.masked_database_url},
        )
    else:
        reset_engine()
        raise StoreUnavailableError(
            "startup_probe",
            f"cannot reach {config.masked_database_url}",
        )

    logger.info("backend_selected", extra={"backend": repositories.backend})
    return repositories


class PayrollSystem:
    """
    Entry point for a presentation layer: log in, get a UserSession.

    Holds the RepositorySet chosen at startup.
    """

    def __init__(self, repositories: RepositorySet):
        self._repositories = repositories
        self._validator = CredentialValidator(repositories.auth)

    @property
    def backend(self) -> str:
        return self._repositories.backend

    def login(self, username: str | None, password: str | None) -> UserSession | None:
        """UserSession for valid credentials with a recognized role, else None."""
        with LogContext.bind(operation="login", correlation_id=new_correlation_id()):
            credential = self._validator.validate(username, password)
            return open_session(credential, self._repositories)

    @classmethod
    def from_config(cls, config: PayrollConfig) -> PayrollSystem:
        return cls(build_repositories(config))
