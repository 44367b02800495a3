from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any
import os
import sys
import threading
import uuid

from loguru import logger as _loguru_logger

if TYPE_CHECKING:
    from loguru import Record


class LogFormat(StrEnum):
    """Supported logging output formats."""

    STANDARD = "standard"
    JSON = "json"


class LogLevel(StrEnum):
    """Supported log levels."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class SessionInfo:
    """Practice session context attached to every log record.

    Args:
        session_id: Unique identifier of the practice session
        level: Optional difficulty level being practiced
    """

    session_id: str
    level: str | None = None

    def __post_init__(self) -> None:
        if not self.session_id:
            object.__setattr__(self, "session_id", uuid.uuid4().hex)

    def __str__(self) -> str:
        if self.level:
            return f"{self.session_id[:8]}/{self.level}"
        return self.session_id[:8]


@dataclass(frozen=True)
class LoggerConfig:
    """Configuration for logger setup.

    Args:
        level: Logging level
        format_type: Output format type
        include_session: Whether to include practice session info
        service: Optional service name to include in log context
        use_stdout: Whether to use stdout instead of stderr
    """

    level: LogLevel = LogLevel.INFO
    format_type: LogFormat = LogFormat.STANDARD
    include_session: bool = True
    service: str | None = None
    use_stdout: bool = False


class SessionContextManager:
    """Thread-local holder for the active practice session context."""

    def __init__(self) -> None:
        self._local = threading.local()

    @property
    def current(self) -> SessionInfo | None:
        """Get current session info for this thread."""
        return getattr(self._local, "info", None)

    def set(self, *, session_info: SessionInfo) -> None:
        """Set session info for current thread.

        Args:
            session_info: Session information to set
        """
        setattr(self._local, "info", session_info)

    def clear(self) -> None:
        """Clear session info for current thread."""
        setattr(self._local, "info", None)


# Shared by every CoachLogger so that one session context covers all modules.
_session_contexts = SessionContextManager()


class CoachLogger:
    """Loguru wrapper with practice-session context and selectable output format.

    Args:
        name: Logger name/identifier
        config: Logger configuration
    """

    def __init__(self, *, name: str, config: LoggerConfig) -> None:
        self._name = name
        self._config = config
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Configure the loguru sink based on configuration."""
        _loguru_logger.remove()

        output_stream = sys.stdout if self._config.use_stdout else sys.stderr

        if self._config.format_type == LogFormat.JSON:
            _loguru_logger.add(
                output_stream,
                level=self._config.level.value,
                filter=self._context_filter,  # type: ignore[arg-type]
                serialize=True,
            )
        else:
            _loguru_logger.add(
                output_stream,
                format=self._get_format_string(),
                level=self._config.level.value,
                filter=self._context_filter,  # type: ignore[arg-type]
                colorize=True,
            )

    def _get_format_string(self) -> str:
        """Get the human readable format string.

        Returns:
            Loguru format string including the optional service and session parts
        """
        service_part = " | <blue>{extra[service]}</blue>" if self._config.service else ""
        session_part = " | <yellow>{extra[session]}</yellow>" if self._config.include_session else ""
        return (
            "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>"
            f"{service_part}{session_part} - <level>{{message}}</level>"
        )

    def _context_filter(self, record: "Record") -> bool:
        """Add session and service context to a log record.

        Args:
            record: Log record to enhance

        Returns:
            Always True to allow record through
        """
        session_info = _session_contexts.current
        record["extra"]["session"] = str(session_info) if session_info else ""
        if self._config.service:
            record["extra"]["service"] = self._config.service
        return True

    @contextmanager
    def session_context(
        self, *, session_id: str | None = None, level: str | None = None
    ) -> Generator[SessionInfo, None, None]:
        """Context manager binding log records to a practice session.

        Args:
            session_id: Optional specific session ID
            level: Optional difficulty level for context

        Yields:
            Created session info
        """
        previous = _session_contexts.current
        session_info = SessionInfo(session_id=session_id or uuid.uuid4().hex, level=level)
        _session_contexts.set(session_info=session_info)
        try:
            yield session_info
        finally:
            if previous is None:
                _session_contexts.clear()
            else:
                _session_contexts.set(session_info=previous)

    @property
    def session_info(self) -> SessionInfo | None:
        """Get current session info."""
        return _session_contexts.current

    def trace(self, message: str, **kwargs: Any) -> None:
        """Log trace message."""
        _loguru_logger.opt(depth=1).trace(message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        _loguru_logger.opt(depth=1).debug(message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        _loguru_logger.opt(depth=1).info(message, **kwargs)

    def success(self, message: str, **kwargs: Any) -> None:
        """Log success message."""
        _loguru_logger.opt(depth=1).success(message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        _loguru_logger.opt(depth=1).warning(message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        _loguru_logger.opt(depth=1).error(message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log exception with traceback."""
        _loguru_logger.opt(depth=1).exception(message, **kwargs)


_loggers: dict[str, CoachLogger] = {}


def _config_from_env(*, service: str | None) -> LoggerConfig:
    """Build logger configuration from environment variables.

    Args:
        service: Optional service name to include in log context

    Returns:
        Logger configuration honouring LOGLEVEL/LOG_LEVEL, LOG_FORMAT and LOG_JSON
    """
    level_env = os.getenv("LOGLEVEL", os.getenv("LOG_LEVEL", "INFO"))
    format_env = os.getenv("LOG_FORMAT", "standard")
    json_env = os.getenv("LOG_JSON", "false")

    if json_env.lower() in {"1", "true", "yes", "on"}:
        format_type = LogFormat.JSON
    else:
        try:
            format_type = LogFormat(format_env.lower())
        except ValueError:
            format_type = LogFormat.STANDARD

    try:
        level = LogLevel(level_env.upper())
    except ValueError:
        level = LogLevel.INFO

    return LoggerConfig(level=level, format_type=format_type, service=service)


def get_logger(
    name: str, *, service: str | None = None, config: LoggerConfig | None = None
) -> CoachLogger:
    """Get or create logger instance.

    Args:
        name: Logger name/identifier (use __name__ for module loggers)
        service: Optional service name to include in log context
        config: Optional specific configuration; defaults to the environment

    Returns:
        Configured logger instance

    Examples:
        logger = get_logger(__name__)
        logger = get_logger(__name__, service="cli")
    """
    cache_key = f"{name}:{service}" if service else name

    if cache_key in _loggers and config is None:
        return _loggers[cache_key]

    effective_config = config or _config_from_env(service=service)
    logger_instance = CoachLogger(name=name, config=effective_config)
    _loggers[cache_key] = logger_instance
    return logger_instance


def reset_loggers() -> None:
    """Drop cached loggers so that the next get_logger call re-reads the environment."""
    _loggers.clear()
