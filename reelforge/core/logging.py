import asyncio
import logging
import sys
from types import TracebackType
from typing import Any

from loguru import logger

from reelforge.config import get_settings


class InterceptHandler(logging.Handler):
    """Intercept stdlib logging and redirect to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _drop_probe_access_logs(record: dict[str, Any]) -> bool:
    """Drop uvicorn access lines for /health probes."""
    from_uvicorn = (record["name"] or "").startswith("uvicorn")
    return not (from_uvicorn and "/health" in record["message"])


def _log_uncaught_exception(
    exc_type: type[BaseException],
    exc_value: BaseException,
    exc_traceback: TracebackType | None,
) -> None:
    """Log uncaught exceptions before the interpreter exits."""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logger.opt(exception=(exc_type, exc_value, exc_traceback)).critical("uncaught_exception")


def _log_unhandled_task_exception(
    loop: asyncio.AbstractEventLoop, context: dict[str, Any]
) -> None:
    """Log exceptions from asyncio tasks nobody awaited. Non-fatal."""
    exception = context.get("exception")
    logger.bind(
        message=context.get("message", ""),
        error=str(exception) if exception else None,
    ).error("unhandled_task_exception")


def install_exception_hooks(loop: asyncio.AbstractEventLoop | None = None) -> None:
    """Route process-level and event-loop-level failures through loguru."""
    sys.excepthook = _log_uncaught_exception
    if loop is not None:
        loop.set_exception_handler(_log_unhandled_task_exception)


def setup_logging() -> None:
    """Configure loguru for the application."""
    settings = get_settings()

    # Remove default handler
    logger.remove()

    # Colors in debug, JSON lines or plain lines otherwise
    if settings.debug:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format=(
                "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "<level>{message}</level> | {extra}"
            ),
            backtrace=True,
            diagnose=True,
        )
    elif settings.log_json:
        # One JSON object per line for log shippers
        logger.add(
            sys.stderr,
            level=settings.log_level,
            serialize=True,
            filter=_drop_probe_access_logs,
            backtrace=False,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stderr,
            level=settings.log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message} | {extra}",
            filter=_drop_probe_access_logs,
            backtrace=True,
            diagnose=False,
        )

    # Intercept stdlib logging (uvicorn, httpx, apscheduler, etc.)
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in [
        "uvicorn",
        "uvicorn.error",
        "uvicorn.access",
        "httpx",
        "apscheduler",
        "googleapiclient.discovery",
    ]:
        logging.getLogger(name).handlers = [InterceptHandler()]


def get_logger(name: str) -> Any:
    """Get a logger bound to a name."""
    return logger.bind(name=name)
