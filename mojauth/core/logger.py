from pathlib import Path
import sys

from loguru import logger

from mojauth.config.schema import Config


def _is_internal_auth_error(record) -> bool:
    return record["extra"].get("internal_error", False)


def _add_file_sink(path: Path, config: Config, **kwargs) -> None:
    try:
        logger.add(
            path,
            rotation=config.logging.rotation,
            retention=config.logging.retention,
            level=config.logging.level,
            enqueue=True,  # Async safe
            **kwargs,
        )
    except OSError as e:
        sys.stderr.write(f"Failed to open log file {path}: {e}\n")


def configure_logger(config: Config) -> None:
    """Configure loguru sinks for mojauth.

    Internal authentication errors (bugs in our own requests) are tagged with
    ``internal_error`` and can be routed to their own file through
    ``logging.internal_file_path``, apart from ordinary user-facing errors.
    """
    logger.remove()
    logger.add(sys.stderr, level=config.logging.level)

    if config.logging.file_enabled:
        _add_file_sink(Path(config.logging.file_path).expanduser(), config)

    if config.logging.internal_file_path:
        _add_file_sink(
            Path(config.logging.internal_file_path).expanduser(),
            config,
            filter=_is_internal_auth_error,
        )
