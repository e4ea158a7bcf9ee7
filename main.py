import logging
import sys
from pathlib import Path

import click

from app.core.config import settings
from app.core.database import check_connection, init_db

# ============================================================================
# Directory Setup
# ============================================================================
BASE_DIR = Path(__file__).parent
LOG_FILE = BASE_DIR / settings.log_file


# ============================================================================
# Logging Configuration
# ============================================================================
def resolve_log_level() -> int:
    """Debug mode wins over the configured level."""
    if settings.debug:
        return logging.DEBUG
    return logging.getLevelName(settings.log_level)


def setup_logging(log_file: Path = LOG_FILE):
    """Configure logging for the application."""
    log_file.parent.mkdir(parents=True, exist_ok=True)

    log_level = resolve_log_level()
    log_format = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] %(message)s"

    handlers = [
        logging.StreamHandler(sys.stdout),
        logging.FileHandler(
            log_file,
            mode="a",
            encoding="utf-8",
        ),
    ]

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )

    # Suppress verbose third-party logs
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    return logging.getLogger(__name__)


# ============================================================================
# CLI Commands
# ============================================================================
@click.group()
def cli():
    """Tasks Web API management CLI."""
    pass


@cli.command()
def info():
    """Display application information."""
    click.echo(f"Application: {settings.app_name}")
    click.echo(f"Version: {settings.app_version}")
    click.echo(f"Debug Mode: {settings.debug}")
    click.echo(f"Database: {settings.safe_database_url}")


@cli.command("init-db")
def init_db_command():
    """Create the database tables."""
    logger = setup_logging()
    logger.info("Initializing database...")
    try:
        check_connection()
        init_db()
    except Exception as e:
        logger.error(f"✗ Database initialization failed: {e}", exc_info=True)
        raise click.ClickException(str(e))
    click.echo("Database initialized")


if __name__ == "__main__":
    cli()
