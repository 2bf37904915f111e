"""
Main entry point for geoscape.
Usage: python -m geoscape [OPTION]...
"""

import logging
import sys
from typing import Optional, Sequence

from .settings import Configuration
from .utils.logging_config import setup_logging


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point."""
    logger = logging.getLogger(f"{__name__}.main")
    if argv is None:
        argv = sys.argv[1:]

    config = Configuration()
    if not config.init(argv):
        return 0

    setup_logging(config)
    config.log_folders()

    validation = config.validate()
    if validation.warnings:
        logger.warning("Configuration warnings detected:")
        for warning in validation.warnings:
            logger.warning(f"  {warning}")

    if not validation.is_valid:
        logger.error("Configuration validation failed:")
        for error in validation.errors:
            logger.error(f"  {error}")
        return 1

    logger.info(f"Base ruleset: {config.rulesets.primary}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
