"""
Integration Example: Loading Straps at Startup
==============================================

Loads the sample ``config/straps.xml`` for the environment named by
``PROGRAM_ENV`` and configures logging from it.

    PROGRAM_ENV=prod python integration_example.py
"""

import os
import sys
from pathlib import Path

import straps
from straps.utils import setup_logging


def main() -> int:
    # Fall back to the sample document shipped with the project
    os.environ.setdefault(straps.BASE_DIR_VARIABLE, str(Path(__file__).resolve().parent))
    os.environ.setdefault("PROGRAM_ENV", "dev")

    try:
        settings = straps.load("PROGRAM_ENV", "config", dotenv_path=".env")
    except straps.StrapsLoadError as e:
        print(f"Startup failed: {e}", file=sys.stderr)
        return 1

    logger = setup_logging(settings)
    logger.info(f"Environment: {settings.name} ({settings.source})")
    logger.info(f"Company: {settings.get_string('CompanyName')}")

    if settings.get_bool("UseEmail", default=False):
        host, port = settings.get_string("Mail.Host"), settings.get_int("Mail.Port")
        logger.info(f"Mail relay: {host}:{port}")

    mail_settings = settings.get_strings_matching(r"^Mail\.")
    logger.info(f"Mail settings: {mail_settings}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
