"""Runtime environment for the portal.

Reads a local .env file (if there is one) into the process environment, then
decides from ENVIRONMENT whether the portal runs in production. Other config
modules import IS_PRODUCTION_ENVIRONMENT from here, so the .env values are in
place before they read STORAGE_URL, STORAGE_PATH or PINATA_JWT.

In production these variables come from the host environment; the .env file
is a development convenience only.
"""

import os
import logging
from dotenv import load_dotenv

load_dotenv()

env_setting = os.environ.get('ENVIRONMENT', '').lower()
IS_PRODUCTION_ENVIRONMENT = env_setting == 'production'

if env_setting not in ['development', 'production']:
    logging.warning(
        f"ENVIRONMENT is '{env_setting}', expected 'development' or 'production'; "
        "running the portal with development settings."
    )

__all__ = ['IS_PRODUCTION_ENVIRONMENT']
