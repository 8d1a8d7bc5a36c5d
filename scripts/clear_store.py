#!/usr/bin/env python3

import argparse
import logging
import sys
from pathlib import Path

# Add project root to Python path
sys.path.append(str(Path(__file__).parent.parent))

from campus_portal.config.storage import CERTIFICATE_STORE_KEY, EVENT_STORE_KEY, OD_STORE_KEY
from campus_portal.storage import SQLiteStorage

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

STORE_KEYS = {
    'events': EVENT_STORE_KEY,
    'certificates': CERTIFICATE_STORE_KEY,
    'od': OD_STORE_KEY,
}

def clear_store(store: str):
    """Clear persisted store state ('all' clears session keys too)"""
    storage = SQLiteStorage()
    if store == 'all':
        storage.clear()
        return
    storage.remove_item(STORE_KEYS[store])
    logger.info(f"Cleared persisted {store} state")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description='Clear persisted portal state')
    parser.add_argument('store', choices=list(STORE_KEYS) + ['all'])
    clear_store(parser.parse_args().store)
