#!/usr/bin/env python3
"""
POS Inventory Service
Flask-based service for inventory items and stock control.
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from pos_inventory.validators import validate_config
from pos_inventory.api.main import main


if __name__ == '__main__':
    # Fail fast before the application reads the environment
    validate_config()
    main()
