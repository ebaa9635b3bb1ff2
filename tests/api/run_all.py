#!/usr/bin/env python3
"""
NemLager API Test Runner

Runs all test modules in order:
1. Customer settings (v1, v2)
2. Products
3. Sign-in
4. Cron mail listing
5. Cron mail triggers

Usage:
    python -m tests.api.run_all                      # uses ./.env
    python -m tests.api.run_all --env staging.env
    python -m tests.api.run_all --base-url http://localhost:3000 --timeout 30
"""

import sys

from nemlager_api.runner import main

from . import test_01_settings
from . import test_02_products
from . import test_03_sign_in
from . import test_04_cron_mails
from . import test_05_cron_triggers


MODULES = [
    ("CUSTOMER SETTINGS", test_01_settings.get_tests()),
    ("PRODUCTS", test_02_products.get_tests()),
    ("SIGN-IN", test_03_sign_in.get_tests()),
    ("CRON MAILS", test_04_cron_mails.get_tests()),
    ("CRON TRIGGERS", test_05_cron_triggers.get_tests()),
]


if __name__ == "__main__":
    sys.exit(main(MODULES))
