"""
NemLager API Test Suite - live endpoints

Organized by:
- test_01_settings.py: Customer settings v1/v2
- test_02_products.py: Product listing
- test_03_sign_in.py: Password sign-in
- test_04_cron_mails.py: Cron mail listing and filters
- test_05_cron_triggers.py: Cron mail trigger endpoints

Run with pytest (needs a .env file, see .env.example) or the runner:
    python -m tests.api.run_all --env .env
"""
