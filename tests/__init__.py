"""
Test Suite for BMS Telemetry Twin

This module contains tests for:
- Channel profiles (test_profiles.py)
- Reading generation and classification (test_readings.py)
- Asset registry (test_assets.py)
- Historical synthesis (test_history.py)
- Subscriptions (test_subscriptions.py)
- Simulation clock (test_clock.py)
- Engine facade (test_telemetry.py)
- API endpoints (test_api.py)

Run tests with:
    pytest tests/ -v
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
