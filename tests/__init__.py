"""
TradeTrackr Test Suite
======================

Run all tests:
    pytest tests/ -v

Run specific test file:
    pytest tests/test_pnl_calculations.py -v

Run specific test:
    pytest tests/test_pnl_calculations.py::TestReconcile::test_money_only_derives_percentage -v

No database or network access is required; every module under test is pure.
"""
