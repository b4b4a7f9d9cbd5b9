"""Test suite for the fan token ledger."""
