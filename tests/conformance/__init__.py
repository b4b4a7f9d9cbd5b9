"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of the fan token ledger.
Any compliant implementation MUST pass these tests.

The tests are organized by invariant:
1. conservation.py - Supply equals the sum of balances, within the cap
2. atomicity.py - All-or-nothing entry points
3. authorization.py - Admin gating, pause gating, zero-address rejection
4. determinism.py - Reproducible behavior

These tests use hypothesis for property-based testing.
"""
