"""Test suite for gen-kit."""
