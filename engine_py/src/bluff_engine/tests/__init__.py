"""Tests for the bluff_engine package."""
