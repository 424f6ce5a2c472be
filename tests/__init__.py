"""Tests for daftarhadir."""
