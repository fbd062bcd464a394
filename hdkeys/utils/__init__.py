"""Utility helpers for HD key derivation."""
