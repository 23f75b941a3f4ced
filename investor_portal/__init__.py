"""Investor portal authentication service."""
