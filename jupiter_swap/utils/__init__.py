"""Shared utilities for the Jupiter swap client."""
