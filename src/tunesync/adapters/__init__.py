"""Readers for external payloads (snapshots, edit scripts)."""
