"""Orchestration across domain rules and repositories."""
