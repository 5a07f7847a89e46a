"""Core services: frequency, scoring, generation and session tracking."""
