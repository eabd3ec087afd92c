"""Schemas: pydantic models for response envelopes."""
