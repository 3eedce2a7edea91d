"""Typed request and response models for the Wyre API."""
