"""Configuration, logging, error formatting and the record store."""
