"""
Configuration management for Penneo Python SDK

This module provides the closed-schema configuration store owned by each
connector.
"""

from .connector_config import (
    ConnectorConfig,
    CONFIG_FIELDS,
    CREDENTIAL_FIELDS,
    normalize_base_url,
)

__all__ = [
    'ConnectorConfig',
    'CONFIG_FIELDS',
    'CREDENTIAL_FIELDS',
    'normalize_base_url',
]
