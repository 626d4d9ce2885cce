"""Data models for rn-starter."""
from rnstarter.models.app import AppIdentity, DeepLinkConfig
from rnstarter.models.platform import Platform, PlatformProfile

__all__ = [
    'AppIdentity',
    'DeepLinkConfig',
    'Platform',
    'PlatformProfile',
]
