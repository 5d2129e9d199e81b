"""元数据提供者模块"""
from .base import MediaMetadataProvider, ProviderInfo

__all__ = [
    'MediaMetadataProvider',
    'ProviderInfo',
]
