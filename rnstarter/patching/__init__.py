"""Native config patching for generated React Native projects."""

from .patcher import NativeConfigPatcher

__all__ = [
    "NativeConfigPatcher",
]
