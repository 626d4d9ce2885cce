"""Project scaffolding for React Native CLI and Expo apps.

Runs the platform generator and overlays the rn-starter template tree.
"""

from .materializer import ProjectMaterializer

__all__ = [
    "ProjectMaterializer",
]
