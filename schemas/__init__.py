"""Schemas module for generated structured files.

Provides Pydantic models for:
- The package manifest of a new project
- The project metadata (project DNA) record
"""

from .package_manifest import PackageManifest, ProtocolCompliance
from .project_metadata import (
    PROTOCOL_VERSION,
    AIContextInfo,
    PatternTags,
    ProjectMetadata,
    ProtocolVersions,
    TechnologyTags,
)

__all__ = [
    # Package manifest
    "PackageManifest",
    "ProtocolCompliance",
    # Project metadata
    "PROTOCOL_VERSION",
    "AIContextInfo",
    "PatternTags",
    "ProjectMetadata",
    "ProtocolVersions",
    "TechnologyTags",
]
