"""Project scaffolding module for kt-cli.

Creates new AI-ready projects with:
- Directory structure
- Boilerplate files (manifest, README, server and test stubs, API docs)
- Knowledge Transfer Protocol documents
- AI assistant context and project metadata
- Git initialization
"""

from .context import (
    AI_CONTEXT_FILE,
    METADATA_FILE,
    build_metadata,
    render_ai_context,
    render_context_files,
)
from .errors import FilesystemError, ScaffoldError, UserInputError
from .generator import ProjectGenerator
from .protocols import PROTOCOL_DOCUMENTS, ProtocolMaterializer, bundled_protocols_dir
from .templates import (
    CONTEXT_DIR,
    EXPRESS_TEMPLATE,
    PROTOCOLS_DIR,
    ProjectTemplate,
    TemplateContext,
    render_files,
)
from .writer import copy_tree, ensure_directory, write_text

__all__ = [
    # Generator
    "ProjectGenerator",
    # Templates
    "CONTEXT_DIR",
    "EXPRESS_TEMPLATE",
    "PROTOCOLS_DIR",
    "ProjectTemplate",
    "TemplateContext",
    "render_files",
    # Context
    "AI_CONTEXT_FILE",
    "METADATA_FILE",
    "build_metadata",
    "render_ai_context",
    "render_context_files",
    # Protocols
    "PROTOCOL_DOCUMENTS",
    "ProtocolMaterializer",
    "bundled_protocols_dir",
    # Writer
    "copy_tree",
    "ensure_directory",
    "write_text",
    # Errors
    "FilesystemError",
    "ScaffoldError",
    "UserInputError",
]
