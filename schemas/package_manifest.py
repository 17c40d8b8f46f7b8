"""Package manifest schema.

The ``package.json`` written into every new project.
"""

from pydantic import BaseModel, ConfigDict, Field


class ProtocolCompliance(BaseModel):
    """Knowledge Transfer Protocol compliance marker."""

    version: str = Field("1.0.0", description="Protocol version the project follows")
    compliance: str = Field("enforced", description="Compliance level")


class PackageManifest(BaseModel):
    """npm package manifest for a scaffolded project."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Package name (the project name)")
    version: str = Field("1.0.0", description="Package version")
    description: str = Field(..., description="One-line description")
    main: str = Field("src/server.js", description="Entry point")
    scripts: dict[str, str] = Field(
        default_factory=lambda: {
            "start": "node src/server.js",
            "dev": "nodemon src/server.js",
            "test": "node tests/test-server.js",
        },
        description="npm scripts",
    )
    dependencies: dict[str, str] = Field(
        default_factory=lambda: {"express": "^4.18.2"},
        description="Runtime dependencies",
    )
    dev_dependencies: dict[str, str] = Field(
        default_factory=lambda: {"nodemon": "^3.0.0"},
        alias="devDependencies",
        description="Development dependencies",
    )
    kt_protocols: ProtocolCompliance = Field(default_factory=ProtocolCompliance)

    @classmethod
    def for_project(cls, project_name: str) -> "PackageManifest":
        return cls(
            name=project_name,
            description=f"{project_name} - Built with Knowledge Transfer Protocols",
        )

    def to_json(self) -> str:
        """Serialize with npm field names, two-space indented."""
        return self.model_dump_json(by_alias=True, indent=2)
