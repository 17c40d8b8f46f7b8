"""Project metadata schema.

Written once to ``.kt-context/project-dna.json`` when a project is created.
kt-cli never reads it back.
"""

from pydantic import BaseModel, ConfigDict, Field

PROTOCOL_VERSION = "1.0.0"


class ProtocolVersions(BaseModel):
    """Version of each Knowledge Transfer Protocol applied to the project."""

    model_config = ConfigDict(populate_by_name=True)

    code_organization: str = Field(PROTOCOL_VERSION, alias="codeOrganization")
    git_workflow: str = Field(PROTOCOL_VERSION, alias="gitWorkflow")
    documentation: str = Field(PROTOCOL_VERSION)
    protocol_evolution: str = Field(PROTOCOL_VERSION, alias="protocolEvolution")


class AIContextInfo(BaseModel):
    """Describes the generated AI context document."""

    model_config = ConfigDict(populate_by_name=True)

    comprehensive: bool = True
    self_contained: bool = Field(True, alias="selfContained")
    last_updated: str = Field(..., alias="lastUpdated", description="ISO-8601 timestamp")


class TechnologyTags(BaseModel):
    """Fixed technology tags of the generated project."""

    runtime: str = "node.js"
    framework: str = "express"
    database: str = "json-files"


class PatternTags(BaseModel):
    """Fixed architecture pattern tags of the generated project."""

    architecture: str = "modular-monolith"
    testing: str = "unit-tests"
    documentation: str = "comprehensive"


class ProjectMetadata(BaseModel):
    """Project DNA record.

    Captures the project name, the creation timestamp, the protocol
    version and the fixed technology and pattern tags.
    """

    model_config = ConfigDict(populate_by_name=True)

    project: str = Field(..., min_length=1, description="Project name")
    type: str = Field("kt-cli-project", description="Project kind")
    version: str = Field(PROTOCOL_VERSION, description="Protocol version")
    generated: str = Field(..., description="ISO-8601 creation timestamp")
    protocols: ProtocolVersions = Field(default_factory=ProtocolVersions)
    ai_context: AIContextInfo = Field(..., alias="aiContext")
    technology: TechnologyTags = Field(default_factory=TechnologyTags)
    patterns: PatternTags = Field(default_factory=PatternTags)

    @classmethod
    def for_project(cls, project_name: str, generated: str) -> "ProjectMetadata":
        return cls(
            project=project_name,
            generated=generated,
            ai_context=AIContextInfo(last_updated=generated),
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
