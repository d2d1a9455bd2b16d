from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class ReleaseRules(BaseModel):
    host: str = "github.com"
    org: str = "kubernetes-sigs"
    project: str = "kubebuilder"
    artifact_prefix: str = "kubebuilder"
    path_prefix: str = "releases"
    legacy_epochs: list[str] = Field(default_factory=lambda: ["1", "2"])
    tarball_extension: str = ".tar.gz"

    model_config = ConfigDict(extra="forbid")

    @field_validator("legacy_epochs")
    @classmethod
    def single_characters(cls, v: list[str]) -> list[str]:
        bad = [e for e in v if len(e) != 1]
        if bad:
            raise ValueError(f"legacy_epochs entries must be single characters: {bad}")
        return v

    @field_validator("host", "org", "project", "artifact_prefix", "path_prefix")
    @classmethod
    def non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v


class OpsRules(BaseModel):
    log_level: str = "INFO"
    required_env: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")


class Rules(BaseModel):
    project: ProjectRules
    releases: ReleaseRules = Field(default_factory=ReleaseRules)
    ops: OpsRules = Field(default_factory=OpsRules)

    model_config = ConfigDict(extra="forbid")
