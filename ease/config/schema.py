"""Configuration schema definitions using Pydantic for validation.

Every option accepts its snake_case name as well as the camelCase name
used in Maven plugin configuration (``artifactListLocation``,
``excludeTransitive``, ...), so existing plugin settings can be copied
into an ``ease.toml`` unchanged.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class GoalConfig(BaseModel):
    """Base configuration shared by all goals."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class FreezeConfig(GoalConfig):
    """Configuration for the freeze goal.

    Attributes:
        ignore_empty_artifacts: Skip attached artifacts that have no file
            instead of failing.
    """

    ignore_empty_artifacts: bool = False


class AggregateConfig(GoalConfig):
    """Configuration for the aggregate goal.

    Attributes:
        includes: ``groupId:artifactId:type:version`` patterns to include.
        excludes: Patterns to exclude.
        exclude_transitive: Only consider directly declared dependencies.
        merge: ``union`` merges distinct lines sorted; ``concatenate``
            appends each dependency's list in dependency-id order.
    """

    includes: Optional[List[str]] = None
    excludes: Optional[List[str]] = None
    exclude_transitive: bool = False
    merge: Literal["union", "concatenate"] = "union"


class AttachConfig(GoalConfig):
    """Configuration for the attach goal.

    Attributes:
        artifact_list_location: Artifact list to attach from (required).
        artifact_repository_location: Alternate repository directory; must
            not be the local repository.
    """

    artifact_list_location: Optional[str] = None
    artifact_repository_location: Optional[str] = None


class ThawConfig(GoalConfig):
    """Configuration for the thaw goal.

    Attributes:
        include_group_ids: Dependency groupIds whose artifacts are thawed.
        exclude_artifact_ids: Dependency artifactIds to leave out.
        thaw_dependency_repository_location: Fixed directory to look up
            artifact lists and artifacts in, instead of the local repository.
        transitive: Select from the whole dependency tree rather than the
            declared dependencies.
    """

    include_group_ids: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices(
            "include_group_ids", "includeGroupIds", "group_ids", "groupIds"
        ),
    )
    exclude_artifact_ids: List[str] = Field(default_factory=list)
    thaw_dependency_repository_location: Optional[str] = None
    transitive: bool = False


class SignaturesConfig(GoalConfig):
    """Configuration for the attachsignatures goal.

    Attributes:
        keep_project_types: Types of the project's own artifacts that are
            re-attached; everything else the project produced is dropped.
    """

    keep_project_types: List[str] = Field(default_factory=lambda: ["pom", "pom.asc"])

    @field_validator("keep_project_types")
    @classmethod
    def validate_types(cls, v: List[str]) -> List[str]:
        """Reject blank type names."""
        for type_ in v:
            if not type_ or not type_.strip():
                raise ValueError("keep_project_types must not contain blank types")
        return v


class EaseConfig(GoalConfig):
    """Top-level configuration.

    Attributes:
        local_repository: Local repository directory override.
        build_directory: Build output directory override.
        freeze: Freeze goal options.
        aggregate: Aggregate goal options.
        attach: Attach goal options.
        thaw: Thaw goal options.
        attachsignatures: Signature attach goal options.
    """

    local_repository: Optional[str] = None
    build_directory: Optional[str] = None
    freeze: FreezeConfig = Field(default_factory=FreezeConfig)
    aggregate: AggregateConfig = Field(default_factory=AggregateConfig)
    attach: AttachConfig = Field(default_factory=AttachConfig)
    thaw: ThawConfig = Field(default_factory=ThawConfig)
    attachsignatures: SignaturesConfig = Field(default_factory=SignaturesConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EaseConfig":
        """Create configuration from dictionary.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
