from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class TrackFieldSpec(BaseModel):
    """
    Selects the optional fields written by the track-event eval stage.
    The switches are independent; any combination is valid.
    """

    model_config = ConfigDict(frozen=True)

    with_userid: bool = Field(
        default=False,
        description="(optional) Emit userId, resolved from the impersonated or authenticated user",
    )
    with_namespace: bool = Field(
        default=False,
        description="(optional) Emit namespace from objectRef.namespace",
    )
    with_ev_verb: bool = Field(
        default=False,
        description="(optional) Emit event_verb from the audit verb",
    )
    with_ev_subject: bool = Field(
        default=False,
        description="(optional) Emit event_subject from objectRef.resource",
    )


class ResourceQuerySpec(BaseModel):
    """
    Everything needed to build the track-event query for one resource type.
    Sequences are stored as tuples and properties as a read-only mapping so a
    shared spec renders the same query on every call.
    """

    model_config = ConfigDict(frozen=True)

    api_group: str = Field(
        ..., description="(mandatory) API group of the tracked resource, e.g. tekton.dev"
    )
    resource: str = Field(
        ..., description="(mandatory) Plural resource name, e.g. pipelineruns"
    )
    filters: tuple[str, ...] = Field(
        default=(),
        description="(optional) Extra search predicates, appended verbatim",
    )
    fields: tuple[str, ...] = Field(
        default=(),
        description="(optional) Ordered de-duplication key fields",
    )
    track_fields: TrackFieldSpec = Field(
        default_factory=TrackFieldSpec,
        description="(optional) Optional track-event fields to emit",
    )
    properties: Mapping[str, str] = Field(
        default_factory=dict,
        description="(optional) Track-event property name to source field, in output order",
    )

    @field_validator("properties", mode="after")
    @classmethod
    def _freeze_properties(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        # insertion order is the rendering order
        return MappingProxyType(dict(value))

    @field_serializer("properties")
    def _serialize_properties(self, value: Mapping[str, str]) -> dict[str, Any]:
        return dict(value)
