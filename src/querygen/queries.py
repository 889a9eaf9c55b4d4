"""
Track-event queries for the Kubernetes resources we report on.

Each tracked resource type is a fixed ResourceQuerySpec. The query is the
search stage for that resource, a dedup stage over its key fields and the
track-event shaping stages, joined by the stage separator.
"""

from typing import Callable, Sequence

from common.model.models import ResourceQuerySpec, TrackFieldSpec
from querygen.constants import SEARCH_PREAMBLE, STAGE_SEPARATOR
from querygen.dedup import gen_dedup_eval
from querygen.track_fields import gen_track_fields

APPLICATION_LABEL = "responseObject.metadata.labels.appstudio.openshift.io/application"
COMPONENT_LABEL = "responseObject.metadata.labels.appstudio.openshift.io/component"
PIPELINE_TYPE_LABEL = (
    "responseObject.metadata.labels.pipelines.appstudio.openshift.io/type"
)

APPLICATION_QUERY_SPEC = ResourceQuerySpec(
    api_group="appstudio.redhat.com",
    resource="applications",
    filters=[
        '("impersonatedUser.username"="*" OR '
        '(user.username="*" AND NOT user.username="system:*"))',
        '(verb!=create OR "responseObject.metadata.resourceVersion"="*")',
    ],
    fields=[
        "objectRef.apiGroup",
        "objectRef.apiVersion",
        "objectRef.resource",
        "verb",
        "auditID",
        "objectRef.name",
        "requestReceivedTimestamp",
        "impersonatedUser.username",
        "user.username",
    ],
    track_fields=TrackFieldSpec(
        with_userid=True,
        with_ev_verb=True,
        with_ev_subject=True,
    ),
    properties={
        "apiGroup": "objectRef.apiGroup",
        "apiVersion": "objectRef.apiVersion",
        "kind": "objectRef.resource",
        "name": "objectRef.name",
    },
)

PIPELINE_RUN_QUERY_SPEC = ResourceQuerySpec(
    api_group="tekton.dev",
    resource="pipelineruns",
    filters=[
        # Rendered without a separator between the two predicates; consumers
        # match on this exact text.
        f'"{PIPELINE_TYPE_LABEL}"=build'
        '"responseObject.metadata.resourceVersion"="*"',
    ],
    fields=[
        "objectRef.apiGroup",
        "objectRef.apiVersion",
        APPLICATION_LABEL,
        COMPONENT_LABEL,
        "objectRef.resource",
        "verb",
        "auditID",
        "objectRef.namespace",
        "requestReceivedTimestamp",
    ],
    track_fields=TrackFieldSpec(
        with_namespace=True,
        with_ev_verb=True,
        with_ev_subject=True,
    ),
    properties={
        "apiGroup": "objectRef.apiGroup",
        "apiVersion": "objectRef.apiVersion",
        "kind": "objectRef.resource",
        "application": APPLICATION_LABEL,
        "component": COMPONENT_LABEL,
    },
)


def gen_search_cmd(
    index: str, api_group: str, resource: str, filters: Sequence[str] = ()
) -> str:
    """
    Render the search stage selecting successful create events for a resource.
    The index name and filters are inserted verbatim.
    """
    predicates = [
        f'index="{index}"',
        SEARCH_PREAMBLE,
        f'"objectRef.apiGroup"="{api_group}"',
        f'"objectRef.resource"="{resource}"',
    ]
    predicates.extend(filters)
    return f"search {' '.join(predicates)}"


def gen_resource_query(spec: ResourceQuerySpec, index: str) -> str:
    """
    Compose the complete track-event query for a resource type.
    :param spec: the resource type's fixed query configuration
    :param index: the index to search
    :return: the query string
    """
    return STAGE_SEPARATOR.join(
        [
            gen_search_cmd(index, spec.api_group, spec.resource, spec.filters),
            gen_dedup_eval(spec.fields),
            gen_track_fields(spec.track_fields, spec.properties),
        ]
    )


def gen_application_query(index: str) -> str:
    return gen_resource_query(APPLICATION_QUERY_SPEC, index)


def gen_pipeline_run_query(index: str) -> str:
    return gen_resource_query(PIPELINE_RUN_QUERY_SPEC, index)


RESOURCE_QUERIES: dict[str, Callable[[str], str]] = {
    "application": gen_application_query,
    "pipelinerun": gen_pipeline_run_query,
}
