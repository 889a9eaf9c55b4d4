from typing import Mapping

from common.model.models import TrackFieldSpec
from querygen.constants import (
    EXCLUDE_FIELDS_CMD,
    INCLUDE_FIELDS_CMD,
    STAGE_SEPARATOR,
    USER_ID_EXPR,
)


def gen_properties_json_expr(properties_map: Mapping[str, str]) -> str:
    """
    Render a json_object() call building the track-event properties.
    Keys are emitted as double-quoted names and values as single-quoted field
    references, in the mapping's iteration order.
    """
    pairs = [f"\"{name}\",'{field}'" for name, field in properties_map.items()]
    return f"json_object({','.join(pairs)})"


def gen_track_fields(spec: TrackFieldSpec, properties_map: Mapping[str, str]) -> str:
    """
    Render the stages that reshape an audit record into a track event.

    The eval assignments are always emitted in alphabetical order of the
    output field, with `properties` last; disabled optional fields are left
    out. The include and exclude field stages follow unconditionally.

    :param spec: which optional fields to emit
    :param properties_map: property name to source field for the JSON payload
    :return: the eval, include and exclude stages joined by the stage separator
    """
    assignments = []
    if spec.with_ev_subject:
        assignments.append("event_subject='objectRef.resource'")
    if spec.with_ev_verb:
        assignments.append("event_verb='verb'")
    assignments.append("messageId='auditID'")
    if spec.with_namespace:
        assignments.append("namespace='objectRef.namespace'")
    assignments.append("timestamp='requestReceivedTimestamp'")
    assignments.append('type="track"')
    if spec.with_userid:
        assignments.append(f"userId={USER_ID_EXPR}")
    assignments.append(f"properties={gen_properties_json_expr(properties_map)}")

    return STAGE_SEPARATOR.join(
        [f"eval {','.join(assignments)}", INCLUDE_FIELDS_CMD, EXCLUDE_FIELDS_CMD]
    )
