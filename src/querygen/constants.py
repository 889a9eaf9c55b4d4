STAGE_SEPARATOR = "|"

USER_ID_EXPR = "coalesce('impersonatedUser.username','user.username')"
"""
str: Resolves the acting user, preferring the impersonated user when the
request was made on someone else's behalf.
"""

INCLUDE_FIELDS_CMD = (
    "fields event_subject,event_verb,messageId,namespace,properties,timestamp,type,userId"
)
EXCLUDE_FIELDS_CMD = "fields - _*"

SEARCH_PREAMBLE = (
    'log_type=audit verb=create "responseStatus.code" IN (200, 201)'
)
