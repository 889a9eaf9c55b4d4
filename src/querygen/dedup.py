from typing import Sequence


def gen_dedup_eval(fields: Sequence[str]) -> str:
    """
    Render a dedup stage keyed on the given fields, in order.
    An empty field list renders the bare `dedup` keyword.
    """
    return " ".join(["dedup"] + [f'"{field}"' for field in fields])
