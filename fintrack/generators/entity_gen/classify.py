"""Field classification: which derived shapes a field belongs to."""
from typing import Iterable
from fintrack.generators.entity_gen.types import Classification, Flag


def classify(flags: Iterable[Flag]) -> Classification:
    """
    Compute shape membership for a field from its flags.

    Every output defaults to included; flags only switch outputs off, except
    HasDefault which switches on optional wrapping in the create shapes.
    """
    flags = frozenset(flags)
    return Classification(
        include_in_create=Flag.ID not in flags,
        include_in_create_request=Flag.NOT_SETTABLE not in flags,
        include_in_update=not (flags & {Flag.NOT_UPDATABLE, Flag.NOT_SETTABLE}),
        include_in_update_request=not (flags & {Flag.NOT_UPDATABLE, Flag.NOT_SETTABLE}),
        include_in_response=Flag.NOT_VIEWABLE not in flags,
        wrap_optional_on_create=Flag.HAS_DEFAULT in flags,
    )
