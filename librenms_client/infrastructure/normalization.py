"""Response normalization for inconsistently shaped API collections.

Two repairs are applied at the boundary so callers always see a flat,
correctly counted collection:
- flatten_one_level: the API wraps some collections in a vestigial outer
  list (services); the inner lists are concatenated and count recomputed.
- filter_to_one: some resources have no single-item endpoint (device groups,
  services); the full collection is fetched and reduced to the first item
  matching the requested ID or name.
"""

from __future__ import annotations

from typing import TypeVar

from ..models import BaseResponse

ResponseT = TypeVar("ResponseT", bound=BaseResponse)


def flatten_one_level(envelope: BaseResponse, key: str, target: type[ResponseT]) -> ResponseT:
    """Flatten a list-of-lists collection into a flat envelope.

    Args:
        envelope: Decoded envelope whose `key` attribute holds a list of lists.
        key: Name of the collection attribute, shared by both envelope types.
        target: Envelope type holding the flat collection.

    Returns:
        A new `target` envelope with the same status and message, the inner
        lists concatenated in order, and count set to the flat length.

    Example:
        >>> nested = NestedServiceResponse(status="ok", count=1, services=[[s1, s2]])
        >>> flatten_one_level(nested, "services", ServiceResponse).count
        2
    """
    nested = getattr(envelope, key) or []
    items = [item for group in nested for item in (group or [])]
    return target(
        status=envelope.status,
        message=envelope.message,
        count=len(items),
        **{key: items},
    )


def filter_to_one(
    envelope: ResponseT,
    key: str,
    identifier: int | str,
    *,
    id_attr: str = "id",
    name_attr: str = "name",
) -> ResponseT:
    """Reduce a full collection to the item matching identifier.

    An item matches when its ID, in decimal string form, or its name equals
    str(identifier). The first match wins. Nothing matching is not an error:
    the result is empty with count 0.

    Returns:
        A copy of the envelope with the same status and message, holding at
        most one item, and count set to 1 or 0.
    """
    wanted = str(identifier)
    match = next(
        (
            item
            for item in getattr(envelope, key)
            if str(getattr(item, id_attr)) == wanted or getattr(item, name_attr, None) == wanted
        ),
        None,
    )
    items = [match] if match is not None else []
    return envelope.model_copy(update={key: items, "count": len(items)})
