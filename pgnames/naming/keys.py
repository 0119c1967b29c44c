"""Projection of object metadata onto lookup keys."""

from collections.abc import Mapping
from typing import Any

from .models import ObjectKey


def as_object_key(obj: Any) -> ObjectKey:
    """Return the namespace and name of an object as an ObjectKey.

    Values are copied verbatim. Accepted inputs:

    - anything with ``namespace`` and ``name`` attributes, such as an
      ObjectKey, a DerivedIdentity or a kubernetes ``V1ObjectMeta``
    - anything with a ``metadata`` attribute holding such a value, such as a
      kubernetes ``V1StatefulSet``
    - mappings with ``namespace``/``name`` keys, or a ``metadata`` mapping, as
      found in raw manifests

    A missing namespace projects to an empty string.

    Raises:
        TypeError: If no name can be found on the object
    """
    if isinstance(obj, Mapping):
        metadata = obj.get("metadata", obj)
        if isinstance(metadata, Mapping) and "name" in metadata:
            return ObjectKey(
                namespace=metadata.get("namespace") or "",
                name=metadata["name"],
            )
        raise TypeError(f"Mapping has no metadata name: {obj!r}")

    if hasattr(obj, "name"):
        return ObjectKey(namespace=getattr(obj, "namespace", None) or "", name=obj.name)

    metadata = getattr(obj, "metadata", None)
    if metadata is not None:
        return as_object_key(metadata)

    raise TypeError(f"Cannot project {type(obj).__name__} onto an object key")
