"""
Accessor/mutator bridge for translatable attributes.

A model registers, per attribute, an optional read transform (applied to a
translation on its way out) and an optional write transform (applied on its
way in). Registration is explicit, either with the decorators below on model
methods or by calling ``TransformRegistry.register`` at setup time.

Write transforms must store their result into the raw attribute slot with
``record.set_raw_attribute(key, value)``; the value read back from that slot
after the transform runs is what gets persisted. The transform's return value
is ignored.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

ReadTransform = Callable[[Any, Any], Any]
WriteTransform = Callable[[Any, Any, str], None]

_MARKER = "__translation_transform__"


@dataclass(frozen=True)
class AttributeTransforms:
    """Read/write transforms registered for one attribute"""

    read: Optional[ReadTransform] = None
    write: Optional[WriteTransform] = None


class TransformRegistry:
    """Lookup table of attribute key -> AttributeTransforms"""

    def __init__(self, transforms: Optional[Dict[str, AttributeTransforms]] = None):
        self._transforms: Dict[str, AttributeTransforms] = dict(transforms or {})

    def register(
        self,
        key: str,
        read: Optional[ReadTransform] = None,
        write: Optional[WriteTransform] = None,
    ) -> None:
        """
        Register transforms for an attribute. Omitted transforms keep any
        previously registered one.

        Args:
            key: Attribute name
            read: Callable(record, value) -> value
            write: Callable(record, value, locale), must assign the raw slot
        """
        current = self._transforms.get(key, AttributeTransforms())
        self._transforms[key] = AttributeTransforms(
            read=read or current.read,
            write=write or current.write,
        )

    def reader_for(self, key: str) -> Optional[ReadTransform]:
        transforms = self._transforms.get(key)
        return transforms.read if transforms else None

    def writer_for(self, key: str) -> Optional[WriteTransform]:
        transforms = self._transforms.get(key)
        return transforms.write if transforms else None

    def merged(self, parent: "TransformRegistry") -> "TransformRegistry":
        """New registry with parent's transforms, overridden by this one's"""
        combined = TransformRegistry(parent._transforms)
        for key, transforms in self._transforms.items():
            combined.register(key, read=transforms.read, write=transforms.write)
        return combined

    def __contains__(self, key: str) -> bool:
        return key in self._transforms

    def __iter__(self) -> Iterator[str]:
        return iter(self._transforms)


def translation_reader(key: str):
    """Mark a model method as the read transform for `key`"""
    def decorator(func: ReadTransform) -> ReadTransform:
        setattr(func, _MARKER, ("read", key))
        return func
    return decorator


def translation_writer(key: str):
    """Mark a model method as the write transform for `key`"""
    def decorator(func: WriteTransform) -> WriteTransform:
        setattr(func, _MARKER, ("write", key))
        return func
    return decorator


def collect_transforms(namespace: Dict[str, Any]) -> TransformRegistry:
    """
    Build a registry from decorated functions in a class namespace.

    Args:
        namespace: Class __dict__

    Returns:
        Registry holding the transforms found
    """
    registry = TransformRegistry()
    for value in namespace.values():
        if not callable(value):
            continue
        marker: Optional[Tuple[str, str]] = getattr(value, _MARKER, None)
        if marker is None:
            continue
        kind, key = marker
        if kind == "read":
            registry.register(key, read=value)
        else:
            registry.register(key, write=value)
    return registry
