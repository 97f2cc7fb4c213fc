"""
Python Introspection Providers.

Describes live Python classes as type descriptors. Two sources:

- ModuleDescriptorProvider: a module file (or package directory) on disk
- NamespaceDescriptorProvider: an importable module namespace

Description rules:
- ``enum.Enum`` subclasses become enum descriptors (aliases included)
- other classes become class descriptors; the first direct base is the
  base type (``object`` and ``Generic``/``Protocol`` are skipped)
- properties are the resolved type hints, then annotated ``@property``
  getters; ClassVars, private names and members inherited from framework
  bases (pydantic, typing, enum, ...) are skipped
- ``Optional[X]`` and ``X | None`` unwrap to ``X``; ``list[X]`` is a
  single-level collection of ``X``
"""

from __future__ import annotations

import enum
import importlib
import importlib.util
import inspect
import re
import sys
import types
from pathlib import Path
from typing import Any, ClassVar, ForwardRef, Generic, Protocol, Union, get_args, get_origin, get_type_hints

from typeforge.core.models.descriptor import ClassDescriptor, EnumDescriptor, PropertyDescriptor
from typeforge.core.models.entity import UNKNOWN_TYPE_NAME
from typeforge.core.typenames import unwrap_nullable_name
from typeforge.providers.base import ModuleLoadError, NamespaceNotFoundError
from typeforge.utils.logging import get_logger, log_error

logger = get_logger("providers.introspection")

_FRAMEWORK_MODULES = frozenset({
    "builtins", "typing", "typing_extensions", "abc", "enum",
    "dataclasses", "pydantic", "pydantic_core", "collections",
})

_SKIPPED_BASES = (object, Generic, Protocol)

_STR_LIST = re.compile(r"^(?:typing\.)?(?:list|List)\[\s*(?P<element>[^\[\],]+?)\s*\]$")
_STR_BARE_LIST = frozenset({"list", "List", "typing.List"})


# ============================================================================
# Type Helpers
# ============================================================================


def _is_framework_class(klass: type) -> bool:
    module = getattr(klass, "__module__", "") or ""
    return module.split(".")[0] in _FRAMEWORK_MODULES


def _short_name(dotted: str) -> str:
    return dotted.rsplit(".", 1)[-1]


def type_name(tp: Any) -> str:
    """Simple name of a type, generic alias or forward reference."""
    if isinstance(tp, str):
        return _short_name(tp.strip().strip("'\"")) or UNKNOWN_TYPE_NAME
    if isinstance(tp, ForwardRef):
        return _short_name(tp.__forward_arg__)

    origin = get_origin(tp)
    target = origin if origin is not None else tp
    name = getattr(target, "__name__", None) or getattr(target, "_name", None)
    return name or UNKNOWN_TYPE_NAME


def unwrap_optional(tp: Any) -> tuple[Any, bool]:
    """Return (inner type, was_nullable) for ``Optional[X]`` / ``X | None``."""
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = get_args(tp)
        non_none = [arg for arg in args if arg is not type(None)]
        if len(non_none) == 1 and len(non_none) < len(args):
            return non_none[0], True
    return tp, False


def is_enum_type(tp: Any) -> bool:
    return inspect.isclass(tp) and issubclass(tp, enum.Enum)


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.strip().startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or get_origin(annotation) is ClassVar


# ============================================================================
# Descriptor Builders
# ============================================================================


def describe_annotation(
    name: str,
    annotation: Any,
    namespace: dict[str, Any] | None = None,
) -> PropertyDescriptor:
    """Describe one annotated property.

    String annotations (unresolvable forward references) are parsed by
    name and looked up in ``namespace`` when possible.
    """
    if isinstance(annotation, (str, ForwardRef)):
        text = annotation.__forward_arg__ if isinstance(annotation, ForwardRef) else annotation
        return _describe_annotation_string(name, text, namespace or {})

    tp, nullable = unwrap_optional(annotation)

    if tp is list or get_origin(tp) is list:
        args = get_args(tp)
        element = type_name(unwrap_optional(args[0])[0]) if len(args) == 1 else None
        return PropertyDescriptor(
            name=name,
            declared_type_name="list",
            is_single_level_collection=True,
            element_type_name=element,
            nullable=nullable,
        )

    return PropertyDescriptor(
        name=name,
        declared_type_name=type_name(tp),
        is_enum=is_enum_type(tp),
        nullable=nullable,
    )


def _describe_annotation_string(
    name: str,
    text: str,
    namespace: dict[str, Any],
) -> PropertyDescriptor:
    text = text.strip().strip("'\"")
    inner = unwrap_nullable_name(text)
    nullable = inner != text

    if inner in _STR_BARE_LIST:
        return PropertyDescriptor(
            name=name,
            declared_type_name="list",
            is_single_level_collection=True,
            nullable=nullable,
        )

    match = _STR_LIST.match(inner)
    if match:
        element = unwrap_nullable_name(match.group("element").strip("'\""))
        return PropertyDescriptor(
            name=name,
            declared_type_name="list",
            is_single_level_collection=True,
            element_type_name=_short_name(element),
            nullable=nullable,
        )

    resolved = namespace.get(inner)
    return PropertyDescriptor(
        name=name,
        declared_type_name=_short_name(inner),
        is_enum=is_enum_type(resolved),
        nullable=nullable,
    )


def _resolved_hints(obj: Any) -> dict[str, Any]:
    try:
        return get_type_hints(obj)
    except Exception as e:
        logger.debug(f"Falling back to raw annotations for {obj!r}: {e}")
        return {}


def class_properties(cls: type) -> list[PropertyDescriptor]:
    """Describe the annotated attributes and properties of a class."""
    module = sys.modules.get(cls.__module__)
    namespace = dict(vars(module)) if module is not None else {}
    resolved = _resolved_hints(cls)

    annotations: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        if _is_framework_class(klass):
            continue
        for attr, raw in inspect.get_annotations(klass).items():
            if attr.startswith("_"):
                continue
            annotations[attr] = resolved.get(attr, raw)

    properties = [
        describe_annotation(attr, annotation, namespace)
        for attr, annotation in annotations.items()
        if not _is_class_var(annotation)
    ]

    seen = set(annotations)
    for klass in reversed(cls.__mro__):
        if _is_framework_class(klass):
            continue
        for attr, member in vars(klass).items():
            if attr.startswith("_") or attr in seen or not isinstance(member, property):
                continue
            if member.fget is None:
                continue
            seen.add(attr)
            returns = _resolved_hints(member.fget).get("return")
            if returns is None:
                returns = inspect.get_annotations(member.fget).get("return", UNKNOWN_TYPE_NAME)
            properties.append(describe_annotation(attr, returns, namespace))

    return properties


def _base_type_name(cls: type) -> str | None:
    for base in cls.__bases__:
        if base in _SKIPPED_BASES:
            continue
        return base.__name__
    return None


def describe_type(obj: Any) -> ClassDescriptor | EnumDescriptor | None:
    """Describe a class or enum; returns None for anything else."""
    if not inspect.isclass(obj):
        return None

    if issubclass(obj, enum.Enum):
        return EnumDescriptor(name=obj.__name__, member_names=list(obj.__members__))

    return ClassDescriptor(
        name=obj.__name__,
        base_type_name=_base_type_name(obj),
        properties=class_properties(obj),
    )


def describe_module(module: types.ModuleType) -> list[ClassDescriptor | EnumDescriptor]:
    """Describe the classes defined in a module, in definition order."""
    descriptors: list[ClassDescriptor | EnumDescriptor] = []
    seen: set[int] = set()

    for obj in list(vars(module).values()):
        if not inspect.isclass(obj) or obj.__module__ != module.__name__:
            continue
        if id(obj) in seen:
            continue
        seen.add(id(obj))

        descriptor = describe_type(obj)
        if descriptor is not None:
            descriptors.append(descriptor)

    return descriptors


# ============================================================================
# Providers
# ============================================================================


class ModuleDescriptorProvider:
    """Loads a Python module from disk and describes its classes.

    Usage:
        provider = ModuleDescriptorProvider("models/orders.py")
        descriptors = provider.get_descriptors()
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    @property
    def module_name(self) -> str:
        stem = self.path.name if self.path.is_dir() else self.path.stem
        safe_stem = re.sub(r"\W", "_", stem)
        return f"_typeforge_scan_{safe_stem}"

    def load_module(self) -> types.ModuleType:
        """Execute the module file and return the module object.

        Raises:
            ModuleLoadError: If the path is missing or the module fails to load
        """
        if not self.path.exists():
            raise ModuleLoadError(f"Module path not found: {self.path}", source=self.path)

        file_path = self.path
        search_locations = None
        if self.path.is_dir():
            file_path = self.path / "__init__.py"
            search_locations = [str(self.path)]
            if not file_path.exists():
                raise ModuleLoadError(f"Not a Python package: {self.path}", source=self.path)

        name = self.module_name
        spec = importlib.util.spec_from_file_location(
            name, file_path, submodule_search_locations=search_locations
        )
        if spec is None or spec.loader is None:
            raise ModuleLoadError(f"Cannot load module from: {self.path}", source=self.path)

        module = importlib.util.module_from_spec(spec)
        sys.modules[name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            sys.modules.pop(name, None)
            log_error(logger, "load_module", e, {"path": self.path})
            raise ModuleLoadError(f"Failed to load {self.path}: {e}", source=self.path) from e

        return module

    def get_descriptors(self) -> list[ClassDescriptor | EnumDescriptor]:
        module = self.load_module()
        try:
            descriptors = describe_module(module)
        finally:
            sys.modules.pop(module.__name__, None)

        logger.info(f"Described {len(descriptors)} types from {self.path}")
        return descriptors


class NamespaceDescriptorProvider:
    """Describes classes of a module namespace visible to the process.

    Only classes whose ``__module__`` equals the namespace are included
    (or a sub-namespace of it when ``include_submodules`` is set).

    Args:
        namespace: Dotted module name, e.g. ``"myapp.models"``
        import_missing: Import the namespace if it is not loaded yet
        strict: Raise NamespaceNotFoundError when no types are found
        include_submodules: Also scan ``namespace.*`` modules
    """

    def __init__(
        self,
        namespace: str,
        import_missing: bool = True,
        strict: bool = False,
        include_submodules: bool = False,
    ):
        self.namespace = namespace
        self.import_missing = import_missing
        self.strict = strict
        self.include_submodules = include_submodules

    def _ensure_imported(self) -> None:
        if self.namespace in sys.modules or not self.import_missing:
            return
        try:
            importlib.import_module(self.namespace)
        except ImportError as e:
            if self.strict:
                raise NamespaceNotFoundError(
                    f"Namespace cannot be imported: {self.namespace}", source=self.namespace
                ) from e
            logger.warning(f"Namespace '{self.namespace}' could not be imported: {e}")
        except Exception as e:
            log_error(logger, "import_namespace", e, {"namespace": self.namespace})
            raise ModuleLoadError(
                f"Failed to import {self.namespace}: {e}", source=self.namespace
            ) from e

    def modules(self) -> list[types.ModuleType]:
        """Loaded modules belonging to the namespace, sorted by name."""
        self._ensure_imported()
        prefix = f"{self.namespace}."
        names = sorted(
            name for name in list(sys.modules)
            if name == self.namespace or (self.include_submodules and name.startswith(prefix))
        )
        return [sys.modules[name] for name in names if sys.modules.get(name) is not None]

    def get_descriptors(self) -> list[ClassDescriptor | EnumDescriptor]:
        descriptors: list[ClassDescriptor | EnumDescriptor] = []
        for module in self.modules():
            descriptors.extend(describe_module(module))

        if not descriptors:
            if self.strict:
                raise NamespaceNotFoundError(
                    f"No types found in namespace: {self.namespace}", source=self.namespace
                )
            logger.warning(f"No types found in namespace '{self.namespace}'")
        else:
            logger.info(f"Described {len(descriptors)} types from namespace {self.namespace}")

        return descriptors
