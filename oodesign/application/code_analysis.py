"""
Static analysis helpers for python snippets.

Everything here works on `ast` trees only; snippets are never executed.
"""

import ast
import builtins
from dataclasses import dataclass, field
from typing import Iterable, Optional

BUILTIN_NAMES = frozenset(dir(builtins)) | {"__file__", "__name__", "__doc__", "__annotations__"}

INTERFACE_MARKERS = {"ABC", "Protocol"}
ABSTRACT_DECORATORS = {"abstractmethod", "abstractproperty"}
# Bases that add no members an implementer would call
NEUTRAL_BASES = {"object", "ABC", "Protocol", "Generic"}


def dotted_tail(node: Optional[ast.AST]) -> Optional[str]:
    """Rightmost name of `x`, `a.b.x` or `x[T]`."""
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        return node.attr
    if isinstance(node, ast.Subscript):
        return dotted_tail(node.value)
    if isinstance(node, ast.Constant) and isinstance(node.value, str) and node.value.isidentifier():
        return node.value
    return None


UNION_WRAPPERS = {"Optional", "Union"}


def annotation_names(node: Optional[ast.AST]) -> list[str]:
    """Candidate class names of an annotation, looking through `Optional`, `Union` and `X | Y`."""
    if node is None:
        return []
    if isinstance(node, ast.Constant) and isinstance(node.value, str):
        try:
            node = ast.parse(node.value, mode="eval").body
        except SyntaxError:
            return []
    if isinstance(node, ast.BinOp) and isinstance(node.op, ast.BitOr):
        return annotation_names(node.left) + annotation_names(node.right)
    if isinstance(node, ast.Subscript) and dotted_tail(node.value) in UNION_WRAPPERS:
        inner = node.slice
        elts = inner.elts if isinstance(inner, ast.Tuple) else [inner]
        return [name for elt in elts for name in annotation_names(elt)]
    name = dotted_tail(node)
    return [name] if name else []


# =============================================================================
# NAMES
# =============================================================================

@dataclass
class NameUsage:
    """Names bound and read by one snippet."""
    defined: set[str] = field(default_factory=set)
    loaded: dict[str, int] = field(default_factory=dict)  # name -> first line
    star_import: bool = False


def collect_names(tree: ast.AST) -> NameUsage:
    """
    Over-approximate every name a snippet binds, and every name it reads.

    Scopes are flattened: a local in one function counts as defined for the
    whole snippet. That keeps the check about missing definitions, not
    about scoping rules.
    """
    usage = NameUsage()
    for node in ast.walk(tree):
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
            usage.defined.add(node.name)
        elif isinstance(node, ast.Name):
            if isinstance(node.ctx, ast.Load):
                usage.loaded.setdefault(node.id, node.lineno)
            else:
                usage.defined.add(node.id)
        elif isinstance(node, ast.arg):
            usage.defined.add(node.arg)
        elif isinstance(node, (ast.Import, ast.ImportFrom)):
            for alias in node.names:
                if alias.name == "*":
                    usage.star_import = True
                else:
                    usage.defined.add(alias.asname or alias.name.split(".")[0])
        elif isinstance(node, ast.ExceptHandler) and node.name:
            usage.defined.add(node.name)
        elif isinstance(node, (ast.Global, ast.Nonlocal)):
            usage.defined.update(node.names)
        elif isinstance(node, (ast.MatchAs, ast.MatchStar)) and node.name:
            usage.defined.add(node.name)
        elif isinstance(node, ast.MatchMapping) and node.rest:
            usage.defined.add(node.rest)
    return usage


def undefined_names(usage: NameUsage, defined: Iterable[str]) -> dict[str, int]:
    known = set(defined) | BUILTIN_NAMES
    return {name: line for name, line in usage.loaded.items() if name not in known}


# =============================================================================
# CLASSES AND INTERFACES
# =============================================================================

@dataclass
class Signature:
    """Positional arity of a method, receiver excluded."""
    required: int
    total: int
    varargs: bool

    def accepts(self, other: "Signature") -> bool:
        """Whether a method with this signature can stand in for `other`."""
        if self.required > other.required:
            return False
        return self.varargs or self.total >= other.total

    def describe(self) -> str:
        if self.varargs:
            return f"{self.required}+ positional"
        if self.required == self.total:
            return f"{self.total} positional"
        return f"{self.required}-{self.total} positional"


def decorator_names(func: ast.AST) -> set[str]:
    return {dotted_tail(d.func if isinstance(d, ast.Call) else d) for d in func.decorator_list}


def signature_of(func: ast.AST) -> Signature:
    params = list(func.args.posonlyargs) + list(func.args.args)
    if "staticmethod" not in decorator_names(func) and params:
        params = params[1:]
    total = len(params)
    return Signature(
        required=total - len(func.args.defaults),
        total=total,
        varargs=func.args.vararg is not None
    )


@dataclass
class ClassInfo:
    """What the linter needs to know about one class definition."""
    name: str
    line: int
    bases: list[str]
    explicit_interface: bool
    methods: dict[str, ast.AST] = field(default_factory=dict)
    attributes: set[str] = field(default_factory=set)
    assigned: set[str] = field(default_factory=set)  # attributes bound to a value

    @property
    def abstract_methods(self) -> dict[str, ast.AST]:
        if "Protocol" in self.bases:
            return dict(self.methods)
        return {
            name: func for name, func in self.methods.items()
            if decorator_names(func) & ABSTRACT_DECORATORS
        }

    @property
    def members(self) -> set[str]:
        return set(self.methods) | self.attributes


def class_info(node: ast.ClassDef, offset: int = 0) -> ClassInfo:
    bases = [name for name in (dotted_tail(b) for b in node.bases) if name]
    metaclass = next((dotted_tail(k.value) for k in node.keywords if k.arg == "metaclass"), None)
    info = ClassInfo(
        name=node.name,
        line=offset + node.lineno,
        bases=bases,
        explicit_interface=bool(INTERFACE_MARKERS & set(bases)) or metaclass == "ABCMeta"
    )
    for item in node.body:
        if isinstance(item, (ast.FunctionDef, ast.AsyncFunctionDef)):
            info.methods[item.name] = item
        elif isinstance(item, ast.AnnAssign) and isinstance(item.target, ast.Name):
            info.attributes.add(item.target.id)
            if item.value is not None:
                info.assigned.add(item.target.id)
        elif isinstance(item, ast.Assign):
            for target in item.targets:
                if isinstance(target, ast.Name):
                    info.attributes.add(target.id)
                    info.assigned.add(target.id)
    return info


def collect_classes(tree: ast.AST, offset: int = 0) -> list[ClassInfo]:
    """Top-level and nested class definitions, in source order."""
    classes = [class_info(node, offset) for node in ast.walk(tree) if isinstance(node, ast.ClassDef)]
    return sorted(classes, key=lambda c: c.line)


class ClassIndex:
    """
    Resolves inheritance among the classes defined in one principle section.

    Classes defined later replace earlier ones with the same name, so an
    After snippet can redefine something shown in Before.
    """

    def __init__(self, classes: Iterable[ClassInfo] = ()):
        self._classes: dict[str, ClassInfo] = {}
        for cls in classes:
            self._classes[cls.name] = cls

    def get(self, name: str) -> Optional[ClassInfo]:
        return self._classes.get(name)

    def ancestors(self, cls: ClassInfo) -> list[ClassInfo]:
        """Known base classes, nearest first, each listed once."""
        seen, order, queue = set(), [], list(cls.bases)
        while queue:
            name = queue.pop(0)
            if name in seen or name == cls.name:
                continue
            seen.add(name)
            base = self._classes.get(name)
            if base is not None:
                order.append(base)
                queue.extend(base.bases)
        return order

    def is_interface(self, cls: ClassInfo) -> bool:
        if cls.explicit_interface:
            return True
        return bool(cls.abstract_methods) and any(b.explicit_interface for b in self.ancestors(cls))

    def interfaces(self) -> dict[str, ClassInfo]:
        return {name: cls for name, cls in self._classes.items() if self.is_interface(cls)}

    def has_unknown_bases(self, cls: ClassInfo) -> bool:
        for base in [cls] + self.ancestors(cls):
            for name in base.bases:
                if name not in NEUTRAL_BASES and name not in self._classes:
                    return True
        return False

    def members(self, cls: ClassInfo) -> set[str]:
        members = set(cls.members)
        for base in self.ancestors(cls):
            members |= base.members
        return members

    def unimplemented(self, cls: ClassInfo) -> dict[str, tuple[ClassInfo, ast.AST]]:
        """Abstract methods inherited by `cls` that nothing in its hierarchy implements."""
        lineage = [cls] + self.ancestors(cls)
        concrete = set()
        for member in lineage:
            if not self.is_interface(member):
                concrete |= set(member.methods) | member.assigned
            else:
                concrete |= (set(member.methods) | member.assigned) - set(member.abstract_methods)

        missing = {}
        for member in lineage:
            if not self.is_interface(member):
                continue
            for name, func in member.abstract_methods.items():
                if name not in concrete and name not in missing:
                    missing[name] = (member, func)
        return missing

    def signature_conflicts(self, cls: ClassInfo) -> list[tuple[str, ClassInfo, Signature, Signature]]:
        """Methods of `cls` whose arity cannot replace the interface method they implement."""
        conflicts = []
        for name, func in cls.methods.items():
            if "property" in decorator_names(func):
                continue
            for base in self.ancestors(cls):
                if not self.is_interface(base) or name not in base.abstract_methods:
                    continue
                declared = base.abstract_methods[name]
                if "property" in decorator_names(declared):
                    continue
                actual, expected = signature_of(func), signature_of(declared)
                if not actual.accepts(expected):
                    conflicts.append((name, base, actual, expected))
                break
        return conflicts


def interface_parameters(tree: ast.AST, interfaces: dict[str, ClassInfo]):
    """
    Yield (function, parameter name, interface) for every parameter annotated
    with a known interface.
    """
    for node in ast.walk(tree):
        if not isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
            continue
        args = node.args
        for arg in list(args.posonlyargs) + list(args.args) + list(args.kwonlyargs):
            for name in annotation_names(arg.annotation):
                if name in interfaces:
                    yield node, arg.arg, interfaces[name]
                    break


def method_calls_on(func: ast.AST, variable: str):
    """Yield (method name, line) for each `variable.method(...)` call in `func`."""
    for node in ast.walk(func):
        if (
            isinstance(node, ast.Call)
            and isinstance(node.func, ast.Attribute)
            and isinstance(node.func.value, ast.Name)
            and node.func.value.id == variable
        ):
            yield node.func.attr, node.lineno
