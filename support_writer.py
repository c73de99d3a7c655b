"""
support_writer.py
Assembles the support header for one bridge module: decides which guarded
sections of the canonical header go in, which standard headers they pull in,
and which namespaces re-export them.
"""
from enum import Enum
from typing import Iterable, List, Optional, Set

from errors import MalformedPathError
from guarded_sections import write_guarded_section
from include_registry import Capability, Include, IncludeRegistry
from out_file import OutFile
from qualified_name import QualifiedName
from tokenizer import TokenStream


class Feature(Enum):
    """
    Optional runtime support in the canonical header.
    Declaration order is emission order, so a feature comes after
    everything its code refers to.
    """
    PANIC = ("BRIDGE1_PANIC", (), ())
    IS_COMPLETE = ("BRIDGE1_IS_COMPLETE", (Capability.CSTDDEF, Capability.TYPE_TRAITS), ())
    RUST_OPAQUE = ("BRIDGE1_RUST_OPAQUE", (), ())
    LAYOUT = ("BRIDGE1_LAYOUT", (Capability.CSTDDEF, Capability.TYPE_TRAITS), ("IS_COMPLETE", "RUST_OPAQUE"))
    RELOCATABLE = ("BRIDGE1_RELOCATABLE", (Capability.TYPE_TRAITS,), ())
    RUST_STRING = ("BRIDGE1_RUST_STRING", (Capability.ARRAY, Capability.CSTDDEF, Capability.CSTDINT, Capability.STRING), ())
    RUST_STR = ("BRIDGE1_RUST_STR", (Capability.ARRAY, Capability.CSTDDEF, Capability.CSTDINT, Capability.STRING), ("RUST_STRING",))
    RUST_SLICE = ("BRIDGE1_RUST_SLICE", (Capability.ARRAY, Capability.CSTDDEF, Capability.CSTDINT), ("PANIC",))
    RUST_BOX = ("BRIDGE1_RUST_BOX", (Capability.NEW, Capability.TYPE_TRAITS, Capability.UTILITY), ("LAYOUT",))
    RUST_VEC = ("BRIDGE1_RUST_VEC", (Capability.ARRAY, Capability.CSTDDEF, Capability.CSTDINT, Capability.NEW, Capability.UTILITY), ("PANIC",))
    RUST_FN = ("BRIDGE1_RUST_FN", (Capability.UTILITY,), ())
    RUST_ERROR = ("BRIDGE1_RUST_ERROR", (Capability.CSTDDEF, Capability.EXCEPTION), ())
    RUST_ISIZE = ("BRIDGE1_RUST_ISIZE", (Capability.BASETSD,), ())

    def __init__(self, guard, capabilities, requires):
        self.guard = guard
        self.capabilities = capabilities
        self._requires = requires

    @property
    def requires(self) -> List['Feature']:
        return [Feature[name] for name in self._requires]

    @classmethod
    def from_name(cls, name: str) -> 'Feature':
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(f.name.lower() for f in cls)
            raise ValueError(f"Unknown feature '{name}' (choose from {valid})") from None


def resolve_features(features: Iterable[Feature]) -> Set[Feature]:
    """All of `features` plus everything they transitively require."""
    resolved = set()
    pending = list(features)
    while pending:
        feature = pending.pop()
        if feature in resolved:
            continue
        resolved.add(feature)
        pending.extend(feature.requires)
    return resolved


def write_builtins(out: OutFile, features: Iterable[Feature], includes: IncludeRegistry) -> None:
    """
    Write the guarded section of every needed feature, and require the
    standard headers those sections use.

    Every feature's guard is visited, needed or not, so a guard missing from
    the canonical header fails every run rather than only the runs using it.
    """
    needed = resolve_features(features)
    for feature in Feature:
        if feature in needed:
            for capability in feature.capabilities:
                includes.require(capability)
        write_guarded_section(out, feature in needed, feature.guard)


class SupportHeaderGenerator:
    """
    Generates the support header for one bridge module.
    """

    def __init__(self, features: Iterable[Feature], includes: Iterable[Include] = (),
                 namespaces: Iterable[str] = (), verbose: bool = False):
        """
        Args:
            features: Features the module's declarations use
            includes: Extra headers requested by the module's author
            namespaces: Qualified names, quoted or bare, of the namespaces
                that should see the support types
            verbose: Whether to print debug information
        """
        self.features = list(features)
        self.includes = list(includes)
        self.namespace_sources = list(namespaces)
        self.namespaces: List[QualifiedName] = []
        self.verbose = verbose
        self.errors = []
        self.warnings = []

    def debug_print(self, message: str) -> None:
        if self.verbose:
            print(f"[DEBUG] {message}")

    def log_error(self, error: str) -> None:
        self.errors.append(error)
        if self.verbose:
            print(f"[ERROR] {error}")

    def log_warning(self, warning: str) -> None:
        self.warnings.append(warning)
        if self.verbose:
            print(f"[WARNING] {warning}")

    def parse_namespaces(self) -> List[QualifiedName]:
        """
        Parse every namespace source. A malformed one is recorded and the
        rest are still parsed, so the author sees every problem at once.
        """
        self.namespaces = []
        for source in self.namespace_sources:
            try:
                name = QualifiedName.parse_quoted_or_unquoted(TokenStream(source))
            except MalformedPathError as e:
                self.log_error(f"Namespace {source!r}: {e}")
                continue
            if name in self.namespaces:
                self.log_warning(f"Namespace '{name}' listed more than once")
                continue
            self.debug_print(f"Parsed namespace '{name}' from {source!r}")
            self.namespaces.append(name)
        return self.namespaces

    def generate(self) -> Optional[str]:
        """
        Returns:
            The header text, or None if any declaration was rejected
        """
        self.errors = []
        self.warnings = []
        self.parse_namespaces()
        if self.errors:
            return None

        includes = IncludeRegistry()
        includes.extend(self.includes)

        out = OutFile()
        # Sets capability flags, so it runs before includes are rendered
        write_builtins(out, self.features, includes)
        self.debug_print(f"Features: {sorted(f.name.lower() for f in resolve_features(self.features))}")

        header = OutFile()
        header.writeln("#pragma once")
        header.next_section()
        header.write(includes.render())
        header.next_section()
        header.writeln("namespace bridge {")
        header.writeln("inline namespace bridge1 {")
        header.next_section()
        header.write(out.content())
        header.next_section()
        header.writeln("} // inline namespace bridge1")
        header.writeln("} // namespace bridge")
        for name in self.namespaces:
            header.next_section()
            _write_reexport(header, name)
        return header.content()


def _write_reexport(out: OutFile, name: QualifiedName) -> None:
    for segment in name.segments:
        out.writeln(f"namespace {segment} {{")
    out.writeln("using namespace ::bridge;")
    for segment in reversed(name.segments):
        out.writeln(f"}} // namespace {segment}")
