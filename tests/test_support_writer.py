import pytest

import guarded_sections
import support_writer
from errors import MissingGuardError
from guarded_sections import find_line
from include_registry import Capability, Include, IncludeKind, IncludeRegistry
from out_file import OutFile
from support_header import HEADER
from support_writer import Feature, SupportHeaderGenerator, resolve_features, write_builtins


@pytest.mark.parametrize("feature", list(Feature))
def test_every_feature_guard_is_in_the_canonical_header(feature):
    assert find_line(HEADER, 0, f"#ifndef {feature.guard}") is not None
    assert find_line(HEADER, 0, f"#endif // {feature.guard}") is not None


def test_feature_dependencies_are_emitted_before_dependents():
    order = list(Feature)
    for feature in Feature:
        for dep in feature.requires:
            assert order.index(dep) < order.index(feature), (feature, dep)


def test_resolve_features_is_transitive():
    assert resolve_features([Feature.RUST_BOX]) == {
        Feature.RUST_BOX, Feature.LAYOUT, Feature.IS_COMPLETE, Feature.RUST_OPAQUE,
    }
    assert resolve_features([]) == set()


def test_from_name():
    assert Feature.from_name("rust_vec") is Feature.RUST_VEC
    assert Feature.from_name(" Rust_Str ") is Feature.RUST_STR
    with pytest.raises(ValueError, match="Unknown feature 'rust_map'") as excinfo:
        Feature.from_name("rust_map")
    assert excinfo.value.__cause__ is None
    assert excinfo.value.__suppress_context__


def test_write_builtins_emits_needed_sections_and_flags():
    out = OutFile()
    includes = IncludeRegistry()
    write_builtins(out, [Feature.RUST_VEC], includes)
    text = out.content()

    assert "#ifndef BRIDGE1_RUST_VEC\n" in text
    assert "#ifndef BRIDGE1_PANIC\n" in text
    assert text.index("#ifndef BRIDGE1_PANIC") < text.index("#ifndef BRIDGE1_RUST_VEC")
    assert "BRIDGE1_RUST_STRING" not in text
    assert "BRIDGE1_RUST_SLICE" not in text

    for cap in (Capability.ARRAY, Capability.CSTDDEF, Capability.CSTDINT, Capability.NEW, Capability.UTILITY):
        assert includes.is_required(cap), cap
    assert not includes.is_required(Capability.STRING)
    assert not includes.is_required(Capability.BASETSD)


def test_write_builtins_without_features_writes_nothing():
    out = OutFile()
    includes = IncludeRegistry()
    write_builtins(out, [], includes)
    assert out.is_empty()
    assert includes.render() == ""


def test_missing_guard_fails_even_for_unused_features(monkeypatch):
    def write_from_empty_header(out, needed, guard):
        guarded_sections.write_guarded_section(out, needed, guard, "")

    monkeypatch.setattr(support_writer, "write_guarded_section", write_from_empty_header)
    with pytest.raises(MissingGuardError, match="BRIDGE1_PANIC"):
        write_builtins(OutFile(), [], IncludeRegistry())


def test_generate_full_header():
    generator = SupportHeaderGenerator(
        [Feature.RUST_STRING],
        includes=[Include("app/types.h"), Include("cstdio", IncludeKind.BRACKETED)],
        namespaces=['"app::ffi"', 'other'],
    )
    header = generator.generate()
    assert header.startswith(
        "#pragma once\n"
        "\n"
        '#include "app/types.h"\n'
        "#include <cstdio>\n"
        "#include <array>\n"
        "#include <cstddef>\n"
        "#include <cstdint>\n"
        "#include <string>\n"
        "\n"
        "namespace bridge {\n"
        "inline namespace bridge1 {\n"
        "\n"
        "#ifndef BRIDGE1_RUST_STRING\n"
        "#define BRIDGE1_RUST_STRING\n"
        "class String final {\n"
    )
    assert header.endswith(
        "#endif // BRIDGE1_RUST_STRING\n"
        "\n"
        "} // inline namespace bridge1\n"
        "} // namespace bridge\n"
        "\n"
        "namespace app {\n"
        "namespace ffi {\n"
        "using namespace ::bridge;\n"
        "} // namespace ffi\n"
        "} // namespace app\n"
        "\n"
        "namespace other {\n"
        "using namespace ::bridge;\n"
        "} // namespace other\n"
    )
    assert generator.errors == []
    assert [str(ns) for ns in generator.namespaces] == ["app::ffi", "other"]


def test_generate_is_repeatable():
    generator = SupportHeaderGenerator([Feature.RUST_BOX, Feature.RUST_ISIZE])
    first = generator.generate()
    assert generator.generate() == first
    assert "#if defined(_WIN32)\n#include <basetsd.h>\n#endif\n" in first


def test_malformed_namespaces_are_all_reported():
    generator = SupportHeaderGenerator([Feature.RUST_STR], namespaces=['a::', 'good::ns', '"b::"', '""'])
    assert generator.generate() is None
    assert len(generator.errors) == 3
    assert "'a::'" in generator.errors[0]
    assert "expected path segment" in generator.errors[1]
    assert "expected path" in generator.errors[2]
    assert [str(ns) for ns in generator.namespaces] == ["good::ns"]


def test_duplicate_namespace_is_a_warning():
    generator = SupportHeaderGenerator([], namespaces=['a::b', '"a::b"'])
    header = generator.generate()
    assert header is not None
    assert header.count("namespace b {") == 1
    assert len(generator.warnings) == 1


def test_verbose_output(capsys):
    SupportHeaderGenerator([Feature.RUST_FN], namespaces=['x', 'y::'], verbose=True).generate()
    captured = capsys.readouterr().out
    assert "[DEBUG] Parsed namespace 'x'" in captured
    assert "[ERROR] Namespace 'y::'" in captured

    SupportHeaderGenerator([Feature.RUST_FN], namespaces=['x']).generate()
    assert capsys.readouterr().out == ""


if __name__ == "__main__":
    pytest.main([__file__])
