#!/usr/bin/env python3
"""
bridgegen

Generates the C++ support header for a bridge module. Only the sections of the
canonical support header that the module's features need are emitted, along
with the #include lines those sections depend on.

Usage:
    python bridgegen.py --feature <name>... [--include <path>] [--system-include <path>] [--namespace <path>] [--output <file>] [--verbose]

Arguments:
    --feature, -f       : Features to emit (e.g. rust_string rust_vec), or 'all'.
                          Comma separated values are accepted.
    --include           : Extra header to #include "like/this.h" (repeatable)
    --system-include    : Extra header to #include <like/this.h> (repeatable)
    --namespace, -n     : Namespace that re-exports the support types, written
                          as a::b or "a::b" (repeatable)
    --output, -o        : File to write the header to (default: stdout)
    --verbose, -v       : Print debug information
    --help, -h          : Show this help message

Environment variables BRIDGEGEN_FEATURES, BRIDGEGEN_OUTPUT, BRIDGEGEN_NAMESPACE
and BRIDGEGEN_VERBOSE override the matching arguments.

Example:
    python bridgegen.py --feature rust_string rust_vec --output bridge_support.h
    python bridgegen.py -f all -n "app::ffi" --include app/types.h
"""

import argparse
import os
import sys
from typing import List

from include_registry import Include, IncludeKind
from support_writer import Feature, SupportHeaderGenerator


def parse_feature_names(values: List[str]) -> List[Feature]:
    """
    Expand comma separated values and 'all' into a list of features.

    Raises:
        ValueError: if a name is not a known feature
    """
    names = []
    for value in values:
        names.extend(v.strip() for v in value.replace(',', ' ').split() if v.strip())
    features = []
    for name in names:
        if name.lower() == 'all':
            return list(Feature)
        features.append(Feature.from_name(name))
    return features


def parse_arguments(argv=None):
    """
    Parse command line arguments.

    Returns:
        argparse.Namespace: Parsed command line arguments
    """
    parser = argparse.ArgumentParser(
        description="Generate the C++ support header for a bridge module",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument('--feature', '-f', nargs='+', default=[],
                        help='Features to emit, or all')
    parser.add_argument('--include', action='append', default=[],
                        help='Extra header for a quoted #include')
    parser.add_argument('--system-include', action='append', default=[],
                        help='Extra header for a bracketed #include')
    parser.add_argument('--namespace', '-n', action='append', default=[],
                        help='Namespace that re-exports the support types')
    parser.add_argument('--output', '-o', help='Output file (default: stdout)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose output for debugging')

    args = parser.parse_args(argv)

    # Override with environment variables if set
    if 'BRIDGEGEN_FEATURES' in os.environ:
        args.feature = [os.environ['BRIDGEGEN_FEATURES']]
    if 'BRIDGEGEN_NAMESPACE' in os.environ:
        args.namespace = [os.environ['BRIDGEGEN_NAMESPACE']]
    args.output = os.environ.get('BRIDGEGEN_OUTPUT', args.output)
    if os.environ.get('BRIDGEGEN_VERBOSE', '').lower() in ('1', 'true', 'yes'):
        args.verbose = True

    try:
        args.features = parse_feature_names(args.feature)
    except ValueError as e:
        parser.error(f"argument --feature/-f: {e}")

    return args


def main(argv=None) -> int:
    """
    Main entry point of the script.
    """
    args = parse_arguments(argv)

    includes = [Include(path, IncludeKind.QUOTED) for path in args.include]
    includes += [Include(path, IncludeKind.BRACKETED) for path in args.system_include]

    generator = SupportHeaderGenerator(args.features, includes, args.namespace, args.verbose)
    header = generator.generate()

    for warning in generator.warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    if header is None:
        for error in generator.errors:
            print(f"Error: {error}", file=sys.stderr)
        print("Support header generation failed.", file=sys.stderr)
        return 1

    if args.output:
        output_dir = os.path.dirname(args.output)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(header)
        print(f"Support header written to {args.output}.")
    else:
        sys.stdout.write(header)
    return 0


if __name__ == '__main__':
    sys.exit(main())
