#!/usr/bin/env python3
"""
Tailwind Shorthand Lint
Main entry point: reports class groups that can be collapsed into a shorthand.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from core.errors import ConfigError
from core.lint_config import load_config, resolve_tailwind_options
from core.shorthand_analyzer import ShorthandAnalyzer
from core.shorthand_rule import ShorthandRule
from utils import file_utils

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DIAGNOSTICS = 1
EXIT_INTERNAL_ERROR = 2

def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tailwind-shorthand',
        description='Detect Tailwind classes that can be merged into a shorthand (e.g. mt-0 mb-0 -> my-0).',
    )
    parser.add_argument('paths', nargs='*', help='Files or directories to lint')
    parser.add_argument('--class', dest='class_string', help='Analyze a single class string instead of files')
    parser.add_argument('--config', help='Path to a JSON lint config (default: ./.shorthandrc.json)')
    parser.add_argument('--fix', action='store_true', help='Rewrite files with the shorthand classes')
    parser.add_argument('--format', choices=('text', 'json'), default='text', help='Output format')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser

def run_class_string(analyzer: ShorthandAnalyzer, class_string: str, output_format: str) -> int:
    result = analyzer.analyze(class_string)
    if output_format == 'json':
        print(json.dumps(result.to_dict(), indent=2))
    else:
        for group in result.groups:
            print(f"{', '.join(group.source_classnames)} -> {group.shorthand}")
        print(result.fixed_string)
    return EXIT_DIAGNOSTICS if result.has_shorthands else EXIT_OK

def run_files(rule: ShorthandRule, paths: List[str], fix: bool, output_format: str) -> int:
    files = file_utils.collect_files(paths)
    logger.info(f"Linting {len(files)} file(s): {file_utils.count_by_filetype(files)}")

    reports = []
    failed = False
    for file_path in files:
        try:
            report = rule.check_file(file_path)
        except (OSError, ValueError) as e:
            print(f"{file_path}: error: {e}", file=sys.stderr)
            failed = True
            continue
        if fix and report.fixable:
            file_utils.write_file_content(file_path, report.fixed_source)
            logger.info(f"Fixed {file_path}")
        reports.append(report)

    remaining = sum(len(report.diagnostics) for report in reports if not (fix and report.fixable))
    defects = sum(len(report.errors) for report in reports)

    if output_format == 'json':
        print(json.dumps([report.to_dict() for report in reports], indent=2))
    else:
        for report in reports:
            for diagnostic in report.diagnostics:
                status = ' (fixed)' if fix and report.fixable else ''
                print(f"{report.path}:{diagnostic.line}:{diagnostic.column}  "
                      f"{diagnostic.message}  {diagnostic.rule_id}{status}")
            for error in report.errors:
                print(f"{report.path}:{error['line']}:{error['column']}  internal error: {error['error']}",
                      file=sys.stderr)
        total = sum(len(report.diagnostics) for report in reports)
        print(f"{total} shorthand candidate(s) in {len(reports)} file(s)")

    if defects or failed:
        return EXIT_INTERNAL_ERROR
    return EXIT_DIAGNOSTICS if remaining else EXIT_OK

def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    parser = create_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    if not args.paths and args.class_string is None:
        parser.error('provide at least one path or --class')

    try:
        config = resolve_tailwind_options(load_config(args.config))
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INTERNAL_ERROR

    if args.class_string is not None:
        return run_class_string(ShorthandAnalyzer(config), args.class_string, args.format)
    return run_files(ShorthandRule(config), args.paths, args.fix, args.format)

if __name__ == "__main__":
    sys.exit(main())
