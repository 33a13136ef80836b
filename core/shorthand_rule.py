"""
Shorthand Rule Module
The enforces-shorthand lint rule: reports shorthand candidates in a source
file and supplies the rewritten class strings as fixes.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from utils.file_utils import filetype_for, read_file_content

from .class_extractor import ClassExtractor, ClassOccurrence
from .errors import ShorthandInvariantError
from .lint_config import LintConfig
from .shorthand_analyzer import ShorthandAnalyzer

logger = logging.getLogger(__name__)

RULE_ID = 'enforces-shorthand'
MESSAGE_TEMPLATE = "Classnames '{classnames}' could be replaced by the '{shorthand}' shorthand!"

@dataclass(frozen=True)
class Fix:
    start: int
    end: int
    text: str

@dataclass
class Diagnostic:
    message: str
    line: int
    column: int
    classnames: List[str]
    shorthand: str
    fix: Optional[Fix] = None
    rule_id: str = RULE_ID

    def to_dict(self) -> Dict[str, Any]:
        return {
            'ruleId': self.rule_id,
            'message': self.message,
            'line': self.line,
            'column': self.column,
            'classnames': self.classnames,
            'shorthand': self.shorthand,
            'fix': self.fix.__dict__ if self.fix else None,
        }

@dataclass
class LintReport:
    path: Optional[str]
    source: str
    diagnostics: List[Diagnostic] = field(default_factory=list)
    errors: List[Dict[str, Any]] = field(default_factory=list)
    fixed_source: str = ''

    @property
    def fixable(self) -> bool:
        return self.fixed_source != self.source

    def to_dict(self) -> Dict[str, Any]:
        return {
            'path': self.path,
            'diagnostics': [diagnostic.to_dict() for diagnostic in self.diagnostics],
            'errors': self.errors,
            'fixable': self.fixable,
        }

def format_message(classnames: Sequence[str], shorthand: str) -> str:
    return MESSAGE_TEMPLATE.format(classnames=', '.join(classnames), shorthand=shorthand)

def apply_fixes(source: str, fixes: Sequence[Fix]) -> str:
    """Apply non-overlapping fixes; a fix overlapping an earlier one is dropped."""
    applied = []
    last_end = -1
    for fix in sorted(fixes, key=lambda f: (f.start, f.end)):
        if fix.start < last_end:
            logger.warning(f"Dropping overlapping fix at offset {fix.start}")
            continue
        applied.append(fix)
        last_end = fix.end
    for fix in reversed(applied):
        source = source[:fix.start] + fix.text + source[fix.end:]
    return source

class ShorthandRule:
    def __init__(self, config: Optional[LintConfig] = None):
        self.config = config or LintConfig()
        self.analyzer = ShorthandAnalyzer(self.config)
        self.extractor = ClassExtractor(self.config)

    def _fix_for(self, occurrence: ClassOccurrence, fixed_string: str) -> Fix:
        # Keep surrounding whitespace of the original value
        value = occurrence.value
        leading = value[:len(value) - len(value.lstrip())]
        trailing = value[len(value.rstrip()):] if value.strip() else ''
        return Fix(occurrence.start, occurrence.end, f'{leading}{fixed_string}{trailing}')

    def check_occurrence(self, occurrence: ClassOccurrence) -> List[Diagnostic]:
        """Diagnostics for one class string; ShorthandInvariantError propagates."""
        found = []

        def report(classnames: List[str], shorthand: str):
            found.append((classnames, shorthand))

        result = self.analyzer.analyze(occurrence.value, report=report)
        if not result.has_shorthands:
            return []
        fix = self._fix_for(occurrence, result.fixed_string)
        return [
            Diagnostic(
                message=format_message(classnames, shorthand),
                line=occurrence.line,
                column=occurrence.column,
                classnames=classnames,
                shorthand=shorthand,
                fix=fix,
            )
            for classnames, shorthand in found
        ]

    def check(self, content: str, filetype: str, path: Optional[str] = None) -> LintReport:
        """Lint one source text."""
        report = LintReport(path=path, source=content)
        fixes = []
        for occurrence in self.extractor.extract(content, filetype):
            try:
                diagnostics = self.check_occurrence(occurrence)
            except ShorthandInvariantError as e:
                logger.error(f"Internal error on class string at {path or '<input>'}:"
                             f"{occurrence.line}:{occurrence.column}: {e}", exc_info=True)
                report.errors.append({
                    'line': occurrence.line,
                    'column': occurrence.column,
                    'classes': occurrence.value,
                    'error': str(e),
                })
                continue
            if diagnostics:
                report.diagnostics.extend(diagnostics)
                fixes.append(diagnostics[0].fix)
        report.fixed_source = apply_fixes(content, fixes)
        logger.debug(f"{path or '<input>'}: {len(report.diagnostics)} diagnostic(s)")
        return report

    def check_file(self, file_path: Union[str, Path]) -> LintReport:
        """Lint a file on disk, its filetype derived from the extension."""
        try:
            path = Path(file_path)
            filetype = filetype_for(path)
            if filetype is None:
                raise ValueError(f"Unsupported file extension: {path.suffix}")
            content = read_file_content(path)
            return self.check(content, filetype, path=str(path))
        except Exception as e:
            logger.error(f"Error linting file {file_path}: {str(e)}", exc_info=True)
            raise
