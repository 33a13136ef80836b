"""
Class Extractor Module
Locates class string occurrences, with source offsets, in HTML and JSX/TSX content.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from bs4 import BeautifulSoup

from .lint_config import LintConfig

logger = logging.getLogger(__name__)

ORIGIN_ATTRIBUTE = 'attribute'
ORIGIN_CALLEE = 'callee'

MARKUP_FILETYPES = ('html', 'vue', 'svelte')
SCRIPT_FILETYPES = ('jsx', 'tsx', 'js', 'ts')

OPENING_TAG_RE = re.compile(r'''<[^\s/>]+(?:\s*(?:"[^"]*"|'[^']*'|[^\s"'>/]+|/(?!>)))*\s*/?>''')
MARKUP_ATTRIBUTE_RE = re.compile(r'''(?<![^\s"'])([^\s=/>"']+)\s*=\s*(?:"([^"]*)"|'([^']*)')''')

@dataclass(frozen=True)
class ClassOccurrence:
    value: str
    start: int
    end: int
    line: int
    column: int
    origin: str = ORIGIN_ATTRIBUTE

def offset_to_position(content: str, offset: int) -> Tuple[int, int]:
    """1-based (line, column) of a character offset."""
    line = content.count('\n', 0, offset) + 1
    column = offset - (content.rfind('\n', 0, offset) + 1) + 1
    return line, column

class ClassExtractor:
    def __init__(self, config: Optional[LintConfig] = None):
        self.config = config or LintConfig()
        names = '|'.join(re.escape(name) for name in self.config.class_attributes)
        self.jsx_attribute_re = re.compile(
            rf'''(?<![\w\-:.])(?:{names})\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|'''
            rf'''\{{\s*(?:"(?P<edq>[^"]*)"|'(?P<esq>[^']*)'|`(?P<tpl>[^`]*)`)\s*\}})'''
        ) if names else None
        callees = '|'.join(re.escape(name) for name in self.config.callees)
        self.callee_re = re.compile(rf'(?<![\w.$])(?:{callees})\s*\(') if callees else None

    def extract(self, content: str, filetype: str) -> List[ClassOccurrence]:
        """Unified extraction for markup and script files."""
        occurrences = []
        if filetype in MARKUP_FILETYPES:
            if not self.config.skip_class_attribute:
                occurrences.extend(self.extract_markup(content))
        elif filetype in SCRIPT_FILETYPES:
            if not self.config.skip_class_attribute:
                occurrences.extend(self.extract_jsx(content))
            occurrences.extend(self.extract_callees(content))
        else:
            logger.warning(f"Unsupported filetype '{filetype}', nothing extracted")
            return []

        unique: Dict[int, ClassOccurrence] = {}
        for occurrence in occurrences:
            unique.setdefault(occurrence.start, occurrence)
        return [unique[start] for start in sorted(unique)]

    def _occurrence(self, content: str, start: int, end: int, origin: str) -> ClassOccurrence:
        line, column = offset_to_position(content, start)
        return ClassOccurrence(content[start:end], start, end, line, column, origin)

    def extract_markup(self, content: str) -> List[ClassOccurrence]:
        """Class attributes of every tag, found with BeautifulSoup and located in the raw source."""
        soup = BeautifulSoup(content, 'html.parser')
        wanted = {name.lower() for name in self.config.class_attributes}
        line_starts = [0] + [match.end() for match in re.finditer(r'\n', content)]
        occurrences = []
        for tag in soup.find_all(True):
            if not wanted & set(tag.attrs):
                continue
            if tag.sourceline is None or tag.sourcepos is None:
                logger.debug(f"No source position for <{tag.name}>, skipping")
                continue
            offset = line_starts[tag.sourceline - 1] + tag.sourcepos
            opening = OPENING_TAG_RE.match(content, offset)
            if not opening:
                logger.debug(f"Could not locate opening tag <{tag.name}> at offset {offset}")
                continue
            for attribute in MARKUP_ATTRIBUTE_RE.finditer(content, offset, opening.end()):
                if attribute.group(1).lower() not in wanted:
                    continue
                group = 2 if attribute.group(2) is not None else 3
                occurrences.append(self._occurrence(
                    content, attribute.start(group), attribute.end(group), ORIGIN_ATTRIBUTE))
        return occurrences

    def extract_jsx(self, content: str) -> List[ClassOccurrence]:
        """class/className attributes with static string values."""
        if self.jsx_attribute_re is None:
            return []
        occurrences = []
        for match in self.jsx_attribute_re.finditer(content):
            for group in ('dq', 'sq', 'edq', 'esq', 'tpl'):
                value = match.group(group)
                if value is None:
                    continue
                if group == 'tpl' and '${' in value:
                    logger.debug(f"Skipping template literal with expressions at offset {match.start()}")
                    break
                occurrences.append(self._occurrence(
                    content, match.start(group), match.end(group), ORIGIN_ATTRIBUTE))
                break
        return occurrences

    def extract_callees(self, content: str) -> List[ClassOccurrence]:
        """String literal arguments of class helper calls such as clsx(...)."""
        if self.callee_re is None:
            return []
        occurrences = []
        for match in self.callee_re.finditer(content):
            for start, end in self._call_string_literals(content, match.end()):
                value = content[start:end]
                if '${' in value or '\\' in value:
                    continue
                occurrences.append(self._occurrence(content, start, end, ORIGIN_CALLEE))
        return occurrences

    def _call_string_literals(self, content: str, position: int) -> List[Tuple[int, int]]:
        """(start, end) spans of string literal contents up to the closing parenthesis."""
        literals = []
        depth = 1
        index = position
        while index < len(content) and depth:
            char = content[index]
            if char in '"\'`':
                closing = self._closing_quote(content, index)
                if closing == -1:
                    break
                literals.append((index + 1, closing))
                index = closing + 1
                continue
            if char in '([{':
                depth += 1
            elif char in ')]}':
                depth -= 1
            index += 1
        return literals

    @staticmethod
    def _closing_quote(content: str, start: int) -> int:
        quote = content[start]
        index = start + 1
        while index < len(content):
            if content[index] == '\\':
                index += 2
                continue
            if content[index] == quote:
                return index
            index += 1
        return -1
