"""
Shorthand Analyzer Module
Entry point tying tokenizer, matcher and rewriter together for one class string.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .class_rewriter import rewrite_class_string
from .class_token import ClassToken, tokenize
from .lint_config import LintConfig
from .shorthand_families import select_families
from .shorthand_matcher import MatchGroup, match_tokens

logger = logging.getLogger(__name__)

# Called once per group with (source classnames, shorthand)
ReportCallback = Callable[[List[str], str], None]

@dataclass
class AnalysisResult:
    fixed_string: str
    groups: List[MatchGroup] = field(default_factory=list)
    tokens: List[ClassToken] = field(default_factory=list)

    @property
    def has_shorthands(self) -> bool:
        return bool(self.groups)

    def to_dict(self) -> Dict:
        return {
            'fixedString': self.fixed_string,
            'groups': [group.to_dict() for group in self.groups],
        }

class ShorthandAnalyzer:
    def __init__(self, config: Optional[LintConfig] = None):
        self.config = config or LintConfig()
        self.families = select_families(self.config.families)

    def tokenize(self, class_string: str) -> List[ClassToken]:
        return tokenize(class_string, self.families,
                        prefix=self.config.prefix, separator=self.config.separator)

    def analyze(self, class_string: str, report: Optional[ReportCallback] = None) -> AnalysisResult:
        """Find shorthand candidates in one class string and rewrite it.

        ShorthandInvariantError propagates before `report` is called, so a
        defective match never produces diagnostics.
        """
        tokens = self.tokenize(class_string)
        groups = match_tokens(tokens, self.families)
        fixed_string = rewrite_class_string(tokens, groups, self.config.placement)
        if groups:
            logger.debug(f"'{class_string}' -> '{fixed_string}'")
        if report is not None:
            for group in groups:
                report(group.source_classnames, group.shorthand)
        return AnalysisResult(fixed_string=fixed_string, groups=groups, tokens=tokens)

def analyze(class_string: str, report: Optional[ReportCallback] = None,
            config: Optional[LintConfig] = None) -> AnalysisResult:
    return ShorthandAnalyzer(config).analyze(class_string, report)
