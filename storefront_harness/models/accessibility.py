# models/accessibility.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Tuple


class ImpactLevel(str, Enum):
    MINOR = 'minor'
    MODERATE = 'moderate'
    SERIOUS = 'serious'
    CRITICAL = 'critical'

    @classmethod
    def parse(cls, value) -> Optional['ImpactLevel']:
        if not value:
            return None
        try:
            return cls(str(value).lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class AccessibilityFinding:
    rule_id: str
    description: str
    impact: Optional[ImpactLevel] = None
    affected_node_count: int = 0
    help_url: str = ''

    @classmethod
    def from_axe(cls, raw: Dict) -> 'AccessibilityFinding':
        return cls(
            rule_id=raw.get('id', ''),
            description=raw.get('description', ''),
            impact=ImpactLevel.parse(raw.get('impact')),
            affected_node_count=len(raw.get('nodes') or []),
            help_url=raw.get('helpUrl', ''),
        )

    @property
    def is_severe(self) -> bool:
        return self.impact in (ImpactLevel.SERIOUS, ImpactLevel.CRITICAL)

    def summary(self) -> str:
        impact = self.impact.value if self.impact else 'unknown'
        return f"Rule: {self.rule_id} - {self.description} (Impact: {impact}, Nodes: {self.affected_node_count})"


@dataclass(frozen=True)
class RuleEngineResults:
    violations: Tuple[AccessibilityFinding, ...] = ()
    passes: Tuple[AccessibilityFinding, ...] = ()
    incomplete: Tuple[AccessibilityFinding, ...] = ()


def _verdict(passed: bool) -> str:
    return 'PASS' if passed else 'FAIL'


@dataclass(frozen=True)
class AccessibilityReport:
    alt_tags_valid: bool
    keyboard_navigable: bool
    form_labels_valid: bool
    color_contrast_valid: bool
    violations: Tuple[AccessibilityFinding, ...] = ()
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        object.__setattr__(self, 'violations', tuple(self.violations))

    @property
    def is_compliant(self) -> bool:
        return (
            self.alt_tags_valid and
            self.keyboard_navigable and
            self.form_labels_valid and
            self.color_contrast_valid and
            not self.violations
        )

    @property
    def violation_summaries(self) -> List[str]:
        return [finding.summary() for finding in self.violations]

    def summary(self) -> str:
        # Line order is parsed by downstream consumers; do not reorder.
        return '\n'.join([
            f"Accessibility Report ({self.timestamp:%Y-%m-%d %H:%M:%S})",
            f"- Image Alt Tags: {_verdict(self.alt_tags_valid)}",
            f"- Keyboard Navigation: {_verdict(self.keyboard_navigable)}",
            f"- Form Labels: {_verdict(self.form_labels_valid)}",
            f"- Color Contrast: {_verdict(self.color_contrast_valid)}",
            f"- Axe Violations: {len(self.violations)}",
            f"- Overall Compliance: {_verdict(self.is_compliant)}",
        ])

    def to_dict(self) -> Dict:
        return {
            'timestamp': self.timestamp.isoformat(),
            'alt_tags_valid': self.alt_tags_valid,
            'keyboard_navigable': self.keyboard_navigable,
            'form_labels_valid': self.form_labels_valid,
            'color_contrast_valid': self.color_contrast_valid,
            'violations': [
                {
                    'rule_id': finding.rule_id,
                    'description': finding.description,
                    'impact': finding.impact.value if finding.impact else None,
                    'affected_node_count': finding.affected_node_count,
                    'help_url': finding.help_url,
                }
                for finding in self.violations
            ],
            'is_compliant': self.is_compliant,
        }
