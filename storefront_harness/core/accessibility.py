# core/accessibility.py
import logging
from abc import ABC, abstractmethod
from typing import List, Optional
from axe_selenium_python import Axe
from storefront_harness.models.accessibility import (
    AccessibilityFinding,
    AccessibilityReport,
    RuleEngineResults,
)
from storefront_harness.models.locator import Locator

IMAGES = Locator.tag("img", "images")
INTERACTIVE_ELEMENTS = Locator.css(
    "a, button, input, select, textarea, [tabindex], [role='button'], [role='link']", "interactive elements")
FORM_FIELDS = Locator.css("input, select, textarea", "form fields")
HEADINGS = Locator.css("h1, h2, h3, h4, h5, h6", "headings")
H1 = Locator.tag("h1", "h1 headings")
LABELS = Locator.tag("label", "labels")

KEYBOARD_SAMPLE_SIZE = 10
COLOR_CONTRAST_RULE = 'color-contrast'


class RuleEngine(ABC):
    @abstractmethod
    def scan(self, session) -> RuleEngineResults:
        """Run the rule set against the session's current document."""


class AxeRuleEngine(RuleEngine):
    def scan(self, session) -> RuleEngineResults:
        axe = Axe(session.driver)
        axe.inject()
        raw = axe.run()
        return RuleEngineResults(
            violations=tuple(AccessibilityFinding.from_axe(v) for v in raw.get('violations', [])),
            passes=tuple(AccessibilityFinding.from_axe(p) for p in raw.get('passes', [])),
            incomplete=tuple(AccessibilityFinding.from_axe(i) for i in raw.get('incomplete', [])),
        )


class AccessibilityAuditor:
    """Runs independent DOM checks plus a rule-engine scan and merges them into one report.

    Every check is callable on its own and degrades to a negative or empty
    result instead of raising, so one brittle selector cannot abort the scan.
    """

    def __init__(self, session, rule_engine: Optional[RuleEngine] = None, logger: Optional[logging.Logger] = None):
        self.session = session
        self.rule_engine = rule_engine or AxeRuleEngine()
        self.logger = logger or logging.getLogger(__name__)

    def check_image_alt_tags(self) -> bool:
        try:
            images = self.session.find_elements(IMAGES)
        except Exception as e:
            self.logger.error(f"Error checking image alt tags: {e}")
            return False
        missing = 0
        for image in images:
            try:
                alt = image.get_attribute('alt')
            except Exception as e:
                self.logger.warning(f"Could not read alt attribute: {e}")
                missing += 1
                continue
            if not alt or not alt.strip():
                missing += 1
        self.logger.info(f"Images without alt text: {missing}/{len(images)}")
        return missing == 0

    def check_keyboard_navigation(self) -> bool:
        # Passes when any sampled element is reachable; this is a smoke check, not full coverage.
        try:
            elements = self.session.find_elements(INTERACTIVE_ELEMENTS)[:KEYBOARD_SAMPLE_SIZE]
        except Exception as e:
            self.logger.error(f"Error checking keyboard navigation: {e}")
            return False
        reachable = 0
        for element in elements:
            try:
                self.session.focus(element)
                if element.is_displayed() and element.is_enabled():
                    reachable += 1
            except Exception:
                continue
        self.logger.info(f"Keyboard reachable elements: {reachable}/{len(elements)}")
        return reachable > 0

    def count_unlabeled_form_fields(self) -> int:
        fields = self.session.find_elements(FORM_FIELDS)
        label_targets = {label.get_attribute('for') for label in self.session.find_elements(LABELS)}
        unlabeled = 0
        for field in fields:
            try:
                if not self._has_label(field, label_targets):
                    unlabeled += 1
            except Exception as e:
                self.logger.warning(f"Could not inspect form field: {e}")
                unlabeled += 1
        self.logger.info(f"Unlabeled form fields: {unlabeled}/{len(fields)}")
        return unlabeled

    def _has_label(self, field, label_targets) -> bool:
        field_id = field.get_attribute('id')
        if field_id and field_id in label_targets:
            return True
        if field.get_attribute('aria-label') or field.get_attribute('aria-labelledby'):
            return True
        # Placeholder is accepted as a lesser fallback.
        return bool(field.get_attribute('placeholder'))

    def check_form_labels(self) -> bool:
        try:
            return self.count_unlabeled_form_fields() == 0
        except Exception as e:
            self.logger.error(f"Error checking form labels: {e}")
            return False

    def run_rule_engine(self) -> Optional[RuleEngineResults]:
        try:
            results = self.rule_engine.scan(self.session)
        except Exception as e:
            self.logger.error(f"Accessibility rule engine failed: {e}")
            return None
        self.logger.info(f"Rule engine reported {len(results.violations)} violations, {len(results.passes)} passes, "
                         f"{len(results.incomplete)} incomplete")
        return results

    def check_color_contrast(self, results: Optional[RuleEngineResults] = None) -> bool:
        results = results or self.run_rule_engine()
        if results is None:
            return False
        failing = [f for f in results.violations if COLOR_CONTRAST_RULE in f.rule_id]
        self.logger.info(f"Color contrast violations: {len(failing)}")
        return not failing

    def collect_violations(self, results: Optional[RuleEngineResults] = None) -> List[AccessibilityFinding]:
        results = results or self.run_rule_engine()
        if results is None:
            return []
        for finding in results.violations:
            self.logger.warning(finding.summary())
        return list(results.violations)

    def check_heading_structure(self) -> bool:
        try:
            headings = self.session.find_elements(HEADINGS)
            titled_h1 = [h for h in self.session.find_elements(H1) if (h.text or '').strip()]
        except Exception as e:
            self.logger.error(f"Error checking heading structure: {e}")
            return False
        self.logger.info(f"Headings: {len(headings)}, non-empty h1: {len(titled_h1)}")
        return len(headings) > 0 and len(titled_h1) <= 1

    def scan(self) -> AccessibilityReport:
        self.logger.info("Running accessibility scan")
        results = self.run_rule_engine()
        report = AccessibilityReport(
            alt_tags_valid=self.check_image_alt_tags(),
            keyboard_navigable=self.check_keyboard_navigation(),
            form_labels_valid=self.check_form_labels(),
            color_contrast_valid=results is not None and self.check_color_contrast(results),
            violations=self.collect_violations(results) if results is not None else (),
        )
        self.logger.info(f"Accessibility scan complete - compliant: {report.is_compliant}")
        return report
