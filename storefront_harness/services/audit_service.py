# services/audit_service.py
import logging
from datetime import datetime
from typing import Dict, Optional
from storefront_harness.config.settings import Config
from storefront_harness.core.accessibility import AccessibilityAuditor
from storefront_harness.core.driver_session import DriverSession
from storefront_harness.core.wait_engine import WaitEngine
from storefront_harness.pages.support import PageSupport
from storefront_harness.utils.artifacts import save_results_to_file, write_accessibility_report


class AuditService:
    def __init__(self, config=Config, logger: Optional[logging.Logger] = None,
                 session_factory=DriverSession.launch, rule_engine=None):
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.session_factory = session_factory
        self.rule_engine = rule_engine

    def _open(self, url: str):
        session = self.session_factory(self.config, self.logger)
        waits = WaitEngine(session, timeout=self.config.TIMEOUT, logger=self.logger)
        page = PageSupport(session, waits, 'AuditService', config=self.config, logger=self.logger)
        try:
            page.navigate(url)
        except Exception:
            session.quit()
            raise
        return session, page

    def run_audit(self, url: Optional[str] = None) -> Dict:
        url = url or self.config.BASE_URL
        self.logger.info(f"Starting accessibility audit of {url}")
        session, _ = self._open(url)
        try:
            report = AccessibilityAuditor(session, self.rule_engine, logger=self.logger).scan()
            report_path = write_accessibility_report(report, self.config.REPORT_PATH, log=self.logger)
        finally:
            session.quit()
        results = {
            'kind': 'audit',
            'url': url,
            'report': report.to_dict(),
            'summary': report.summary(),
            'report_path': str(report_path) if report_path else None,
        }
        results_path = save_results_to_file(results, directory=self.config.RESULTS_DIR, log=self.logger)
        results['results_path'] = str(results_path) if results_path else None
        self.logger.info(f"Audit of {url} finished - compliant: {report.is_compliant}")
        return results

    def run_smoke(self, url: Optional[str] = None) -> Dict:
        url = url or self.config.BASE_URL
        self.logger.info(f"Starting smoke run against {url}")
        started = datetime.now()
        session, page = self._open(url)
        try:
            results = {
                'kind': 'smoke',
                'url': url,
                'title': page.page_title(),
                'current_url': page.current_url(),
                'header_present': page.is_header_present(),
                'footer_present': page.is_footer_present(),
                'navigation_present': page.is_navigation_present(),
            }
        finally:
            session.quit()
        results['passed'] = bool(results['title']) and bool(results['current_url'])
        results['duration_seconds'] = round((datetime.now() - started).total_seconds(), 2)
        self.logger.info(f"Smoke run against {url} {'passed' if results['passed'] else 'failed'}")
        return results
