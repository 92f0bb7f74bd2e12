"""Live-site scenarios. Run explicitly with ``pytest scenarios``; they need a real browser."""

pytest_plugins = ["storefront_harness.testing.pytest_plugin"]


def pytest_configure(config):
    for marker in ('ui', 'functional', 'integration', 'accessibility', 'smoke'):
        config.addinivalue_line('markers', f"{marker}: {marker} scenarios against the live storefront")
