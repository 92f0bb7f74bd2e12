# main.py
import os
import sys
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from storefront_harness.config.settings import Config
from storefront_harness.routes.api import router as api_router
from storefront_harness.services.audit_service import AuditService
from storefront_harness.utils.logging_setup import configure_logging, shutdown_logging
import uvicorn


def create_app():
    app = FastAPI(title="Storefront Harness")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router)
    return app


def run_cli(logger, url=None, smoke=False):
    service = AuditService(Config, logger=logger)
    try:
        results = service.run_smoke(url) if smoke else service.run_audit(url)
    except KeyboardInterrupt:
        logger.warning('Run interrupted by user.')
        return 130
    except Exception as e:
        logger.error(f'Run failed with error: {e}')
        return 1
    if smoke:
        return 0 if results['passed'] else 1
    print(results['summary'])
    return 0 if results['report']['is_compliant'] else 1


def run_api():
    uvicorn.run(create_app(), host="0.0.0.0", port=int(os.getenv("PORT", 8000)))


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    mode = os.getenv('MODE', 'api').lower()
    if argv and argv[0] in ('api', 'cli'):
        mode = argv[0]
        argv = argv[1:]
    logger = configure_logging(Config.LOG_LEVEL, Config.LOG_DIR)
    try:
        if mode == 'api':
            run_api()
            return 0
        smoke = '--smoke' in argv
        urls = [arg for arg in argv if not arg.startswith('--')]
        return run_cli(logger, urls[0] if urls else None, smoke=smoke)
    finally:
        shutdown_logging(logger)


if __name__ == '__main__':
    sys.exit(main())

# Usage:
#   storefront-harness                      # API server mode (default)
#   storefront-harness cli [URL]            # accessibility audit, exit 1 if not compliant
#   storefront-harness cli --smoke [URL]    # smoke run
#   MODE=cli storefront-harness             # CLI mode via env
