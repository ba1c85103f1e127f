# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Application entry point."""

import os

import uvicorn
from loguru import logger

from dynamo_playground.api.app import create_app
from dynamo_playground.config import get_settings

logger.info('Starting application creation')
app = create_app()

if __name__ == '__main__':
    settings = get_settings()

    # Check for hot reload environment variable
    hot_reload = os.environ.get('HOT_RELOAD', 'false').lower() == 'true'

    # Hot reload requires a single worker
    workers = 1 if hot_reload else int(os.environ.get('WORKERS', '1'))

    if hot_reload:
        logger.info(
            'Hot reload enabled - server will automatically restart when files change'
        )
    logger.info(f'Running with {workers} worker processes')

    uvicorn.run(
        'dynamo_playground.api.main:app',
        host=settings.api.host,
        port=settings.api.port,
        reload=hot_reload,
        reload_dirs=['dynamo_playground'],
        workers=workers,
        log_level=settings.api.log_level.lower(),
    )
