# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""API routes."""

from fastapi import APIRouter

from dynamo_playground.api.routes.objects import router as objects_router

router = APIRouter()
# Health and metrics are mounted separately under /api in app.py
router.include_router(objects_router)
