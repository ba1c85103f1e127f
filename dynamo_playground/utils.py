# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Utility functions for the application."""

import inspect
import uuid


def get_function_name() -> str:
    """Get function name."""
    return inspect.currentframe().f_back.f_code.co_name  # type: ignore


def generate_record_id() -> str:
    """Generate a new record sort key."""
    return str(uuid.uuid4())
