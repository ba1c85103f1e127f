# Copyright © Amazon.com and Affiliates: This deliverable is considered Developed Content as defined in the AWS Service
# Terms and the SOW between the parties dated 2025.

"""Request context management for middleware."""

import contextlib
import contextvars
import uuid
from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from typing import Any, Optional

from loguru import logger


@dataclass
class RequestState:
    """Request state for the current context."""

    request_id: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


# Module-level so every task spawned for a request sees the same variable
_state_var: contextvars.ContextVar[Optional[RequestState]] = contextvars.ContextVar(
    'request_state', default=None
)


class RequestContext:
    """Access to the request state stored in a context variable."""

    @classmethod
    def get_state(cls) -> RequestState:
        """Get the current request state, creating one outside a request."""
        state = _state_var.get()
        if state is None:
            state = RequestState(request_id=str(uuid.uuid4()))
            _state_var.set(state)
        return state

    @classmethod
    def update_state(cls, **kwargs: Any) -> None:
        """Update the current request state; unknown keys go to metadata."""
        state = cls.get_state()
        for key, value in kwargs.items():
            if hasattr(state, key):
                setattr(state, key, value)
            else:
                state.metadata[key] = value

    @classmethod
    @contextlib.asynccontextmanager
    async def scope(cls) -> AsyncGenerator[RequestState, None]:
        """Run a block with a fresh request state, restoring the previous one after."""
        state = RequestState()
        token = _state_var.set(state)
        try:
            yield state
        finally:
            try:
                _state_var.reset(token)
            except ValueError as e:
                # Token created in a different context
                logger.warning(f'Context variable reset error: {e}')
                _state_var.set(None)
