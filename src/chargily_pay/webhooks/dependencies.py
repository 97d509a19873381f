"""
FastAPI integration for webhook endpoints.

Usage:
    ```python
    verifier = WebhookVerifier(secret_key=settings.webhook_secret)

    @app.post("/webhooks/chargily")
    async def chargily_webhook(event: WebhookEvent = Depends(verifier)):
        ...
    ```
"""

import logging

from fastapi import HTTPException, Request, status

from ..constants import SIGNATURE_HEADER
from ..engine.exceptions import DeserializationError, SignatureMismatchError
from .events import WebhookEvent, construct_event


logger = logging.getLogger(__name__)


class WebhookVerifier:
    """Callable dependency returning the verified event of a webhook request.

    Responds 400 when the signature header is missing or the body is not an
    event, and 403 when the signature does not match.
    """

    def __init__(self, secret_key: str, header_name: str = SIGNATURE_HEADER):
        self._secret_key = secret_key
        self.header_name = header_name

    async def __call__(self, request: Request) -> WebhookEvent:
        signature = request.headers.get(self.header_name)
        if not signature:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Missing {self.header_name} header",
            )

        payload = await request.body()
        try:
            return construct_event(payload, signature, self._secret_key)
        except SignatureMismatchError:
            logger.warning("Rejected webhook with invalid signature from %s", request.client)
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Invalid webhook signature",
            )
        except DeserializationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            )
