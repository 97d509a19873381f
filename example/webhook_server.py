from fastapi import Depends, FastAPI

from chargily_pay import ChargilySettings, WebhookEvent, WebhookVerifier
from chargily_pay.webhooks import CHECKOUT_CANCELED, CHECKOUT_FAILED, CHECKOUT_PAID


settings = ChargilySettings.from_env()
verifier = WebhookVerifier(secret_key=settings.signing_secret)

app = FastAPI(title="Chargily webhook receiver")


@app.post("/webhooks/chargily")
async def chargily_webhook(event: WebhookEvent = Depends(verifier)):
    """Chargily retries until it gets a 2xx, so answer fast."""
    checkout = event.data
    if event.type == CHECKOUT_PAID:
        print(f"Checkout {checkout.id} paid: {checkout.amount} {checkout.currency}")
    elif event.type in (CHECKOUT_FAILED, CHECKOUT_CANCELED):
        print(f"Checkout {checkout.id} not paid: {event.type}")
    return {"received": True}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="localhost", port=8000, log_level="debug")
