import fastapi
from contextlib import asynccontextmanager
from fastapi import Request
from . import checkout, publishable_key
from managers.stripe_manager import get_stripe_client
from utils.errors import HandlerError
from utils.response import json_response


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    # build the Stripe client once so a missing key is logged at startup
    get_stripe_client()
    yield


app = fastapi.FastAPI(lifespan=lifespan)


@app.exception_handler(HandlerError)
async def handler_error(request: Request, exc: HandlerError):
    return json_response(exc.status_code, exc.to_payload(), origin=exc.origin)


app.include_router(checkout.router)
app.include_router(publishable_key.router)
