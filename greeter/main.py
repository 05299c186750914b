from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

GREETING = "Hello World from Kubernetes!"

# Only GET / is served, so the generated docs routes stay off.
app = FastAPI(
    title="Kube Greeter",
    version="1.0.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


@app.exception_handler(StarletteHTTPException)
async def not_found(request: Request, exc: StarletteHTTPException):
    # A known path with the wrong method is still an unmatched route.
    if exc.status_code == 405:
        exc = StarletteHTTPException(status_code=404)
    return await http_exception_handler(request, exc)


@app.get("/", response_class=HTMLResponse)
def greet() -> str:
    return GREETING
