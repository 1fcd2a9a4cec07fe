import logging
import logging.config
from typing import Optional
from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from aneslink.config.settings import API_TITLE, API_DESCRIPTION, API_VERSION, CORS_HEADERS, LOGGING_CONFIG, get_deepseek_api_key
from aneslink.exceptions import ChatProxyError, ConfigurationError, InternalError, MethodNotAllowed
from aneslink.services.chat_service import ChatService, parse_chat_request
from contextlib import asynccontextmanager

# Configure logging
logging.config.dictConfig(LOGGING_CONFIG)
logger = logging.getLogger(__name__)

# Initialize chat service
chat_service = None

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Initialize chat service
    global chat_service
    chat_service = ChatService()
    yield

def get_chat_service() -> ChatService:
    return chat_service

# Initialize FastAPI app
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    lifespan=lifespan
)

@app.exception_handler(ChatProxyError)
async def chat_proxy_error_handler(request: Request, exc: ChatProxyError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=CORS_HEADERS)

@app.exception_handler(StarletteHTTPException)
async def starlette_http_error_handler(request: Request, exc: StarletteHTTPException):
    # Any verb other than POST and OPTIONS on /chat
    if exc.status_code == 405 and request.url.path == "/chat":
        logger.warning(f"Rejected {request.method} request to {request.url.path}")
        return await chat_proxy_error_handler(request, MethodNotAllowed())
    return await http_exception_handler(request, exc)

@app.options("/chat")
async def chat_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)

@app.post("/chat")
async def chat(request: Request,
               api_key: Optional[str] = Depends(get_deepseek_api_key),
               service: ChatService = Depends(get_chat_service)):
    logger.info(f"Chat request received: {request.method}")
    try:
        chat_request = parse_chat_request(await request.body())
        logger.info(f"User message: {chat_request.message[:100]}")
        logger.info(f"Requested language: {chat_request.language}")

        logger.info(f"DEEPSEEK_API_KEY configured: {api_key is not None}")
        if api_key is None:
            raise ConfigurationError()

        result = await service.process_chat(chat_request, api_key)
        logger.info(f"Chat response success: {result.success}")
        return JSONResponse(content=result.model_dump(exclude_none=True), headers=CORS_HEADERS)
    except ChatProxyError as ce:
        logger.info(f"Chat request rejected: {ce.error}")
        raise ce
    except Exception as e:
        logger.error(f"Error in chat endpoint: {str(e)}")
        raise InternalError(str(e)) from e

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
