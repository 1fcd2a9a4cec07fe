from typing import Any, Dict, Optional


class ChatProxyError(Exception):
    """Base error rendered as a JSON body with its own status code."""

    status_code = 500
    error = "Internal server error"
    message = "服务器内部错误"

    def __init__(self, message: Optional[str] = None, instructions: Optional[str] = None,
                 details: Optional[str] = None):
        if message is not None:
            self.message = message
        self.instructions = instructions
        self.details = details
        super().__init__(self.message)

    def to_body(self) -> Dict[str, Any]:
        body = {"error": self.error, "message": self.message}
        if self.instructions:
            body["instructions"] = self.instructions
        if self.details is not None:
            body["details"] = self.details
        return body


class MethodNotAllowed(ChatProxyError):
    status_code = 405
    error = "Method not allowed"
    message = "只支持POST请求"


class InvalidPayload(ChatProxyError):
    status_code = 400
    error = "Invalid JSON"
    message = "请求数据格式错误"


class EmptyMessage(ChatProxyError):
    status_code = 400
    error = "Empty message"
    message = "消息不能为空"


class ConfigurationError(ChatProxyError):
    status_code = 500
    error = "API key missing"
    message = "服务器配置错误：请设置DEEPSEEK_API_KEY环境变量"

    def __init__(self, instructions: str = "Add DEEPSEEK_API_KEY to the server environment "
                                           "or to a .env file in the project root, then restart the service"):
        super().__init__(instructions=instructions)


class InternalError(ChatProxyError):
    status_code = 500

    def __init__(self, details: str):
        super().__init__(details=details)
