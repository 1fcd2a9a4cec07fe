import json
import logging
from typing import Callable, List, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_core.runnables import RunnableConfig
from langchain_deepseek import ChatDeepSeek
from langgraph.graph import START, MessagesState, StateGraph
from pydantic import ValidationError

from ..config.settings import MODEL_NAME, BASE_URL, TEMPERATURE, MAX_TOKENS, REQUEST_TIMEOUT, LANGUAGE_POLICY
from ..exceptions import EmptyMessage, InvalidPayload
from ..models.chat import ChatRequest, ChatResult, UpstreamFailure, UpstreamOutcome, UpstreamReply
from .language import resolve_language
from .prompts import FALLBACK_RESPONSES, SYSTEM_PROMPTS

logger = logging.getLogger(__name__)


def parse_chat_request(raw_body: bytes) -> ChatRequest:
    """Decode and validate a request body.

    An empty body is treated as ``{}``. The returned request carries the
    trimmed message.

    Raises:
        InvalidPayload: the body is not a JSON object of the expected shape
        EmptyMessage: the message is missing or whitespace only
    """
    try:
        data = json.loads(raw_body or b"{}")
    except ValueError as e:
        logger.warning(f"Rejected request body that is not valid JSON: {str(e)}")
        raise InvalidPayload() from e

    if not isinstance(data, dict):
        logger.warning(f"Rejected JSON body of type {type(data).__name__}")
        raise InvalidPayload()

    try:
        request = ChatRequest.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Rejected request body with invalid fields: {e.error_count()} error(s)")
        raise InvalidPayload() from e

    message = (request.message or "").strip()
    if not message:
        raise EmptyMessage()
    return ChatRequest(message=message, language=request.language)


def build_messages(message: str, language: str) -> List[BaseMessage]:
    return [
        SystemMessage(content=SYSTEM_PROMPTS[language]),
        HumanMessage(content=message),
    ]


def build_chat_result(outcome: UpstreamOutcome, language: str) -> ChatResult:
    """Map an upstream outcome to the response body; failures get the fallback text."""
    if isinstance(outcome, UpstreamReply):
        return ChatResult(success=True, response=outcome.content, language=language, model=outcome.model)
    return ChatResult(
        success=False,
        response=FALLBACK_RESPONSES[language],
        error=outcome.error,
        language=language,
    )


class ChatService:
    def __init__(self, llm_factory: Optional[Callable[[str], BaseChatModel]] = None,
                 language_policy: str = LANGUAGE_POLICY):
        self.llm_factory = llm_factory or self._create_llm
        self.language_policy = language_policy
        self.workflow = self._setup_workflow()
        self.workflow_app = self.workflow.compile()

    @staticmethod
    def _create_llm(api_key: str) -> ChatDeepSeek:
        # One attempt only: a failed call goes straight to the fallback reply
        return ChatDeepSeek(base_url=BASE_URL,
                            api_key=api_key,
                            model=MODEL_NAME,
                            temperature=TEMPERATURE,
                            max_tokens=MAX_TOKENS,
                            streaming=False,
                            timeout=REQUEST_TIMEOUT,
                            max_retries=0)

    def _setup_workflow(self):
        workflow = StateGraph(MessagesState)
        workflow.add_edge(START, "model")
        workflow.add_node("model", self._call_model)
        return workflow

    async def _call_model(self, state: MessagesState, config: RunnableConfig):
        logger.info(f"Request message count: {len(state['messages'])}")
        llm = self.llm_factory(config["configurable"]["api_key"])
        reply = await llm.ainvoke(state["messages"])
        return {"messages": [reply]}

    async def call_upstream(self, messages: List[BaseMessage], api_key: str) -> UpstreamOutcome:
        try:
            output = await self.workflow_app.ainvoke(
                {"messages": messages},
                config={"configurable": {"api_key": api_key}}
            )
        except Exception as e:
            logger.error(f"DeepSeek API call failed: {str(e)}")
            status_code = getattr(e, "status_code", None)
            if status_code is not None:
                logger.error(f"DeepSeek API error status: {status_code}")
                logger.error(f"DeepSeek API error body: {getattr(e, 'body', None)}")
            return UpstreamFailure(error=str(e) or e.__class__.__name__)

        reply = output["messages"][-1]
        content = reply.content if isinstance(reply.content, str) else ""
        if not content.strip():
            logger.error(f"DeepSeek API returned no completion content: {reply!r}")
            return UpstreamFailure(error="Malformed API response: no completion content")

        return UpstreamReply(content=content, model=reply.response_metadata.get("model_name"))

    async def process_chat(self, request: ChatRequest, api_key: str) -> ChatResult:
        language = resolve_language(request.message, request.language, self.language_policy)
        logger.info(f"Response language: {language} (policy: {self.language_policy})")

        messages = build_messages(request.message, language)
        logger.info("Calling DeepSeek API...")
        outcome = await self.call_upstream(messages, api_key)

        if isinstance(outcome, UpstreamReply):
            logger.info(f"AI reply length: {len(outcome.content)}")
            logger.info(f"AI reply preview: {outcome.content[:100]}")
        else:
            logger.info("Returning fallback reply")
        return build_chat_result(outcome, language)
