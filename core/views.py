import json
import logging

from django.core.exceptions import RequestDataTooBig
from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from core.constants import METHOD_NOT_ALLOWED_ERROR, dashboard_verses, topic_cards
from services.chat_service import ChatErrorKind, ChatReply, ChatService

logger = logging.getLogger(__name__)


class JsonApiView(View):
    """Base view answering disallowed methods with a JSON 405 body."""

    # OPTIONS is not served, so it falls through to the JSON 405 as well
    http_method_names = [m for m in View.http_method_names if m != "options"]

    def http_method_not_allowed(self, request, *args, **kwargs):
        logger.warning(
            f"Method Not Allowed ({request.method}): {request.path}",
            extra={"status_code": 405},
        )
        response = JsonResponse({"error": METHOD_NOT_ALLOWED_ERROR}, status=405)
        response["Allow"] = ", ".join(self._allowed_methods())
        return response


@method_decorator(csrf_exempt, name="dispatch")
class ChatView(JsonApiView):
    """
    Chat endpoint used by every generator page.

    Expects a JSON body `{"message": str, "chatId": str}` and always answers
    with JSON: `{"response": str}` with status 200 on success and 500 on
    failure.

    CSRF is exempted because the front-end is a separate app authenticated
    through a third-party identity provider.
    """

    def post(self, request):
        try:
            body = json.loads(request.body or b"null")
        except RequestDataTooBig:
            logger.error("Chat request body exceeds DATA_UPLOAD_MAX_MEMORY_SIZE")
            return self._render(ChatReply.failure(ChatErrorKind.INVALID_REQUEST))
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.error("Invalid JSON in chat request")
            return self._render(ChatReply.failure(ChatErrorKind.INVALID_REQUEST))

        if not isinstance(body, dict):
            logger.error("Chat request body is not a JSON object")
            return self._render(ChatReply.failure(ChatErrorKind.INVALID_REQUEST))

        message = body.get("message")
        if message is None:
            message = ""
        if not isinstance(message, str):
            logger.error(
                "Chat request message is not a string",
                extra={"message_type": type(message).__name__},
            )
            return self._render(ChatReply.failure(ChatErrorKind.INVALID_REQUEST))

        chat_id = body.get("chatId")
        if not isinstance(chat_id, str):
            chat_id = None

        reply = ChatService().reply(message, chat_id)
        return self._render(reply)

    @staticmethod
    def _render(reply: ChatReply) -> JsonResponse:
        return JsonResponse({"response": reply.text}, status=reply.status_code)


class TopicsView(JsonApiView):
    """Dashboard catalogue: generator topics and the rotating verses."""

    def get(self, request):
        return JsonResponse(
            {
                "topics": [dict(card) for card in topic_cards],
                "verses": [dict(verse) for verse in dashboard_verses],
            }
        )
